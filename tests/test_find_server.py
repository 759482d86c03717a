import pytest

from owohaptics.actions import NotifyAbsence, NotifyPresence, SendAuthMessage
from owohaptics.candidates import ConnectionCandidates
from owohaptics.find_server import FindServer
from owohaptics.network import ConnectionState, Network

AUTH_MESSAGE = "7*AUTH*"
SERVER = "10.0.0.5"
OTHER = "10.0.0.9"


class ScriptedNetwork(Network):
    def __init__(self, responses):
        super().__init__()
        self.responses = list(responses)
        self.sent = []
        self.initialized = 0

    def listen(self):
        return self.responses.pop(0) if self.responses else ("", "")

    def initialize(self):
        self.initialized += 1

    def send_to(self, message, ip):
        self.sent.append((message, ip))


def build(*responses):
    network = ScriptedNetwork(responses)
    found = ConnectionCandidates()
    finder = FindServer(
        network,
        NotifyPresence(network, found),
        NotifyAbsence(network, found),
        SendAuthMessage(network, found),
        found,
    )
    return network, found, finder


def run(finder, addressee, times):
    finder.initialize(addressee, AUTH_MESSAGE, "7")
    for _ in range(times):
        finder.execute()


def test_initialize_starts_connecting():
    network, _, finder = build()
    run(finder, [SERVER], 0)
    assert network.state is ConnectionState.CONNECTING
    assert network.initialized == 1
    assert network.sent == []


def test_initialize_authenticates_known_candidates_in_addressee():
    network, found, finder = build()
    found.store(SERVER)
    found.store("10.0.0.6")
    run(finder, [SERVER], 0)
    assert network.sent == [(AUTH_MESSAGE, SERVER)]


def test_execute_without_response_pings_every_addressee():
    network, _, finder = build()
    run(finder, [SERVER, "10.0.0.6"], 1)
    assert network.sent == [("ping", SERVER), ("ping", "10.0.0.6")]


def test_presence_answer_stores_candidate_and_sends_auth():
    network, found, finder = build(("okay", SERVER))
    run(finder, [SERVER], 1)
    assert found.candidates() == [SERVER]
    assert network.sent == [(AUTH_MESSAGE, SERVER)]


def test_verification_connects_and_notifies_absence_first():
    network, _, finder = build(("okay", SERVER), ("pong", SERVER))
    run(finder, [SERVER], 2)
    assert network.state is ConnectionState.CONNECTED
    assert network.connected_addressees == [SERVER]
    assert network.sent[-1] == ("7*GAMEUNAVAILABLE", SERVER)


@pytest.mark.parametrize(
    "addressee, connected",
    [([SERVER], []), (["255.255.255.255"], [OTHER])],
)
def test_verification_sender_must_be_addressed(addressee, connected):
    network, _, finder = build(("pong", OTHER))
    run(finder, addressee, 1)
    assert network.connected_addressees == connected


@pytest.mark.parametrize(
    "closer, state",
    [(SERVER, ConnectionState.CONNECTING), (OTHER, ConnectionState.CONNECTED)],
)
def test_close_only_from_connected_server(closer, state):
    network, _, finder = build(("pong", SERVER), ("OWO_Close", closer))
    run(finder, [SERVER], 2)
    assert network.state is state


def test_scan_without_response_pings_broadcast():
    network, _, finder = build()
    finder.scan()
    assert network.sent == [("ping", "255.255.255.255")]
    assert network.initialized == 1


def test_scan_stores_answering_application():
    network, found, finder = build(("okay", SERVER))
    finder.scan()
    assert found.candidates() == [SERVER]
    assert network.sent == []