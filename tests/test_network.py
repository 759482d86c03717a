import pytest

from owohaptics.network import ConnectionState, Message, Network


class RecordingNetwork(Network):
    def __init__(self):
        super().__init__()
        self.sent = []

    def listen(self):
        return "", ""

    def initialize(self):
        pass

    def send_to(self, message, ip):
        self.sent.append((message, ip))


def test_message_empty_has_no_text_and_no_address():
    assert Message.empty() == Message("", "")


def test_message_is_immutable():
    message = Message("ping", "10.0.0.2")
    with pytest.raises(AttributeError):
        message.value = "pong"
    assert (message.value, message.addressee) == ("ping", "10.0.0.2")


def test_network_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Network()


def test_new_network_is_disconnected_without_addresses():
    network = RecordingNetwork()
    assert network.state is ConnectionState.DISCONNECTED
    assert network.connected_addressees == []
    Network.disconnect(network)
    assert network.state is ConnectionState.DISCONNECTED


def test_connect_records_address_and_state():
    network = RecordingNetwork()
    Network.connect(network, "10.0.0.2")
    Network.connect(network, "10.0.0.3")
    assert network.state is ConnectionState.CONNECTED
    assert network.connected_addressees == ["10.0.0.2", "10.0.0.3"]


def test_send_goes_to_first_connected_address():
    network = RecordingNetwork()
    Network.connect(network, "10.0.0.2")
    Network.connect(network, "10.0.0.3")
    Network.send(network, "hello")
    assert network.sent == [("hello", "10.0.0.2")]


def test_send_without_connection_fails():
    network = RecordingNetwork()
    with pytest.raises(IndexError):
        Network.send(network, "hello")


def test_disconnect_marks_disconnected():
    network = RecordingNetwork()
    Network.connect(network, "10.0.0.2")
    Network.disconnect(network)
    assert network.state is ConnectionState.DISCONNECTED