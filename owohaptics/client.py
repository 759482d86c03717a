"""The client that ties the network to discovery and messaging."""

from .actions import NotifyAbsence, NotifyPresence, SendAuthMessage, SendEncryptedMessage
from .candidates import ConnectionCandidates
from .find_server import FindServer
from .network import ConnectionState


class Client:
    """Connects to the application and sends messages to it."""

    def __init__(self, network, send_message, find_server, candidates):
        self._network = network
        self._send_message = send_message
        self._find_server = find_server
        self._candidates = candidates

    def start_connection(self, addressee, auth, game_id):
        self._find_server.initialize(addressee, auth, game_id)

    def update_status(self):
        """Advance the handshake unless disconnected."""
        if self.state() is ConnectionState.DISCONNECTED:
            return
        self._find_server.execute()

    def send(self, message):
        self._send_message.execute(message)

    def disconnect(self):
        self._network.disconnect()
        self._candidates.clear()

    def scan(self):
        """Look for applications; only while disconnected."""
        if self.state() is not ConnectionState.DISCONNECTED:
            return
        self._find_server.scan()

    def discovered_apps(self):
        return self._candidates.candidates()

    def is_connected(self):
        return self.state() is ConnectionState.CONNECTED

    def state(self):
        return self._network.state


def create_client(network):
    """Build a client whose parts share the network and the candidates."""
    candidates = ConnectionCandidates()
    find_server = FindServer(
        network,
        NotifyPresence(network, candidates),
        NotifyAbsence(network, candidates),
        SendAuthMessage(network, candidates),
        candidates,
    )
    return Client(network, SendEncryptedMessage(network), find_server, candidates)