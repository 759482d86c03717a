"""Discovery of the application and the handshake that connects to it."""

from .fields import BROADCAST_ADDRESS
from .network import ConnectionState

VERIFICATION_RESPONSE = "pong"
PRESENCE_NOTIFICATION = "okay"
CLOSE_NOTIFICATION = "OWO_Close"


class FindServer:
    """Drives discovery, authentication and disconnection detection."""

    def __init__(self, network, notify_presence, notify_absence, send_auth, candidates):
        self._network = network
        self._notify_presence = notify_presence
        self._notify_absence = notify_absence
        self._send_auth = send_auth
        self._candidates = candidates
        self._last_response = ""
        self._last_server = ""
        self._addressee = []
        self._auth = ""
        self._game_id = ""

    def _is_unique_connection(self):
        return len(self._addressee) == 1

    def _connect(self):
        if self._last_server not in self._addressee and BROADCAST_ADDRESS not in self._addressee:
            return
        if self._is_unique_connection():
            self._notify_absence.execute(self._game_id)
        self._network.connect(self._last_server)

    def _listen_for_disconnection(self):
        if self._last_response != CLOSE_NOTIFICATION:
            return
        if self._network.connected_addressees[:1] != [self._last_server]:
            return
        self._network.state = ConnectionState.CONNECTING

    def _update_status(self, current_addressee):
        if not self._last_response:
            self._notify_presence.execute(current_addressee)
        elif self._last_response == PRESENCE_NOTIFICATION:
            self._candidates.store(self._last_server)
            self._send_auth.execute(self._auth, current_addressee)
        elif self._last_response == VERIFICATION_RESPONSE:
            self._connect()

    def initialize(self, addressee, auth, game_id):
        """Start connecting to the given addresses with the given auth message."""
        self._addressee = list(addressee)
        self._auth = auth
        self._game_id = game_id

        self._network.initialize()
        self._network.state = ConnectionState.CONNECTING

        for candidate in self._candidates.candidates():
            if candidate in self._addressee:
                self._send_auth.execute(self._auth, candidate)

    def execute(self):
        """Handle the next response and advance the handshake."""
        self._last_response, self._last_server = self._network.listen()

        if self._network.state is ConnectionState.CONNECTED and self._is_unique_connection():
            self._listen_for_disconnection()
        else:
            for addressee in list(self._addressee):
                self._update_status(addressee)

    def scan(self):
        """Look for applications on the local network without connecting."""
        self._network.initialize()
        self._last_response, self._last_server = self._network.listen()

        if not self._last_response:
            self._notify_presence.execute(BROADCAST_ADDRESS)
        elif self._last_response == PRESENCE_NOTIFICATION:
            self._candidates.store(self._last_server)