"""Single steps of the discovery and messaging protocol."""

from .fields import BROADCAST_ADDRESS

PRESENCE_MESSAGE = "ping"
ABSENCE_SUFFIX = "*GAMEUNAVAILABLE"


class NotifyPresence:
    """Announce the game to an address so applications answer."""

    def __init__(self, network, candidates):
        self._network = network
        self._candidates = candidates

    def execute(self, addressee):
        self._network.send_to(PRESENCE_MESSAGE, addressee)


class NotifyAbsence:
    """Tell every known application that the game is no longer available."""

    def __init__(self, network, candidates):
        self._network = network
        self._candidates = candidates

    def execute(self, game_id):
        for candidate in self._candidates.candidates():
            self._network.send_to(game_id + ABSENCE_SUFFIX, candidate)


class SendAuthMessage:
    """Send the authentication message to known applications."""

    def __init__(self, network, candidates):
        self._network = network
        self._candidates = candidates

    def execute(self, auth, addressee):
        """Broadcast goes to every candidate; otherwise only to a known one."""
        if addressee == BROADCAST_ADDRESS:
            for address in self._candidates.candidates():
                self._network.send_to(auth, address)
        elif self._candidates.contains(addressee):
            self._network.send_to(auth, addressee)


class SendEncryptedMessage:
    """Send a message to every connected application."""

    def __init__(self, network):
        self._network = network

    def execute(self, message):
        for address in list(self._network.connected_addressees):
            self._network.send_to(message, address)