"""A UDP transport that broadcasts to and listens for the application."""

import socket

from .errors import NetworkError
from .fields import PORT
from .network import ConnectionState, Network

BUFFER_LENGTH = 1024


def _c_string(data):
    """Keep the bytes up to the first NUL, as a C string would."""
    return data.split(b"\0", 1)[0]


class UDPNetwork(Network):
    """Sends datagrams to the application's port and reads its answers."""

    def __init__(self, port=PORT):
        super().__init__()
        self._port = port
        self._socket = None

    def initialize(self):
        """Open a non-blocking UDP socket allowed to broadcast."""
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        except OSError as error:
            raise NetworkError(
                "An error ocurred while initializing the OWO UDP socket") from error
        try:
            sock.setblocking(False)
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as error:
            sock.close()
            raise NetworkError("An error ocurred while configuring OWO socket") from error
        self._socket = sock

    def connect(self, server_ip):
        self.connected_addressees.append(server_ip)
        self.state = ConnectionState.CONNECTED

    def listen(self):
        """Return (message, sender_ip), or empty strings when nothing arrived."""
        if self._socket is None:
            return "", ""
        try:
            data, (sender, _port) = self._socket.recvfrom(BUFFER_LENGTH)
        except OSError:
            return "", ""
        return _c_string(data).decode("utf-8", errors="replace"), sender

    def send(self, message):
        if not self.connected_addressees:
            raise NetworkError("no application is connected")
        self.send_to(message, self.connected_addressees[0])

    def send_to(self, message, ip):
        try:
            socket.inet_pton(socket.AF_INET, ip)
        except (OSError, TypeError) as error:
            raise NetworkError("the ip provided is not valid") from error
        if self._socket is None:
            raise NetworkError("the network is not initialized")
        try:
            self._socket.sendto(_c_string(message.encode("utf-8")), (ip, self._port))
        except OSError as error:
            raise NetworkError(
                "[OWO] An error occurred while trying to send a sensation") from error

    def disconnect(self):
        self.state = ConnectionState.DISCONNECTED
        if self._socket is not None:
            self._socket.close()
            self._socket = None