"""Connection states, messages and the transport the client talks through."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class ConnectionState(Enum):
    """Where the client stands with the application it talks to."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


@dataclass(frozen=True)
class Message:
    """A text received from or sent to an address."""

    value: str
    addressee: str

    @classmethod
    def empty(cls):
        """Return a message with no text and no address."""
        return cls("", "")


class Network(ABC):
    """A datagram transport with a connection state and connected addresses.

    Subclasses provide the actual datagram handling; connection bookkeeping
    is shared here.
    """

    def __init__(self):
        self.state = ConnectionState.DISCONNECTED
        self.connected_addressees = []

    @abstractmethod
    def listen(self):
        """Return (message, sender_ip) of the next datagram, or empty strings."""

    @abstractmethod
    def initialize(self):
        """Prepare the transport for sending and listening."""

    @abstractmethod
    def send_to(self, message, ip):
        """Send a message to the given address."""

    def connect(self, server_ip):
        """Record the server as connected."""
        self.connected_addressees.append(server_ip)
        self.state = ConnectionState.CONNECTED

    def send(self, message):
        """Send a message to the first connected address."""
        self.send_to(message, self.connected_addressees[0])

    def disconnect(self):
        """Mark the transport disconnected."""
        self.state = ConnectionState.DISCONNECTED