"""The entry point for games: connect, send and stop sensations."""

from .client import create_client
from .game_auth import GameAuth
from .network import ConnectionState

BROADCAST_ADDRESS = "255.255.255.255"
DEFAULT_UPDATE_FREQUENCY = 500
_UINT64 = 2 ** 64


def _elapsed(now, since):
    """Milliseconds from since to now, wrapping like an unsigned 64-bit counter."""
    return (now - since) % _UINT64


class Authenticate:
    """Starts the connection with the game's authentication message."""

    def __init__(self, client):
        self._client = client
        self._game = GameAuth()

    def configure(self, game):
        self._game = game

    def _auth_message(self):
        return f"{self._game.id}*AUTH*{self._game}"

    def manual_connect(self, ips):
        """Connect to the given addresses; a connected client stays as it is."""
        if self._client.state() is ConnectionState.CONNECTED:
            return self._client.state()
        self._client.start_connection(list(ips), self._auth_message(), self._game.id)
        return ConnectionState.CONNECTING

    def auto_connect(self):
        """Connect to whichever application answers a broadcast."""
        return self.manual_connect([BROADCAST_ADDRESS])


class SendSensation:
    """Sends sensations, letting a playing one block those of lower priority."""

    def __init__(self, client):
        self._client = client
        self._game = GameAuth()
        self._last_priority = -1
        self._previous_ends_at = 0

    def _is_playing(self, time_since_start):
        return time_since_start < self._previous_ends_at

    def execute(self, sensation, time_since_start=0):
        if not self._client.is_connected():
            return
        if sensation.priority < self._last_priority and self._is_playing(time_since_start):
            return
        self._last_priority = sensation.priority
        self._previous_ends_at = time_since_start + int(sensation.total_duration() * 1000)
        self._client.send(f"{self._game.id}*SENSATION*{sensation}")

    def reset_priority(self):
        """Forget the playing sensation so any priority may be sent."""
        self._previous_ends_at = 0

    def configure(self, game):
        self._game = game


class StopSensation:
    """Stops whatever the suit is playing."""

    def __init__(self, client):
        self._client = client
        self._game = GameAuth()

    def execute(self):
        if not self._client.is_connected():
            return
        self._client.send(f"{self._game.id}*STOP")

    def configure(self, game):
        self._game = game


class OWO:
    """Connects a game to the application and plays sensations on the suit."""

    def __init__(self, client):
        self._client = client
        self._connect = Authenticate(client)
        self._send = SendSensation(client)
        self._stop = StopSensation(client)
        self._last_update = 0
        self._last_update_scan = 0
        self._time_in_ms = 0
        self._update_frequency = DEFAULT_UPDATE_FREQUENCY
        self.configure(GameAuth((), "0"))

    @classmethod
    def create(cls, network=None):
        """Build an instance over the given network, UDP by default."""
        if network is None:
            from .udp_network import UDPNetwork
            network = UDPNetwork()
        return cls(create_client(network))

    def configure(self, auth):
        self._connect.configure(auth)
        self._send.configure(auth)
        self._stop.configure(auth)

    def send(self, sensation):
        self._send.execute(sensation, self._time_in_ms)

    def stop(self):
        self._stop.execute()
        self._send.reset_priority()

    def update_status(self, time_in_ms):
        """Record the time and advance the connection at most once per period."""
        self._time_in_ms = time_in_ms
        if _elapsed(time_in_ms, self._last_update) >= self._update_frequency:
            self._last_update = time_in_ms
            self._client.update_status()
        return self.state()

    def auto_connect(self):
        return self._connect.auto_connect()

    def connect(self, ips):
        return self._connect.manual_connect(ips)

    def discovered_apps(self):
        return self._client.discovered_apps()

    def scan(self, time_in_ms):
        """Look for applications at most once per period."""
        if _elapsed(time_in_ms, self._last_update_scan) >= self._update_frequency:
            self._last_update_scan = time_in_ms
            self._client.scan()

    def disconnect(self):
        self._client.disconnect()

    def state(self):
        return self._client.state()

    def change_update_frequency(self, frequency):
        self._update_frequency = frequency