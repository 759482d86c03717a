"""Client for OWO haptic vests: sensations, muscles, parsing, discovery and UDP transport."""

__version__ = "2.0.0"

__all__ = [
    "actions",
    "candidates",
    "client",
    "errors",
    "fields",
    "find_server",
    "game_auth",
    "muscles",
    "network",
    "owo",
    "parsers",
    "sensations",
    "udp_network",
]