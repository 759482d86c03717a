"""Small helpers for splitting wire fields and bounding numbers."""

PORT = 54020
BROADCAST_ADDRESS = "255.255.255.255"


def split(value, delimiter):
    """Split on every delimiter, dropping only an empty trailing field."""
    parts = value.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def clamp(value, minimum, maximum):
    """Bound value to the closed range [minimum, maximum]."""
    return max(minimum, min(value, maximum))