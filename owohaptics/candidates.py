"""The applications that answered and may be connected to."""


class ConnectionCandidates:
    """A sorted set of addresses of applications that answered."""

    def __init__(self):
        self._candidates = set()

    def store(self, addressee):
        """Remember an address; empty addresses are ignored."""
        if addressee:
            self._candidates.add(addressee)

    def contains(self, candidate):
        return candidate in self._candidates

    def __contains__(self, candidate):
        return self.contains(candidate)

    def candidates(self):
        """Return the stored addresses in sorted order."""
        return sorted(self._candidates)

    def clear(self):
        self._candidates.clear()

    def __len__(self):
        return len(self._candidates)