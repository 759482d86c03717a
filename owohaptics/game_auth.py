"""The game's identity and baked sensations sent when authenticating."""

from dataclasses import dataclass, field

from .fields import split

DEFAULT_ID = "0"


@dataclass(frozen=True)
class GameAuth:
    """A game id with the baked sensation definitions it registers."""

    sensations: tuple = field(default_factory=tuple)
    id: str = DEFAULT_ID

    def __post_init__(self):
        object.__setattr__(self, "sensations", tuple(self.sensations))

    @classmethod
    def create(cls, sensations, id=DEFAULT_ID):
        """Keep only baked definitions; an empty id becomes the default."""
        baked = tuple(sensation for sensation in sensations if "~" in sensation)
        return cls(baked, id or DEFAULT_ID)

    @classmethod
    def parse(cls, value, id=DEFAULT_ID):
        """Parse definitions joined by "#"."""
        return cls.create(split(value, "#"), id)

    def __str__(self):
        return "#".join(self.sensations)