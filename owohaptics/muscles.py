"""Muscles of the suit, groups of them and their text form."""

from dataclasses import dataclass, field

from .errors import WrongMusclesFormatError
from .fields import clamp, split

MAX_INTENSITY = 100


@dataclass(frozen=True, eq=False)
class Muscle:
    """One muscle: a position on the suit and an intensity."""

    position: int
    intensity: int = MAX_INTENSITY

    def with_intensity(self, intensity):
        """Return this muscle at the given intensity, bounded to 0..100."""
        return Muscle(self.position, clamp(intensity, 0, MAX_INTENSITY))

    @classmethod
    def pectoral_r(cls):
        return cls(0)

    @classmethod
    def pectoral_l(cls):
        return cls(1)

    @classmethod
    def abdominal_r(cls):
        return cls(2)

    @classmethod
    def abdominal_l(cls):
        return cls(3)

    @classmethod
    def arm_r(cls):
        return cls(4)

    @classmethod
    def arm_l(cls):
        return cls(5)

    @classmethod
    def dorsal_r(cls):
        return cls(6)

    @classmethod
    def dorsal_l(cls):
        return cls(7)

    @classmethod
    def lumbar_r(cls):
        return cls(8)

    @classmethod
    def lumbar_l(cls):
        return cls(9)

    def __add__(self, other):
        if not isinstance(other, Muscle):
            return NotImplemented
        return Muscle(self.position).with_intensity(self.intensity + other.intensity)

    def __sub__(self, other):
        if not isinstance(other, Muscle):
            return NotImplemented
        return Muscle(self.position).with_intensity(self.intensity - other.intensity)

    def __eq__(self, other):
        """Muscles are equal when they sit at the same position."""
        if not isinstance(other, Muscle):
            return NotImplemented
        return self.position == other.position

    def __hash__(self):
        return hash(self.position)

    def __str__(self):
        return f"{self.position}%{self.intensity}"


@dataclass(frozen=True)
class MusclesGroup:
    """An ordered group of muscles."""

    muscles: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "muscles", tuple(self.muscles))

    def with_intensity(self, intensity):
        """Return the group with every muscle set to the given intensity."""
        return MusclesGroup(muscle.with_intensity(intensity) for muscle in self.muscles)

    @classmethod
    def front(cls):
        return cls((
            Muscle.pectoral_r(), Muscle.pectoral_l(),
            Muscle.abdominal_r(), Muscle.abdominal_l(),
            Muscle.arm_r(), Muscle.arm_l(),
        ))

    @classmethod
    def back(cls):
        return cls((
            Muscle.dorsal_r(), Muscle.dorsal_l(),
            Muscle.lumbar_r(), Muscle.lumbar_l(),
        ))

    @classmethod
    def all(cls):
        return cls((
            Muscle.pectoral_r(), Muscle.pectoral_l(),
            Muscle.abdominal_r(), Muscle.abdominal_l(),
            Muscle.arm_r(), Muscle.arm_l(),
            Muscle.dorsal_r(), Muscle.dorsal_l(),
            Muscle.lumbar_r(), Muscle.lumbar_l(),
        ))

    def _index_of(self, muscle):
        return next(
            (index for index, own in enumerate(self.muscles) if own == muscle),
            None,
        )

    def __add__(self, other):
        """Sum intensities of shared muscles and append the others."""
        if not isinstance(other, MusclesGroup):
            return NotImplemented
        result = list(self.muscles)
        for muscle in other.muscles:
            index = self._index_of(muscle)
            if index is None:
                result.append(muscle)
            else:
                result[index] = result[index] + muscle
        return MusclesGroup(result)

    def __sub__(self, other):
        """Subtract intensities of shared muscles; others are ignored."""
        if not isinstance(other, MusclesGroup):
            return NotImplemented
        result = list(self.muscles)
        for muscle in other.muscles:
            index = self._index_of(muscle)
            if index is not None:
                result[index] = result[index] - muscle
        return MusclesGroup(result)

    def __iter__(self):
        return iter(self.muscles)

    def __len__(self):
        return len(self.muscles)

    def __str__(self):
        return ",".join(str(muscle) for muscle in self.muscles)


def _parse_muscle(value):
    position, intensity = split(value, "%")[:2]
    return Muscle(int(position), int(intensity))


def parse_muscles(value):
    """Parse a group written as "position%intensity,position%intensity,..."."""
    try:
        return MusclesGroup(_parse_muscle(part) for part in split(value, ","))
    except ValueError as error:
        raise WrongMusclesFormatError(f"invalid muscles: {value!r}") from error