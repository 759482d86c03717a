"""Haptic sensations: single pulses, muscle-bound, sequences and baked ones."""

from abc import ABC, abstractmethod

from .fields import clamp
from .muscles import MusclesGroup


def _as_group(muscles):
    return muscles if isinstance(muscles, MusclesGroup) else MusclesGroup(muscles)


def _scaled(value, factor):
    """Scale a stored float to its integer wire unit, truncating."""
    return int(round(value * factor, 6))


class Sensation(ABC):
    """Something the suit can play, with a priority used when sending."""

    def __init__(self, priority=0):
        self.priority = priority

    def _carrying_priority(self, other):
        other.priority = self.priority
        return other

    @abstractmethod
    def with_muscles(self, muscles):
        """Return the sensation bound to the given muscles."""

    @abstractmethod
    def total_duration(self):
        """Return how long the sensation plays, in seconds."""

    @abstractmethod
    def clone(self):
        """Return an equivalent sensation with the same priority."""

    @abstractmethod
    def __str__(self):
        """Return the wire form of the sensation."""

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r}, priority={self.priority})"


class MicroSensation(Sensation):
    """A single pulse with bounded frequency, duration and intensity."""

    def __init__(self, frequency, duration, intensity, ramp_up, ramp_down,
                 exit_time, name="", priority=0):
        super().__init__(priority)
        self.frequency = clamp(int(frequency), 1, 100)
        self.duration = clamp(float(duration), 0.1, 20.0)
        self.intensity = clamp(int(intensity), 0, 100)
        self.ramp_up = clamp(float(ramp_up), 0.0, 2.0)
        self.ramp_down = clamp(float(ramp_down), 0.0, 2.0)
        self.exit_time = clamp(float(exit_time), 0.0, 2.0)
        self.name = name

    def with_muscles(self, muscles):
        group = _as_group(muscles)
        if not group:
            return self.clone()
        return self._carrying_priority(SensationWithMuscles(self.clone(), group))

    def total_duration(self):
        return self.duration + self.exit_time

    def clone(self):
        return MicroSensation(
            self.frequency, self.duration, self.intensity, self.ramp_up,
            self.ramp_down, self.exit_time, self.name, self.priority,
        )

    def __str__(self):
        return ",".join((
            str(self.frequency),
            str(_scaled(self.duration, 10)),
            str(self.intensity),
            str(_scaled(self.ramp_up, 1000)),
            str(_scaled(self.ramp_down, 1000)),
            str(_scaled(self.exit_time, 10)),
            self.name,
        ))


class SensationWithMuscles(Sensation):
    """A sensation played on a specific group of muscles."""

    def __init__(self, reference, muscles, priority=0):
        super().__init__(priority)
        self.reference = reference
        self.muscles = _as_group(muscles)

    def with_muscles(self, muscles):
        """Muscles are already bound, so the new ones are ignored."""
        return self.clone()

    def total_duration(self):
        return self.reference.total_duration()

    def clone(self):
        return SensationWithMuscles(self.reference, self.muscles, self.priority)

    def __str__(self):
        return f"{self.reference}|{self.muscles}"


class SensationsSequence(Sensation):
    """Sensations played one after another."""

    def __init__(self, sensations, priority=0):
        super().__init__(priority)
        self.sensations = tuple(sensation.clone() for sensation in sensations)

    def with_muscles(self, muscles):
        parts = [sensation.with_muscles(muscles).clone() for sensation in self.sensations]
        return SensationsSequence(parts, self.priority)

    def total_duration(self):
        return sum(sensation.total_duration() for sensation in self.sensations)

    def clone(self):
        return SensationsSequence(self.sensations, self.priority)

    def __str__(self):
        return "&".join(str(sensation) for sensation in self.sensations)


class BakedSensation(Sensation):
    """A sensation registered under a numeric id, sent by that id alone."""

    def __init__(self, id, name, reference, icon="0", family="", priority=0):
        super().__init__(priority)
        self.id = id
        self.name = name
        self.reference = reference
        self.icon = icon
        self.family = family

    def with_icon(self, icon):
        """Return the baked sensation with another icon."""
        return BakedSensation(self.id, self.name, self.reference, icon)

    def with_muscles(self, muscles):
        group = _as_group(muscles)
        if not group:
            return self
        return self._carrying_priority(SensationWithMuscles(self.clone(), group))

    def total_duration(self):
        return self.reference.total_duration()

    def clone(self):
        return BakedSensation(self.id, self.name, self.reference, self.icon,
                              priority=self.priority)

    def stringify(self):
        """Return the full definition used to register the sensation."""
        return f"{self.id}~{self.name}~{self.reference}~{self.icon}~{self.family}"

    def __str__(self):
        return str(self.id)


def create_sensation(frequency=100, duration=0.1, intensity=100, ramp_up=0.0,
                     ramp_down=0.0, exit_time=0.0, name="", priority=0):
    """Build a single pulse sensation."""
    return MicroSensation(frequency, duration, intensity, ramp_up, ramp_down,
                          exit_time, name, priority)


def bake(sensation, id, name):
    """Register a sensation under an id and a name."""
    return BakedSensation(id, name, sensation)