"""Parsing of sensations from their wire form."""

import re
from contextlib import contextmanager

from .errors import OWOError, WrongSensationFormatError
from .fields import split
from .muscles import parse_muscles
from .sensations import (
    BakedSensation,
    MicroSensation,
    SensationWithMuscles,
    SensationsSequence,
    create_sensation,
)

_LEADING_INT = re.compile(r"\s*[+-]?\d+")
_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _leading_int(text):
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group())


def _leading_float(text):
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


@contextmanager
def _sensation_format(value):
    try:
        yield
    except OWOError:
        raise
    except (ValueError, IndexError) as error:
        raise WrongSensationFormatError(f"invalid sensation: {value!r}") from error


def can_parse_baked(value):
    """True for a bare id or a full baked definition."""
    return ("," not in value and "|" not in value) or "~" in value


def parse_baked(value):
    """Parse "id" or "id~name~sensation~icon~family"."""
    with _sensation_format(value):
        if "~" not in value:
            return BakedSensation(_leading_int(value), "", create_sensation())
        parameters = split(value, "~")
        icon = parameters[3] if len(parameters) >= 4 else ""
        family = parameters[4] if len(parameters) >= 5 else ""
        return BakedSensation(_leading_int(parameters[0]), parameters[1],
                              parse_sensation(parameters[2]), icon, family)


def parse_micro(value):
    """Parse "frequency,duration,intensity,rampUp,rampDown,exitTime,name"."""
    with _sensation_format(value):
        parameters = split(value, ",")
        return MicroSensation(
            _leading_int(parameters[0]),
            _leading_float(parameters[1]) / 10,
            _leading_int(parameters[2]),
            _leading_float(parameters[3]) / 1000,
            _leading_float(parameters[4]) / 1000,
            _leading_float(parameters[5]) / 10,
            parameters[6] if len(parameters) >= 7 else "",
        )


def can_parse_with_muscles(value):
    return "|" in value


def parse_with_muscles(value):
    """Parse "sensation|muscles"."""
    with _sensation_format(value):
        parameters = split(value, "|")
        return SensationWithMuscles(parse_sensation(parameters[0]),
                                    parse_muscles(parameters[1]))


def can_parse_sequence(value):
    return "&" in value


def parse_sequence(value):
    """Parse sensations joined by "&"."""
    with _sensation_format(value):
        return SensationsSequence(parse_sensation(part) for part in split(value, "&"))


def parse_sensation(value, priority=0):
    """Parse any sensation and give it the priority."""
    if can_parse_baked(value):
        sensation = parse_baked(value)
    elif can_parse_sequence(value):
        sensation = parse_sequence(value)
    elif can_parse_with_muscles(value):
        sensation = parse_with_muscles(value)
    else:
        sensation = parse_micro(value)
    sensation.priority = priority
    return sensation