"""Exceptions raised by the haptics package."""


class OWOError(Exception):
    """Base class for every error the package raises."""

    _CODE = "An OWO error ocurred"

    def __init__(self, message=None):
        super().__init__(message if message is not None else self._CODE)

    def code(self):
        """Return the fixed description of this kind of error."""
        return self._CODE


class NetworkError(OWOError, OSError):
    """Sending or receiving over the network failed."""

    _CODE = "A network error ocurred"


class WrongSensationFormatError(OWOError, ValueError):
    """A sensation string could not be parsed."""

    _CODE = "Sensation was not in a correct format"


class WrongMusclesFormatError(OWOError, ValueError):
    """A muscles string could not be parsed."""

    _CODE = "Muscle was not in a correct format"


class WrongGameAuthFormatError(OWOError, ValueError):
    """A game authentication string could not be parsed."""

    _CODE = "GameAuth was not in a correct format"