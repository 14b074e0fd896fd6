"""Exception types raised by the simulator."""


class NBodyError(Exception):
    """Base class for all simulator errors."""


class InvalidArgumentError(NBodyError, ValueError):
    """Malformed or missing command-line arguments."""


class ParseError(NBodyError, ValueError):
    """Initial-condition input could not be parsed."""


class InvalidInputError(NBodyError, ValueError):
    """Initial state is semantically invalid (e.g. N <= 0, non-positive mass)."""


class NotInitializedError(NBodyError, RuntimeError):
    """The simulator was used before ``initialize`` succeeded."""
