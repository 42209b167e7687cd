"""Exception types for calpick.

Gestures that are rejected (collisions, toggles, out-of-order events) are not
errors: they clear or keep the selection. Only malformed input raises.
"""


class CalpickError(Exception):
    """Base exception for all calpick errors."""


class InvalidArgumentError(CalpickError, ValueError):
    """An argument is outside its allowed set of values.

    Raised when:
    - An inclusivity symbol is not one of (), [], (], [)
    - A DateRange is built with its start after its end
    """


class ConfigError(CalpickError):
    """The config file holds a disabled entry that cannot be parsed."""
