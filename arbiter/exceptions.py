"""Engine exception definitions.

Custom exception hierarchy for dice parsing, attribute resolution and
roll commands. Each error also derives from the closest builtin so callers
can catch it generically.
"""


class ArbiterError(Exception):
    """Base exception for the resolution engine."""

    pass


class DiceParseError(ArbiterError, ValueError):
    """Error parsing dice or damage notation.

    Attributes:
        notation: The text that failed to parse.
    """

    def __init__(self, message: str, notation: str | None = None) -> None:
        super().__init__(message)
        self.notation = notation


class UnresolvedRequestError(ArbiterError, RuntimeError):
    """A resolvable request was read before it was resolved."""

    def __init__(self, message: str = "Request has not been resolved") -> None:
        super().__init__(message)


class UnsupportedOperationError(ArbiterError, TypeError):
    """Operation is not defined for this kind of object."""

    pass


class IllegalStateError(ArbiterError, RuntimeError):
    """A required dependency (source, DC, options) is missing."""

    pass


class AttributeNotFoundError(ArbiterError, LookupError):
    """Source does not define the requested attribute type.

    Attributes:
        attribute_type: The type that was requested.
    """

    def __init__(self, attribute_type: object, message: str | None = None) -> None:
        super().__init__(message or f"No attribute of type {attribute_type!r}")
        self.attribute_type = attribute_type


class IncomparableAttributesError(ArbiterError, TypeError):
    """Two attributes of different concrete kinds were compared."""

    pass


class EmptyOptionsError(ArbiterError, ValueError):
    """Resolution was requested over an empty option set."""

    def __init__(self, message: str = "Cannot resolve an empty set of options") -> None:
        super().__init__(message)
