"""
Exceptions raised while computing class breaks.
"""


class BreaksError(ValueError):
    """Base class for all break computation errors."""
    pass


class EmptySample(BreaksError):
    """The sample holds no value once missing entries are removed."""
    pass


class InvalidMethod(BreaksError):
    """The method identifier is not one of the supported methods."""
    pass


class InvalidClassCount(BreaksError):
    """The class count is not a positive integer (or not a power of 2 for "em")."""
    pass


class DomainError(BreaksError):
    """A method-specific mathematical precondition does not hold."""
    pass
