"""
Supported discretization methods.
"""

from enum import Enum

from classbreaks.exceptions import InvalidMethod


class Method(str, Enum):
    """
    Enumeration of the discretization methods.

    SD, EQUAL, QUANTILE and FISHER_JENKS are computed by a classification
    provider; the others are built in.
    """
    SD = "sd"
    EQUAL = "equal"
    QUANTILE = "quantile"
    FISHER_JENKS = "fisher-jenks"
    Q6 = "q6"
    GEOM = "geom"
    ARITH = "arith"
    EM = "em"
    MSD = "msd"

    @classmethod
    def parse(cls, value):
        """Return the Method matching a name such as "fisher-jenks"."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            names = ", ".join(m.value for m in cls)
            raise InvalidMethod(f"Unknown method {value!r}, expected one of {names}") from None

    @property
    def delegated(self):
        return self in _PROVIDER_STYLES

    @property
    def provider_style(self):
        """Style name understood by the classification provider."""
        return _PROVIDER_STYLES[self]


_PROVIDER_STYLES = {
    Method.SD: "sd",
    Method.EQUAL: "equal",
    Method.QUANTILE: "quantile",
    Method.FISHER_JENKS: "fisher",
}
