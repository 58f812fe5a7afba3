"""
classbreaks: break points for the discretization of continuous variables.
"""

__version__ = "1.0.0"

from classbreaks.core import BreakGenerator, get_breaks
from classbreaks.methods import Method
from classbreaks.base import ClassificationProvider
from classbreaks.providers import ClassIntProvider
from classbreaks.exceptions import (
    BreaksError,
    EmptySample,
    InvalidMethod,
    InvalidClassCount,
    DomainError
)

__all__ = [
    "BreakGenerator",
    "get_breaks",
    "Method",
    "ClassificationProvider",
    "ClassIntProvider",
    "BreaksError",
    "EmptySample",
    "InvalidMethod",
    "InvalidClassCount",
    "DomainError"
]
