"""
Base classes for classbreaks components.
"""

from classbreaks.base.provider import ClassificationProvider

__all__ = [
    "ClassificationProvider"
]
