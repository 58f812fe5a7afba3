"""
Classification providers for the standard styles.
"""

from classbreaks.providers.classint import ClassIntProvider

__all__ = [
    "ClassIntProvider"
]
