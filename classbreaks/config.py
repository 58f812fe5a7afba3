"""
Configuration for classbreaks.

Values can be overridden through environment variables, or through the
``.env`` file named by ``CLASSBREAKS_DOTENV_PATH``.
"""

import os
from dotenv import load_dotenv

DOTENV_PATH = os.getenv("CLASSBREAKS_DOTENV_PATH")
if DOTENV_PATH:
    load_dotenv(DOTENV_PATH)


def _positive_float(name, default):
    """Read a positive float from the environment."""
    raw = os.getenv(name, default)
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not value > 0 or value == float("inf"):
        raise ValueError(f"{name} must be a positive number, got {raw!r}")
    return value


DEFAULT_METHOD = os.getenv("CLASSBREAKS_DEFAULT_METHOD", "quantile")
DEFAULT_K = _positive_float("CLASSBREAKS_DEFAULT_K", "1")
LOG_LEVEL = os.getenv("CLASSBREAKS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s %(levelname)s:%(message)s'

# Sturges-like rule: 1 + 3.3 * log10(n)
STURGES_FACTOR = 3.3

Q6_PROBS = (0.0, 0.05, 0.275, 0.5, 0.725, 0.95, 1.0)
