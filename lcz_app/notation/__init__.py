"""Engineering notation rendering for measured and derived quantities."""

from .engineering import PREFIX_END, PREFIX_START, PREFIXES, format_engineering

__all__ = [
    "format_engineering",
    "PREFIXES",
    "PREFIX_START",
    "PREFIX_END",
]
