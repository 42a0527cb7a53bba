"""
Helper utilities for personal name formatting.

This module provides the name case conversion pipeline and a formatter
that bounds the length of display values.
"""

from .name_case import to_name_case
from .max_length import MaxLengthFormatter

__all__ = [
    "to_name_case",
    "MaxLengthFormatter",
]
