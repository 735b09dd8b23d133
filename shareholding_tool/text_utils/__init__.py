"""
Utility classes for register name analysis.

This module provides reusable components for normalizing and matching
names across directors and shareholding registers.
"""

from .name_matcher import NameMatcher, names_match
from .name_normalizer import NameNormalizer, normalize_name

__all__ = [
    "NameNormalizer",
    "NameMatcher",
    "normalize_name",
    "names_match",
]
