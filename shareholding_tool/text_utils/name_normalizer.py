"""
Name normalization utilities for register name processing.

This module turns raw legal-entity names, as they appear in directors and
shareholding registers, into token sequences suitable for comparison.
"""

import re
from typing import Optional

_separator_regex = re.compile(r"[.,]")


class NameNormalizer:
    """
    Normalize register names into comparable tokens.

    Handles common register artifacts including:
    - Inconsistent letter case
    - Periods and commas around initials ("A. B. Sharma", "Sharma, A B")
    - Multiple consecutive spaces, tabs and newlines
    """

    def normalize(self, raw_name: Optional[str]) -> list[str]:
        """
        Normalize a raw name into a list of uppercase word tokens.

        Periods and commas are treated as separators, so "A.B. Sharma"
        yields the same tokens as "A B SHARMA".

        Args:
            raw_name: Name as recorded in a register, may be empty or None

        Returns:
            Ordered list of tokens, empty if the name has no content
        """
        if not raw_name:
            return []

        cleaned = _separator_regex.sub(" ", raw_name.upper())
        return [token for token in cleaned.split() if token]


_default_normalizer = NameNormalizer()


def normalize_name(raw_name: Optional[str]) -> list[str]:
    return _default_normalizer.normalize(raw_name)
