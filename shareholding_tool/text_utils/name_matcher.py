"""
Name matching utilities for reconciling register entries.

Directors and shareholding registers share no common identifier, so a
director is linked to a shareholder by comparing their names. The matcher
tolerates the usual inconsistencies of human-entered legal names: initials
versus full names, punctuation, extra middle names and honorifics.
"""

import re
from typing import Callable, Iterable, Optional, TypeVar

from .name_normalizer import NameNormalizer

T = TypeVar("T")

_initials_group_regex = re.compile(r"^[A-Z]{2}$")


class NameMatcher:
    """
    Heuristic matcher for person names in company registers.

    Supports two matching strategies, checked in order:
    - Exact matching (normalized token sequences are identical)
    - Initials-aware token overlap (more than half of the shorter name's
      tokens are found in the longer name)

    This is best-effort: it can both under- and over-match.
    """

    def __init__(self, name_normalizer: Optional[NameNormalizer] = None):
        """
        Initialize the name matcher.

        Args:
            name_normalizer: NameNormalizer instance (creates new one if not provided)
        """
        self.name_normalizer = name_normalizer or NameNormalizer()

    def names_match(self, name_a: Optional[str], name_b: Optional[str]) -> bool:
        """
        Check if two register names denote the same person.

        Args:
            name_a: First raw name
            name_b: Second raw name

        Returns:
            True if the names are considered a match, False otherwise
        """
        return self.get_match_type(name_a, name_b) != "no_match"

    def get_match_type(self, name_a: Optional[str], name_b: Optional[str]) -> str:
        """
        Get the type of match between two register names.

        Returns:
            Match type: "exact", "initials", or "no_match"
        """
        tokens_a = self.name_normalizer.normalize(name_a)
        tokens_b = self.name_normalizer.normalize(name_b)

        if not tokens_a or not tokens_b:
            return "no_match"

        if tokens_a == tokens_b:
            return "exact"

        if len(tokens_a) <= len(tokens_b):
            shorter, longer = tokens_a, tokens_b
        else:
            shorter, longer = tokens_b, tokens_a

        # a single word is too common to identify anyone on its own
        if len(shorter) < 2:
            return "no_match"

        matches = sum(1 for token in shorter if self._token_found(token, longer))
        required_matches = len(shorter) // 2 + 1
        if matches >= required_matches:
            return "initials"

        return "no_match"

    def find_first_match(
        self,
        name: Optional[str],
        candidates: Iterable[T],
        key: Optional[Callable[[T], Optional[str]]] = None,
    ) -> Optional[T]:
        """
        Find the first candidate, in list order, whose name matches.

        No attempt is made to rank candidates; an exact match later in the
        list does not win over an earlier initials match.

        Args:
            name: Raw name to look up
            candidates: Candidates to search, either names or records
            key: Function extracting the name from a candidate record

        Returns:
            The first matching candidate, or None if none matches
        """
        for candidate in candidates:
            candidate_name = key(candidate) if key else candidate
            if self.names_match(name, candidate_name):
                return candidate
        return None

    def _token_found(self, token: str, longer: list[str]) -> bool:
        if len(token) == 1:
            # single letter initial
            return any(word.startswith(token) for word in longer)

        if len(token) == 2 and _initials_group_regex.match(token):
            # two letter initials, also written as "A. B."
            if any(word.startswith(token) for word in longer):
                return True
            return any(
                first == token[0] and second == token[1]
                for first, second in zip(longer, longer[1:])
            )

        return token in longer


_default_matcher = NameMatcher()


def names_match(name_a: Optional[str], name_b: Optional[str]) -> bool:
    return _default_matcher.names_match(name_a, name_b)
