"""
Ordered relationship rules for shareholding classification.

Each rule list is a sequence of (predicate, label) pairs evaluated
first-match-wins against lowercased text, so the priority order is the
list order.
"""

from typing import Callable, Optional, Sequence

Rule = tuple[Callable[[str], bool], str]

MANAGING_DIRECTOR = "Managing Director"
WHOLE_TIME_DIRECTOR = "Whole-time Director"
COMPANY_SECRETARY = "Company Secretary"
DIRECTOR = "Director"
COMPANY = "Company"
TRUST = "Trust"
LLP = "LLP"
NON_DIRECTOR = "Non-Director"


def contains(*needles: str) -> Callable[[str], bool]:
    """Build a predicate that is true when the text contains any of the needles."""
    return lambda text: any(needle in text for needle in needles)


# applied to the designation of a matched director
DESIGNATION_RULES: list[Rule] = [
    (contains("managing"), MANAGING_DIRECTOR),
    (contains("whole-time"), WHOLE_TIME_DIRECTOR),
    (contains("company secretary"), COMPANY_SECRETARY),
    (contains("director"), DIRECTOR),
]

# applied to the shareholder's own name when no director matched
ENTITY_NAME_RULES: list[Rule] = [
    (contains("private limited", "limited"), COMPANY),
    (contains("trust"), TRUST),
    (contains("llp"), LLP),
]

# applied to the declared entity type when the name is inconclusive
ENTITY_TYPE_RULES: list[Rule] = [
    (contains("company"), COMPANY),
    (contains("trust"), TRUST),
    (contains("individual"), NON_DIRECTOR),
]

# designations that make a register entry eligible as a matching candidate
CANDIDATE_DESIGNATION_RULES: list[Rule] = [
    (contains("director", "secretary"), DIRECTOR),
]

DIN_REMARK = "person holding din"


def first_matching_label(rules: Sequence[Rule], text: Optional[str]) -> Optional[str]:
    """
    Evaluate rules in order against text and return the first label that applies.

    Matching is case-insensitive. Returns None when text is empty or no rule applies.
    """
    if not text:
        return None

    lowered = text.lower()
    for predicate, label in rules:
        if predicate(lowered):
            return label
    return None


def designation_relationship(designation: str) -> str:
    """Relationship label for a matched director, else its raw designation."""
    return first_matching_label(DESIGNATION_RULES, designation) or designation


def entity_relationship(entity_name: str, entity_type: Optional[str]) -> str:
    """Relationship label for a shareholder that matched no director."""
    return (
        first_matching_label(ENTITY_NAME_RULES, entity_name)
        or first_matching_label(ENTITY_TYPE_RULES, entity_type)
        or NON_DIRECTOR
    )


def is_candidate_designation(designation: Optional[str]) -> bool:
    return first_matching_label(CANDIDATE_DESIGNATION_RULES, designation) is not None
