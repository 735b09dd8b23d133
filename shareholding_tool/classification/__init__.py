from .classifier import ShareholdingClassifier, classify_shareholders
from .rules import (
    COMPANY,
    COMPANY_SECRETARY,
    DIRECTOR,
    LLP,
    MANAGING_DIRECTOR,
    NON_DIRECTOR,
    TRUST,
    WHOLE_TIME_DIRECTOR,
)

__all__ = [
    "ShareholdingClassifier",
    "classify_shareholders",
    "MANAGING_DIRECTOR",
    "WHOLE_TIME_DIRECTOR",
    "COMPANY_SECRETARY",
    "DIRECTOR",
    "COMPANY",
    "TRUST",
    "LLP",
    "NON_DIRECTOR",
]
