from __future__ import annotations

from .classification import ShareholdingClassifier, classify_shareholders
from .models import (
    ClassifiedShareholder,
    DirectorRecord,
    DirectorShareholding,
    ShareholderRecord,
    ShareholdingPattern,
    format_percentage,
)
from .text_utils import NameMatcher, NameNormalizer, names_match, normalize_name

__all__ = [
    "NameNormalizer",
    "NameMatcher",
    "normalize_name",
    "names_match",
    "ShareholdingClassifier",
    "classify_shareholders",
    "DirectorRecord",
    "ShareholderRecord",
    "DirectorShareholding",
    "ClassifiedShareholder",
    "ShareholdingPattern",
    "format_percentage",
]
