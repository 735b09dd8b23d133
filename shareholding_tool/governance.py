"""
Board and director shareholding summaries derived from the registers.
"""

import logging
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from .classification import ShareholdingClassifier
from .models import (
    DirectorRecord,
    DirectorShareholding,
    ShareholderRecord,
    ShareholdingPattern,
)
from .text_utils import NameMatcher

logger = logging.getLogger(__name__)

ADEQUATE_BOARD = "Adequate board composition with sufficient director oversight."
MINIMAL_BOARD = "Minimal board composition - consider adding independent directors."
LIMITED_BOARD = "Limited board oversight - governance structure may need strengthening."


class DirectorHoldingSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    holders_count: int = 0
    total_percent: float = 0.0
    max_percent: float = 0.0
    total_shares: int = 0


def split_directors(
    directors: Iterable[DirectorRecord],
) -> tuple[list[DirectorRecord], list[DirectorRecord]]:
    """Split the register into (active, former) directors, keeping register order."""
    active, former = [], []
    for director in directors:
        (active if director.is_active else former).append(director)
    return active, former


def find_director_holding(
    director: DirectorRecord,
    holdings: Iterable[DirectorShareholding],
    matcher: Optional[NameMatcher] = None,
) -> Optional[DirectorShareholding]:
    """First entry of the director shareholding register naming this director."""
    if not director.name:
        return None
    matcher = matcher or NameMatcher()
    return matcher.find_first_match(
        director.name, [h for h in holdings if h.name], key=lambda h: h.name
    )


def summarize_director_holdings(
    holdings: Iterable[DirectorShareholding],
) -> DirectorHoldingSummary:
    holdings = list(holdings)
    if not holdings:
        return DirectorHoldingSummary()

    percents = [h.shareholding_percent for h in holdings]
    return DirectorHoldingSummary(
        holders_count=sum(1 for p in percents if p > 0),
        total_percent=sum(percents),
        max_percent=max(percents),
        total_shares=sum(h.share_count for h in holdings),
    )


def assess_board_composition(active_count: int) -> str:
    if active_count >= 3:
        return ADEQUATE_BOARD
    elif active_count >= 2:
        return MINIMAL_BOARD
    return LIMITED_BOARD


def designation_category(designation: Optional[str]) -> str:
    """
    Display category for a designation badge: "primary", "info" or "success".
    """
    lowered = (designation or "").lower()
    if "managing director" in lowered or "md" in lowered:
        return "primary"
    if "director" in lowered:
        return "info"
    if "ceo" in lowered or "chief" in lowered:
        return "success"
    return "info"


def board_overview(
    directors: Iterable[DirectorRecord],
    shareholders: Iterable[ShareholderRecord],
    limit: int = 5,
    pattern: Optional[ShareholdingPattern] = None,
) -> list[str]:
    """
    Short text summary of the board and the major shareholders.

    Lists the first `limit` active directors and the `limit` largest
    shareholders of the latest period, with their combined holding.
    """
    directors = list(directors)
    lines = []
    active, former = split_directors(directors)
    lines.append(
        f"Board Composition: {len(active)} active directors, "
        f"{len(former)} former directors"
    )

    if active:
        listed = ", ".join(
            f"{d.name} ({d.designation or '-'}, DIN: {d.din or '-'})"
            for d in active[:limit]
        )
        more = f" and {len(active) - limit} more" if len(active) > limit else ""
        lines.append(f"Key Directors: {listed}{more}")

    if pattern is None:
        pattern = ShareholdingClassifier().classify(directors, shareholders)
    top = pattern.rows[:limit]
    if top:
        listed = ", ".join(f"{r.entity_name}: {r.formatted_percent}" for r in top)
        lines.append(f"Major Shareholders ({pattern.latest_period}): {listed}")
        control = sum(r.shareholding_percent for r in top)
        lines.append(f"Top {len(top)} Shareholders Control: {control:.1f}% of equity")

    lines.append(assess_board_composition(len(active)))
    return lines
