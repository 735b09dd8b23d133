import logging
from typing import Iterable, Optional

from ..models import (
    ClassifiedShareholder,
    DirectorRecord,
    ShareholderRecord,
    ShareholdingPattern,
)
from ..text_utils import NameMatcher
from .rules import (
    DIN_REMARK,
    DIRECTOR,
    designation_relationship,
    entity_relationship,
    is_candidate_designation,
)

logger = logging.getLogger(__name__)


class ShareholdingClassifier:
    """
    Label each large shareholder with its governance role.

    Shareholders from the latest reporting period are matched by name
    against the active directors; a matched director's designation gives
    the relationship, otherwise it is inferred from the shareholder's own
    name and declared entity type.
    """

    def __init__(self, matcher: Optional[NameMatcher] = None):
        """
        Initialize the classifier.

        Args:
            matcher: NameMatcher instance (creates new one if not provided)
        """
        self.matcher = matcher or NameMatcher()

    def classify(
        self,
        directors: Optional[Iterable[DirectorRecord]],
        shareholders: Optional[Iterable[ShareholderRecord]],
    ) -> ShareholdingPattern:
        """
        Build the ranked shareholding pattern for the latest reporting period.

        Never raises on malformed records: unparseable percentages count as 0
        and are dropped, as are records without a name.

        Args:
            directors: Directors register entries
            shareholders: Shareholding register entries, possibly spanning periods

        Returns:
            ShareholdingPattern with rows ranked by percentage, empty if no data
        """
        directors = list(directors or [])
        shareholders = list(shareholders or [])

        candidates = self.director_candidates(directors, shareholders)
        latest_period = self.latest_period(shareholders)
        if latest_period is None:
            logger.debug("No reporting period found in shareholding register")
            return ShareholdingPattern()

        rows = []
        for record in shareholders:
            if record.reporting_period_end != latest_period:
                continue
            name = (record.entity_name or "").strip()
            percent = record.shareholding_percent
            if not name or percent <= 0:
                continue

            rows.append(
                {
                    "entity_name": name,
                    "entity_type": record.entity_type,
                    "reporting_period_end": latest_period,
                    "shareholding_percent": percent,
                    "shareholding_str": record.shareholding or "0",
                    "relationship": self.relationship(
                        name, record.entity_type, candidates
                    ),
                }
            )

        rows.sort(key=lambda row: row["shareholding_percent"], reverse=True)
        classified = [
            ClassifiedShareholder(rank=rank, **row) for rank, row in enumerate(rows, 1)
        ]
        total = sum(row.shareholding_percent for row in classified)

        logger.debug(
            f"Classified {len(classified)} of {len(shareholders)} shareholding records "
            f"for period {latest_period}"
        )
        return ShareholdingPattern(
            rows=classified, total=total, latest_period=latest_period
        )

    def director_candidates(
        self,
        directors: list[DirectorRecord],
        shareholders: list[ShareholderRecord],
    ) -> list[DirectorRecord]:
        """
        Active directors and secretaries eligible for name matching.

        When the register yields none, directors are inferred from
        shareholding remarks mentioning a DIN holder.
        """
        candidates = []
        for director in directors:
            name = (director.name or "").strip()
            designation = (director.designation or "").strip()
            if (
                name
                and designation
                and director.is_active
                and is_candidate_designation(designation)
            ):
                candidates.append(DirectorRecord(name=name, designation=designation))

        if candidates:
            logger.debug(f"Found {len(candidates)} director candidates in register")
            return candidates

        seen = set()
        for record in shareholders:
            if DIN_REMARK not in (record.remarks or "").lower():
                continue
            name = (record.entity_name or "").strip()
            if name and name not in seen:
                candidates.append(DirectorRecord(name=name, designation=DIRECTOR))
                seen.add(name)

        logger.debug(
            "No eligible directors in register, "
            f"inferred {len(candidates)} from DIN remarks"
        )
        return candidates

    def latest_period(self, shareholders: list[ShareholderRecord]) -> Optional[str]:
        """
        The latest reporting period present in the register.

        Periods are compared as plain strings, which is only correct for
        sortable formats such as ISO dates.
        """
        periods = [
            r.reporting_period_end for r in shareholders if r.reporting_period_end
        ]
        return max(periods) if periods else None

    def relationship(
        self,
        entity_name: str,
        entity_type: Optional[str],
        candidates: list[DirectorRecord],
    ) -> str:
        director = self.matcher.find_first_match(
            entity_name, candidates, key=lambda d: d.name
        )
        if director is not None:
            return designation_relationship(director.designation)
        return entity_relationship(entity_name, entity_type)


def classify_shareholders(
    directors: Optional[Iterable[DirectorRecord]],
    shareholders: Optional[Iterable[ShareholderRecord]],
) -> ShareholdingPattern:
    return ShareholdingClassifier().classify(directors, shareholders)
