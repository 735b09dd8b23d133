from __future__ import annotations

import math
import re
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# cessation values that still mean "in office"
_NO_CESSATION = ("", "-")


# leading number, the way register exports write it: "12.5%", "5.25 (equity)"
_leading_number_regex = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_percent(value: Any) -> float:
    """
    Parse a percent-formatted value such as "12.5%" into a float.

    Only the leading number is read, so trailing text like "% approx" or
    " (equity)" is ignored. Returns 0.0 when no number leads the value.
    """
    if value is None:
        return 0.0
    match = _leading_number_regex.match(str(value))
    if not match:
        return 0.0
    parsed = float(match.group(1))
    return parsed if math.isfinite(parsed) else 0.0


def parse_share_count(value: Any) -> int:
    """Parse a share count such as "1,20,000" into an int, 0 on failure."""
    if value is None:
        return 0
    text = str(value).replace(",", "").strip()
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return 0


def _text_or_none(value: Any) -> Any:
    # register exports mix numbers and strings in the same column
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, float) and math.isnan(value):
        return None
    return str(value)


RegisterText = Annotated[Optional[str], BeforeValidator(_text_or_none)]


class _RegisterRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class DirectorRecord(_RegisterRecord):
    """
    A natural person holding a governance role, as listed in the
    directors register.
    """

    name: RegisterText = None
    designation: RegisterText = Field(default=None, alias="present_designation")
    cessation_date: RegisterText = Field(default=None, alias="date_of_cessation")
    din: RegisterText = None
    appointment_date: RegisterText = Field(
        default=None, alias="original_appointment_date"
    )

    @property
    def is_active(self) -> bool:
        return (
            self.cessation_date is None
            or self.cessation_date.strip() in _NO_CESSATION
        )


class ShareholderRecord(_RegisterRecord):
    """
    An entity reported as holding more than 5% of equity in a
    reporting period.
    """

    entity_name: RegisterText = None
    entity_type: RegisterText = None
    reporting_period_end: RegisterText = Field(
        default=None, alias="financial_year_ending_on"
    )
    shareholding: RegisterText = None
    remarks: RegisterText = None

    @property
    def shareholding_percent(self) -> float:
        return parse_percent(self.shareholding)


class DirectorShareholding(_RegisterRecord):
    """A director's own holding, as listed in the director shareholding register."""

    name: RegisterText = None
    shareholding: RegisterText = None
    number_of_shares: RegisterText = None

    @property
    def shareholding_percent(self) -> float:
        return parse_percent(self.shareholding)

    @property
    def share_count(self) -> int:
        return parse_share_count(self.number_of_shares)


def format_percentage(value: float) -> str:
    """
    Format a shareholding percentage for display.

    Very small holdings get extra decimals so they do not show up as "0.00%".
    """
    if 0 < value < 0.001:
        return f"{value:.6f}%"
    elif value < 0.01:
        return f"{value:.5f}%"
    return f"{value:.2f}%"


class ClassifiedShareholder(BaseModel):
    """A shareholder from the latest period with its resolved relationship."""

    model_config = ConfigDict(frozen=True)

    entity_name: str
    entity_type: Optional[str] = None
    reporting_period_end: str
    shareholding_percent: float
    shareholding_str: str
    relationship: str
    rank: int

    @property
    def formatted_percent(self) -> str:
        return format_percentage(self.shareholding_percent)


class ShareholdingPattern(BaseModel):
    """Ranked shareholding table for the latest reporting period."""

    model_config = ConfigDict(frozen=True)

    rows: list[ClassifiedShareholder] = Field(default_factory=list)
    total: float = 0.0
    latest_period: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def formatted_total(self) -> str:
        return f"{self.total:.2f}%"
