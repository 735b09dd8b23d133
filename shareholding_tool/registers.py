"""
Load directors and shareholding registers from local files.

Registers are exported either as CSV or as JSON. JSON files may hold a
plain list of rows, an object with a "data" list, or a whole extracted-data
payload keyed by section name, e.g.

    {
        "Directors": {"data": [...]},
        "Shareholding More Than 5%": {"data": [...]},
        "Director Shareholding": {"data": [...]}
    }
"""

import json
import logging
from pathlib import Path
from typing import Optional, TypeVar

import pandas as pd
from pydantic import BaseModel, ValidationError

from .models import DirectorRecord, DirectorShareholding, ShareholderRecord

logger = logging.getLogger(__name__)

DIRECTORS_SECTION = "Directors"
SHAREHOLDING_SECTION = "Shareholding More Than 5%"
DIRECTOR_SHAREHOLDING_SECTION = "Director Shareholding"

M = TypeVar("M", bound=BaseModel)


def load_register(
    path: str | Path,
    model: type[M],
    section: Optional[str] = None,
) -> list[M]:
    """
    Read a register file into validated records.

    Rows that fail validation are logged and skipped.

    Args:
        path: CSV or JSON file
        model: record model to validate each row into
        section: section name to pick from an extracted-data JSON payload

    Returns:
        List of records in file order, empty if the section is absent
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str)
    elif suffix == ".json":
        with open(path, encoding="utf-8") as f:
            df = pd.DataFrame(_json_rows(json.load(f), section))
    else:
        raise ValueError(f"Unsupported register file type: {path}")

    df = df.astype(object).where(df.notna(), None)

    records = []
    for i, row in enumerate(df.to_dict(orient="records")):
        try:
            records.append(model.model_validate(row))
        except ValidationError as e:
            logger.warning(f"Skipping row {i} of {path.name}: {e}")

    logger.debug(f"Loaded {len(records)} {model.__name__} rows from {path}")
    return records


def _json_rows(data, section: Optional[str]) -> list[dict]:
    if isinstance(data, dict) and section and section in data:
        data = data[section] or []
    if isinstance(data, dict):
        data = data.get("data") or []
    if not isinstance(data, list):
        return []
    return [row for row in data if isinstance(row, dict)]


def load_directors(path: str | Path) -> list[DirectorRecord]:
    return load_register(path, DirectorRecord, section=DIRECTORS_SECTION)


def load_shareholders(path: str | Path) -> list[ShareholderRecord]:
    return load_register(path, ShareholderRecord, section=SHAREHOLDING_SECTION)


def load_director_holdings(path: str | Path) -> list[DirectorShareholding]:
    return load_register(
        path, DirectorShareholding, section=DIRECTOR_SHAREHOLDING_SECTION
    )
