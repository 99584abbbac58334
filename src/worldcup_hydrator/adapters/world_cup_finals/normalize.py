"""
Data Normalization for World Cup Finals

This module cleans raw cell text and maps table rows positionally onto
FinalRecord objects. Header labels are never used to remap columns.
"""

import html
import logging
import re
from typing import List, Optional, Sequence

from worldcup_types.schemas.models import FinalRecord

logger = logging.getLogger(__name__)

REFERENCE_PATTERN = re.compile(r"\[[^\]]*\]")
WHITESPACE_PATTERN = re.compile(r"\s+")
YEAR_PATTERN = re.compile(r"\b(19|20)\d{2}\b")

# Column position -> FinalRecord field
COLUMN_FIELDS = ("year", "winner", "score", "runners_up")


def clean_cell_text(text: Optional[str]) -> str:
    """
    Clean a single cell's text.

    Entities are decoded before reference markers are removed so that an
    encoded marker such as ``&#91;1&#93;`` cannot survive as ``[1]``.

    Args:
        text: Raw cell text (may still contain HTML entities)

    Returns:
        Cleaned text; cleaning an already clean string returns it unchanged
    """
    if not text:
        return ""

    # Decoding can expose a marker and removing a marker can join an entity
    # (&am[1]p;), so both steps repeat until neither changes the text.
    # Every change shortens the text, so the loop terminates.
    previous = None
    while text != previous:
        previous = text
        text = REFERENCE_PATTERN.sub("", html.unescape(text))
    text = text.replace("\xa0", " ")
    text = WHITESPACE_PATTERN.sub(" ", text)
    return text.strip()


def looks_like_year(value: str) -> bool:
    """True when ``value`` contains a 19xx or 20xx year."""
    return bool(YEAR_PATTERN.search(value or ""))


def normalize_row(
    cells: Sequence[str], headers: Optional[Sequence[str]] = None
) -> FinalRecord:
    """
    Normalize one table row into a FinalRecord.

    Args:
        cells: Raw cell texts of the row; positions 0-3 are used
        headers: Header labels of the table, used for logging only

    Returns:
        FinalRecord with every field present
    """
    values = {}
    for position, field_name in enumerate(COLUMN_FIELDS):
        raw = cells[position] if position < len(cells) else ""
        values[field_name] = clean_cell_text(raw)

    record = FinalRecord(**values)
    if headers:
        logger.debug(
            f"Normalized row under {list(headers[: len(COLUMN_FIELDS)])}: {record.as_row()}"
        )
    return record


def normalize_rows(
    rows: Sequence[Sequence[str]],
    headers: Optional[Sequence[str]] = None,
    require_year: bool = False,
) -> List[FinalRecord]:
    """
    Normalize multiple rows into FinalRecord objects.

    Args:
        rows: TableRows from the parser, in table order
        headers: Header labels of the table
        require_year: Drop records whose year cell is not a 19xx/20xx year

    Returns:
        List of FinalRecord objects in table order
    """
    records = []
    for row in rows:
        record = normalize_row(row, headers)
        if require_year and not looks_like_year(record.year):
            logger.debug(f"Skipping row without a year: {record.as_row()}")
            continue
        records.append(record)

    logger.info(f"Normalized {len(records)} finals records")
    return records
