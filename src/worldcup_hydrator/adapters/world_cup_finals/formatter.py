"""
Sheet Formatter

Wraps normalized FinalRecords into the header + rows matrix accepted by the
Google Sheets ``values.append`` endpoint.
"""

import logging
from typing import Iterable

from worldcup_types.schemas.models import SHEET_HEADER, FinalRecord, SheetMatrix

logger = logging.getLogger(__name__)


def format_for_sheets(records: Iterable[FinalRecord]) -> SheetMatrix:
    """
    Format records for the Google Sheets API.

    Always succeeds; an empty input produces a header-only matrix.

    Args:
        records: FinalRecords in output order

    Returns:
        SheetMatrix whose first row is the fixed header
    """
    values = [list(SHEET_HEADER)]
    for record in records:
        values.append(record.as_row())

    logger.debug(f"Formatted {len(values) - 1} rows for Google Sheets")
    return SheetMatrix(values=values)
