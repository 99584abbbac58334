"""
Shared fixtures for the World Cup finals tests.
"""

import logging
from pathlib import Path
from typing import List, Sequence

import pytest

from worldcup_types.schemas.models import FinalRecord, SheetMatrix

FINALS_ENV_VARS = (
    "SPREADSHEET_ID",
    "FIFA_SOURCE_URL",
    "FIFA_USER_AGENT",
    "FIFA_REQUEST_TIMEOUT",
    "FIFA_MAX_ROWS",
    "FIFA_REQUIRE_YEAR",
    "FIFA_OUTPUT_DIR",
    "FIFA_SHEET_RANGE",
    "FIFA_LOG_LEVEL",
    "GOOGLE_CREDENTIALS_FILE",
    "GOOGLE_TOKEN_FILE",
)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def finals_page(fixtures_dir) -> Path:
    """Saved copy of the finals page (decoy table first, 12 finals 1930-1982)."""
    return fixtures_dir / "finals_page.html"


@pytest.fixture
def finals_html(finals_page) -> str:
    return finals_page.read_text(encoding="utf-8")


@pytest.fixture
def make_table_html():
    """Factory building a page with one wikitable from a header and rows."""

    def _make(
        header: Sequence[str],
        rows: Sequence[Sequence[str]],
        table_class: str = "wikitable",
        preamble: str = "",
    ) -> str:
        header_html = "".join(f"<th>{label}</th>" for label in header)
        body_html = "".join(
            "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>"
            for row in rows
        )
        return (
            "<html><body>"
            f"{preamble}"
            f'<table class="{table_class}">'
            f"<tr>{header_html}</tr>{body_html}"
            "</table></body></html>"
        )

    return _make


@pytest.fixture
def sample_records() -> List[FinalRecord]:
    return [
        FinalRecord(year="1930", winner="Uruguay", score="4–2", runners_up="Argentina"),
        FinalRecord(
            year="1934", winner="Italy", score="2–1 (a.e.t.)", runners_up="Czechoslovakia"
        ),
        FinalRecord(year="1938", winner="Italy", score="4–2", runners_up="Hungary"),
    ]


@pytest.fixture
def sample_matrix(sample_records) -> SheetMatrix:
    return SheetMatrix(
        values=[["Year", "Winner", "Score", "Runners-up"]]
        + [record.as_row() for record in sample_records]
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the configuration reads."""
    for name in FINALS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
