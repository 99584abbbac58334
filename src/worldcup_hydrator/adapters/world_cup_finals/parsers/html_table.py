"""
HTML Table Parser

This module provides HTML table parsing for the World Cup finals page.
It implements the TableParser protocol: it locates the finals table with a
first-match heuristic and extracts a fixed window of rows below its header.
"""

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .base import ParsedTable, ParserError, TableNotFoundError, TableParser, TableRow

logger = logging.getLogger(__name__)

HEADER_KEYWORDS = ("year", "final")


def clean_header_text(text: str) -> str:
    """Normalize a header label: drop reference markers, collapse whitespace."""
    text = re.sub(r"\[[^\]]*\]", "", text)
    return re.sub(r"\s+", " ", text).strip()


class HtmlTableParser(TableParser):
    """
    HTML table parser for the finals table.

    Locates the first ``wikitable`` whose header row mentions a year or a
    final, then reads up to ``max_rows`` rows after the header. Rows with
    fewer than ``min_cells`` cells are dropped but still use up a slot in
    that window.
    """

    def __init__(
        self,
        table_class: str = "wikitable",
        max_rows: int = 10,
        min_cells: int = 4,
        keywords: Iterable[str] = HEADER_KEYWORDS,
    ):
        """
        Initialize HTML table parser.

        Args:
            table_class: CSS class a candidate table must carry
            max_rows: Size of the row window examined after the header
            min_cells: Minimum number of th/td cells for a row to be kept
            keywords: Case-insensitive header substrings identifying the table
        """
        self.table_class = table_class
        self.max_rows = max_rows
        self.min_cells = min_cells
        self.keywords = tuple(k.lower() for k in keywords)

    @property
    def supported_formats(self) -> List[str]:
        """Supported raw data formats."""
        return ["html"]

    @staticmethod
    def _row_cells(row: Tag) -> List[Tag]:
        return row.find_all(["th", "td"], recursive=False)

    def find_finals_table(self, soup: BeautifulSoup) -> Optional[Tag]:
        """Return the first candidate table whose header row matches, or None."""
        tables = soup.find_all("table", class_=self.table_class)
        logger.debug(f"Found {len(tables)} candidate tables with class {self.table_class}")

        for index, table in enumerate(tables):
            header_row = table.find("tr")
            if header_row is None:
                continue
            header_text = " ".join(
                cell.get_text() for cell in self._row_cells(header_row)
            ).lower()
            if any(keyword in header_text for keyword in self.keywords):
                logger.debug(f"Selected table #{index} by header keywords")
                return table

        logger.warning("No suitable finals table found")
        return None

    def extract_headers(self, table: Tag) -> List[str]:
        """Extract column labels from the table's first row."""
        headers = []
        header_row = table.find("tr")
        if header_row:
            for cell in self._row_cells(header_row):
                header_text = clean_header_text(cell.get_text(" ", strip=True))
                if header_text:
                    headers.append(header_text)

        logger.debug(f"Extracted headers: {headers}")
        return headers

    def extract_rows(self, table: Tag) -> List[TableRow]:
        """
        Extract data rows from the table.

        The window is the first ``max_rows`` rows after the header; short
        rows inside the window are skipped without being replaced.
        """
        window = table.find_all("tr")[1 : 1 + self.max_rows]
        logger.debug(f"Processing {len(window)} rows after the header")

        rows: List[TableRow] = []
        for row_idx, row in enumerate(window):
            cells = self._row_cells(row)
            if len(cells) < self.min_cells:
                logger.debug(f"Row {row_idx}: {len(cells)} cells, skipped")
                continue
            rows.append([cell.get_text(" ", strip=True) for cell in cells])

        logger.debug(f"Extracted {len(rows)} rows with at least {self.min_cells} cells")
        return rows

    def parse(self, raw_data: Mapping[str, Any]) -> ParsedTable:
        """
        Parse HTML content into header labels and data rows.

        Args:
            raw_data: Raw data from provider containing HTML content

        Returns:
            ParsedTable for the located finals table

        Raises:
            TableNotFoundError: If no table matches the heuristic
            ParserError: If parsing fails otherwise
        """
        try:
            html_content = raw_data.get("content", "")
            if not html_content:
                raise ParserError("html_table", "No HTML content provided")

            soup = BeautifulSoup(html_content, "html.parser")

            table = self.find_finals_table(soup)
            if table is None:
                raise TableNotFoundError("html_table")

            headers = self.extract_headers(table)
            logger.info(f"Found headers: {headers}")

            rows = self.extract_rows(table)
            if not rows:
                logger.warning("No data rows extracted from the finals table")

            return ParsedTable(headers=headers, rows=rows)

        except ParserError:
            raise
        except Exception as e:
            logger.error(f"HTML table parser failed: {e}")
            raise ParserError("html_table", str(e)) from e
