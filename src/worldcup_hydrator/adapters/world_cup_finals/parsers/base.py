"""
Base Table Parser Interface

This module defines the protocol/interface for table parsers.
Parsers locate the finals table in raw page data and turn its rows into
column-indexed cell text.
"""

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Protocol

from ....errors import HydratorError

RawCell = str
TableRow = List[RawCell]


@dataclass
class ParsedTable:
    """Header labels and data rows of the located table."""

    headers: List[str] = field(default_factory=list)
    rows: List[TableRow] = field(default_factory=list)


class TableParser(Protocol):
    """
    Protocol for table parsers.

    Parsers are responsible for converting raw provider data into the
    header labels and data rows of the finals table.
    """

    @abstractmethod
    def parse(self, raw_data: Mapping[str, Any]) -> ParsedTable:
        """
        Parse raw data into header labels and data rows.

        Args:
            raw_data: Raw data from provider (``content`` holds the HTML)

        Returns:
            ParsedTable with the header labels and the TableRows

        Raises:
            TableNotFoundError: If no table matches the locator heuristic
            ParserError: If parsing fails otherwise
        """
        pass

    @property
    @abstractmethod
    def supported_formats(self) -> list[str]:
        """List of supported raw data formats (e.g., ['html'])."""
        pass


class ParserError(HydratorError):
    """Base exception for parser-related errors."""

    def __init__(self, parser_name: str, message: str):
        self.parser_name = parser_name
        self.message = message
        super().__init__(f"{parser_name} parser failed: {message}")


class TableNotFoundError(ParserError):
    """No table in the page matched the finals table heuristic."""

    def __init__(self, parser_name: str, message: str = "Could not find the FIFA World Cup finals table"):
        super().__init__(parser_name, message)
