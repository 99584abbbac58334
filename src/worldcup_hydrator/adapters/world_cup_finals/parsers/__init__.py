"""
Finals Table Parsers

This package contains parsers that turn the finals page into table rows.
"""

from .base import ParsedTable, ParserError, RawCell, TableNotFoundError, TableParser, TableRow
from .html_table import HtmlTableParser, clean_header_text

__all__ = [
    "TableParser",
    "ParsedTable",
    "ParserError",
    "TableNotFoundError",
    "HtmlTableParser",
    "RawCell",
    "TableRow",
    "clean_header_text",
]
