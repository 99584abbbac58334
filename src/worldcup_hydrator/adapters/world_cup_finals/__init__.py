"""
World Cup Finals System

This module extracts the FIFA World Cup finals table from Wikipedia and
publishes it as JSON, CSV and (optionally) a Google Sheets range.

The system is organized following Clean Architecture principles:
- providers/: Page providers (Wikipedia, saved HTML file)
- parsers/: HTML table locator and row extractor
- normalize.py: Cell cleaning and positional record mapping
- formatter.py: Header + rows matrix for the Sheets API
- writer.py: JSON and CSV output
- observers.py: Progress reporting
- usecase.py: Orchestration of the whole run
- config.py: Environment-driven configuration

Note: Data models are defined in worldcup_types.
"""

# Core components
from .usecase import FinalsExtractionUseCase, run_finals_extraction

# Providers
from .providers import PageProvider, ProviderError, StaticPageProvider, WikipediaProvider

# Parsers
from .parsers import HtmlTableParser, ParsedTable, ParserError, TableNotFoundError, TableParser

# Utilities
from .normalize import clean_cell_text, normalize_row, normalize_rows
from .formatter import format_for_sheets
from .writer import read_json, to_dataframe, write_csv, write_json
from .observers import ConsoleObserver, LoggingObserver, PipelineObserver
from .config import apply_overrides, get_default_config, load_config

__all__ = [
    # Use cases
    "FinalsExtractionUseCase",
    "run_finals_extraction",
    # Providers
    "PageProvider",
    "ProviderError",
    "WikipediaProvider",
    "StaticPageProvider",
    # Parsers
    "TableParser",
    "ParsedTable",
    "ParserError",
    "TableNotFoundError",
    "HtmlTableParser",
    # Utilities
    "clean_cell_text",
    "normalize_row",
    "normalize_rows",
    "format_for_sheets",
    "write_json",
    "write_csv",
    "read_json",
    "to_dataframe",
    "PipelineObserver",
    "LoggingObserver",
    "ConsoleObserver",
    "apply_overrides",
    "get_default_config",
    "load_config",
]
