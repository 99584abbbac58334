"""
World Cup Finals Use Case Orchestrator

This module orchestrates one extraction run following clean architecture
principles. It coordinates the provider, parser, normalizer, formatter,
writers and the optional Sheets client, and converts every component failure
into a PipelineResult instead of letting it escape.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from worldcup_types.schemas.config import FinalsScraperConfig
from worldcup_types.schemas.models import (
    PipelineResult,
    SheetMatrix,
    UploadOutcome,
    WriteOutcome,
)

from ...errors import (
    AuthenticationError,
    HydratorError,
    NoRowsExtractedError,
    UploadError,
    WriterError,
)
from ..google_sheets.auth import InstalledAppTokenProvider
from ..google_sheets.client import SheetsClient
from .formatter import format_for_sheets
from .normalize import normalize_rows
from .observers import LoggingObserver, PipelineObserver
from .parsers.base import ParserError, TableNotFoundError, TableParser
from .parsers.html_table import HtmlTableParser
from .providers.base import PageProvider, ProviderError
from .providers.wikipedia import WikipediaProvider
from .writer import write_csv, write_json

logger = logging.getLogger(__name__)


class FinalsExtractionUseCase:
    """
    Use case for extracting and publishing the finals table.

    This class orchestrates the entire run:
    1. Fetch the page from the provider
    2. Locate the table and extract its rows
    3. Normalize rows into FinalRecord objects
    4. Format the records as a SheetMatrix
    5. Write JSON and CSV files (each independently)
    6. Append the matrix to Google Sheets when a spreadsheet id is set
    """

    def __init__(
        self,
        provider: PageProvider,
        parser: TableParser,
        config: Optional[FinalsScraperConfig] = None,
        sheets_client: Optional[SheetsClient] = None,
        observer: Optional[PipelineObserver] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            provider: Page provider (e.g., WikipediaProvider)
            parser: Table parser (e.g., HtmlTableParser)
            config: Run configuration; defaults apply when omitted
            sheets_client: Client used for the upload step
            observer: Receives progress events; logs them when omitted
        """
        self.provider = provider
        self.parser = parser
        self.config = config or FinalsScraperConfig()
        self.sheets_client = sheets_client
        self.observer = observer or LoggingObserver()

    @classmethod
    def from_config(
        cls,
        config: FinalsScraperConfig,
        observer: Optional[PipelineObserver] = None,
        code_prompt: Optional[Callable[[str], str]] = None,
    ) -> "FinalsExtractionUseCase":
        """Build the default Wikipedia/BeautifulSoup/gspread wiring."""
        provider = WikipediaProvider(
            url=config.source_url,
            user_agent=config.user_agent,
            timeout=config.request_timeout,
        )
        parser = HtmlTableParser(max_rows=config.max_rows, min_cells=config.min_cells)

        sheets_client = None
        if config.sheets.upload_enabled:
            token_kwargs = {}
            if code_prompt is not None:
                token_kwargs["prompt"] = code_prompt
            token_provider = InstalledAppTokenProvider(
                credentials_file=config.sheets.credentials_file,
                token_file=config.sheets.token_file,
                scopes=config.sheets.scopes,
                **token_kwargs,
            )
            sheets_client = SheetsClient(token_provider)

        return cls(provider, parser, config, sheets_client, observer)

    def _fail(self, result: PipelineResult, message: str) -> PipelineResult:
        result.success = False
        result.error_message = message
        result.completed_at = datetime.now()
        self.observer.error(message)
        self.observer.finished(result)
        return result

    def _write_outputs(self, matrix: SheetMatrix) -> list:
        targets = [
            ("json", self.config.json_path, write_json),
            ("csv", self.config.csv_path, write_csv),
        ]

        outcomes = []
        for fmt, path, writer in targets:
            try:
                file_hash = writer(matrix, path)
            except WriterError as e:
                self.observer.error(str(e))
                outcomes.append(
                    WriteOutcome(
                        path=str(path), format=fmt, success=False, error_message=e.message
                    )
                )
                continue
            self.observer.file_written(str(path))
            outcomes.append(WriteOutcome(path=str(path), format=fmt, sha256=file_hash))
        return outcomes

    def _upload(self, matrix: SheetMatrix) -> UploadOutcome:
        sheets = self.config.sheets
        outcome = UploadOutcome(spreadsheet_id=sheets.spreadsheet_id, range=sheets.range)

        if not sheets.upload_enabled:
            outcome.skipped = True
            self.observer.stage_started(
                "upload", "Skipping Google Sheets upload (no spreadsheet ID provided)"
            )
            return outcome

        if self.sheets_client is None:
            outcome.error_message = "No Google Sheets client configured"
            self.observer.error(outcome.error_message)
            return outcome

        self.observer.stage_started("upload", "Authenticating with Google Sheets...")
        try:
            if not self.sheets_client.is_authenticated:
                self.sheets_client.authenticate()
        except AuthenticationError as e:
            outcome.error_message = f"Authentication failed: {e}"
            self.observer.error(outcome.error_message)
            return outcome

        self.observer.stage_started("upload", "Appending data to Google Sheets...")
        try:
            outcome.updated_rows = self.sheets_client.append(
                sheets.spreadsheet_id, sheets.range, matrix
            )
        except UploadError as e:
            outcome.error_message = str(e)
            self.observer.error(outcome.error_message)
            return outcome

        outcome.success = True
        return outcome

    def execute(self) -> PipelineResult:
        """
        Execute one extraction run.

        Returns:
            PipelineResult describing how far the run got and what it produced
        """
        result = PipelineResult(source_url=self.config.source_url)

        try:
            # Step 1: Fetch
            self.observer.stage_started("fetch", "Step 1: Scraping data from Wikipedia...")
            try:
                raw_data = self.provider.fetch_raw()
            except ProviderError as e:
                return self._fail(result, f"Failed to fetch page: {e}")
            result.source_url = raw_data.get("url") or result.source_url

            # Step 2: Locate the table and extract rows
            result.stage = "locate"
            try:
                parsed = self.parser.parse(raw_data)
            except TableNotFoundError as e:
                return self._fail(result, e.message)
            except ParserError as e:
                result.stage = "extract"
                return self._fail(result, str(e))

            result.stage = "extract"
            result.headers = parsed.headers
            records = normalize_rows(
                parsed.rows, parsed.headers, require_year=self.config.require_year
            )
            if not records:
                return self._fail(result, NoRowsExtractedError().message)
            result.records = records
            self.observer.records_extracted(records)

            # Step 3: Format
            result.stage = "format"
            self.observer.stage_started("format", "Step 2: Formatting data for Google Sheets...")
            matrix = format_for_sheets(records)
            result.matrix = matrix

            # Step 4: Write local files
            result.stage = "write"
            self.observer.stage_started("write", "Step 3: Saving data to local files...")
            result.writes = self._write_outputs(matrix)

            # Step 5: Upload
            result.stage = "upload"
            result.upload = self._upload(matrix)

            result.stage = "done"
            result.success = not result.partial
            if not result.success:
                result.error_message = "; ".join(
                    [w.error_message for w in result.writes if w.error_message]
                    + ([result.upload.error_message] if result.upload.error_message else [])
                )
            result.completed_at = datetime.now()
            self.observer.finished(result)
            return result

        except HydratorError as e:
            return self._fail(result, str(e))
        except Exception as e:
            logger.exception("Unexpected error during finals extraction")
            return self._fail(result, f"Unexpected error: {e}")


def run_finals_extraction(
    config: FinalsScraperConfig, observer: Optional[PipelineObserver] = None
) -> PipelineResult:
    """
    Convenience function for a run with the default wiring.

    Args:
        config: Run configuration
        observer: Progress observer

    Returns:
        Pipeline result
    """
    return FinalsExtractionUseCase.from_config(config, observer).execute()

