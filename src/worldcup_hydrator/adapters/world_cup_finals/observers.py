"""
Pipeline observers.

The use case reports progress through a PipelineObserver instead of printing;
the CLI plugs in a console observer, library callers get logging.
"""

import logging
from typing import Callable, List, Optional, Protocol

from worldcup_types.schemas.models import FinalRecord, PipelineResult

logger = logging.getLogger(__name__)


class PipelineObserver(Protocol):
    """Receives progress events from FinalsExtractionUseCase."""

    def stage_started(self, stage: str, description: str) -> None: ...

    def records_extracted(self, records: List[FinalRecord]) -> None: ...

    def file_written(self, path: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def finished(self, result: PipelineResult) -> None: ...


class LoggingObserver:
    """Observer that forwards every event to the module logger."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def stage_started(self, stage: str, description: str) -> None:
        self.log.info(f"[{stage}] {description}")

    def records_extracted(self, records: List[FinalRecord]) -> None:
        self.log.info(f"Extracted {len(records)} rows of data")
        for index, record in enumerate(records, start=1):
            self.log.debug(f"{index}. {describe_record(record)}")

    def file_written(self, path: str) -> None:
        self.log.info(f"Data saved to {path}")

    def warning(self, message: str) -> None:
        self.log.warning(message)

    def error(self, message: str) -> None:
        self.log.error(message)

    def finished(self, result: PipelineResult) -> None:
        if result.success:
            self.log.info(f"Workflow completed: {result.total_records} records")
        else:
            self.log.warning(
                f"Workflow finished with errors at stage '{result.stage}': {result.error_message}"
            )


class ConsoleObserver(LoggingObserver):
    """Observer that also narrates progress on the console."""

    def __init__(self, echo: Callable[..., None], log: Optional[logging.Logger] = None):
        super().__init__(log)
        self.echo = echo

    def stage_started(self, stage: str, description: str) -> None:
        super().stage_started(stage, description)
        self.echo(description)

    def records_extracted(self, records: List[FinalRecord]) -> None:
        super().records_extracted(records)
        self.echo(f"Successfully extracted {len(records)} rows of data\n")
        self.echo("Extracted Data:")
        for index, record in enumerate(records, start=1):
            self.echo(f"{index}. {describe_record(record)}")

    def file_written(self, path: str) -> None:
        super().file_written(path)
        self.echo(f"  • {path}")

    def warning(self, message: str) -> None:
        super().warning(message)
        self.echo(f"Warning: {message}", err=True)

    def error(self, message: str) -> None:
        super().error(message)
        self.echo(f"Error: {message}", err=True)

    def finished(self, result: PipelineResult) -> None:
        super().finished(result)
        if not result.records:
            return
        self.echo("\nSummary:")
        self.echo(f"  - Extracted {result.total_records} FIFA World Cup finals records")
        for path in result.files_written:
            self.echo(f"  - Data saved to {path}")
        upload = result.upload
        if upload is None:
            self.echo("  - Google Sheets upload not attempted")
        elif upload.skipped:
            self.echo("  - Google Sheets upload skipped (no spreadsheet ID provided)")
        elif upload.success:
            self.echo(f"  - Appended {upload.updated_rows} rows to spreadsheet {upload.spreadsheet_id}")
        else:
            self.echo(f"  - Google Sheets upload failed: {upload.error_message}")


def describe_record(record: FinalRecord) -> str:
    """One-line summary such as ``1930 - Uruguay vs Argentina (4–2)``."""
    return f"{record.year} - {record.winner} vs {record.runners_up} ({record.score})"
