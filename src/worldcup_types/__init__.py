"""
worldcup_types: Authoritative schemas for the World Cup finals pipeline.

This module provides:
- Pydantic models for data contracts (FinalRecord, SheetMatrix, results)
- Configuration models shared by the hydrator and its CLI
"""

from .schemas.config import FinalsScraperConfig, SheetsConfig
from .schemas.models import (
    SHEET_HEADER,
    FinalRecord,
    PipelineResult,
    SheetMatrix,
    UploadOutcome,
    WriteOutcome,
)

__version__ = "0.1.0"
__all__ = [
    # Core models
    "SHEET_HEADER",
    "FinalRecord",
    "SheetMatrix",
    # Results
    "WriteOutcome",
    "UploadOutcome",
    "PipelineResult",
    # Configuration
    "FinalsScraperConfig",
    "SheetsConfig",
]
