"""
World Cup Types Schema Package

This package provides the data contracts (schemas) for the finals pipeline.
All data exchange between the parser, formatter, writers and uploader should
use these Pydantic models for validation and consistency.
"""

from .config import DEFAULT_SOURCE_URL, FinalsScraperConfig, SheetsConfig
from .models import (
    SHEET_HEADER,
    FinalRecord,
    PipelineResult,
    PipelineStage,
    SheetMatrix,
    StrictBase,
    UploadOutcome,
    WriteOutcome,
)

__all__ = [
    "SHEET_HEADER",
    "DEFAULT_SOURCE_URL",
    "StrictBase",
    "FinalRecord",
    "SheetMatrix",
    "WriteOutcome",
    "UploadOutcome",
    "PipelineResult",
    "PipelineStage",
    "FinalsScraperConfig",
    "SheetsConfig",
]
