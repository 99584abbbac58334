"""
Pydantic models for the World Cup finals data contracts.

This module defines the authoritative data models used throughout the finals
pipeline. These models serve as contracts for data exchange between the
parser, normalizer, formatter, writers and the Google Sheets uploader, and
provide validation and serialization capabilities.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --------------------------------------------------------------------------- #
# Header and Base Types                                                      #
# --------------------------------------------------------------------------- #

SHEET_HEADER: List[str] = ["Year", "Winner", "Score", "Runners-up"]

PipelineStage = Literal[
    "fetch", "locate", "extract", "format", "write", "upload", "done"
]


class StrictBase(BaseModel):
    """Base class for strict models that forbid extra fields."""

    model_config = ConfigDict(
        extra="forbid", validate_assignment=True, populate_by_name=True
    )


# --------------------------------------------------------------------------- #
# Finals Records                                                             #
# --------------------------------------------------------------------------- #


class FinalRecord(StrictBase):
    """
    Data model for one World Cup final.

    All four fields are always present. Missing source cells become empty
    strings so that the sheet columns stay positionally aligned.
    """

    year: str = Field(default="", description="Year of the final (e.g. '1930')")
    winner: str = Field(default="", description="Winning team")
    score: str = Field(default="", description="Final score as displayed")
    runners_up: str = Field(
        default="", alias="runnersUp", description="Losing finalist"
    )

    @field_validator("year", "winner", "score", "runners_up", mode="before")
    @classmethod
    def default_missing_to_empty(cls, v):
        """Treat missing cells as empty strings."""
        if v is None:
            return ""
        return str(v)

    def as_row(self) -> List[str]:
        """Return the record's fields in sheet column order."""
        return [self.year, self.winner, self.score, self.runners_up]


class SheetMatrix(StrictBase):
    """
    Header plus rows matrix ready for the Sheets ``values.append`` body.

    Row 0 is always :data:`SHEET_HEADER`; every following row holds the four
    FinalRecord fields in header order.
    """

    major_dimension: Literal["ROWS"] = Field(default="ROWS", alias="majorDimension")
    values: List[List[str]] = Field(
        default_factory=lambda: [list(SHEET_HEADER)],
        description="Header row followed by one row per final",
    )

    @field_validator("values")
    @classmethod
    def validate_shape(cls, v: List[List[str]]) -> List[List[str]]:
        """Header must come first and every row must be four columns wide."""
        if not v or list(v[0]) != SHEET_HEADER:
            raise ValueError(f"first row must be the header {SHEET_HEADER}")
        for index, row in enumerate(v):
            if len(row) != len(SHEET_HEADER):
                raise ValueError(
                    f"row {index} has {len(row)} columns, expected {len(SHEET_HEADER)}"
                )
        return v

    @property
    def header(self) -> List[str]:
        return self.values[0]

    @property
    def rows(self) -> List[List[str]]:
        """Data rows without the header."""
        return self.values[1:]

    def to_payload(self) -> dict:
        """Serialise to the JSON shape used on disk and by the Sheets API."""
        return self.model_dump(by_alias=True)


# --------------------------------------------------------------------------- #
# Pipeline Results                                                           #
# --------------------------------------------------------------------------- #


class WriteOutcome(StrictBase):
    """Outcome of writing one output file."""

    path: str = Field(..., description="Target file path")
    format: Literal["json", "csv"] = Field(..., description="Output format")
    success: bool = True
    sha256: Optional[str] = Field(None, description="SHA256 of the written file")
    error_message: Optional[str] = None


class UploadOutcome(StrictBase):
    """Outcome of the Google Sheets append step."""

    spreadsheet_id: Optional[str] = None
    range: str = "Sheet1!A:D"
    success: bool = False
    skipped: bool = False
    updated_rows: int = 0
    error_message: Optional[str] = None


class PipelineResult(StrictBase):
    """Result model for one fetch-parse-write-upload run."""

    source_url: str
    started_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None
    success: bool = False
    stage: PipelineStage = "fetch"
    headers: List[str] = Field(default_factory=list)
    records: List[FinalRecord] = Field(default_factory=list)
    matrix: Optional[SheetMatrix] = None
    writes: List[WriteOutcome] = Field(default_factory=list)
    upload: Optional[UploadOutcome] = None
    error_message: Optional[str] = None

    @property
    def total_records(self) -> int:
        return len(self.records)

    @property
    def files_written(self) -> List[str]:
        return [w.path for w in self.writes if w.success]

    @property
    def partial(self) -> bool:
        """True when records were extracted but a write or the upload failed."""
        if not self.records:
            return False
        write_failed = any(not w.success for w in self.writes)
        upload_failed = (
            self.upload is not None
            and not self.upload.skipped
            and not self.upload.success
        )
        return write_failed or upload_failed
