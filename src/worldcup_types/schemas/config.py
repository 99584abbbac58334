"""
Configuration models for the World Cup finals pipeline.

The models hold defaults only; environment overrides are applied by
``worldcup_hydrator.adapters.world_cup_finals.config.get_default_config``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_SOURCE_URL = "https://en.wikipedia.org/wiki/List_of_FIFA_World_Cup_finals"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

SPREADSHEET_ID_PLACEHOLDER = "YOUR_SPREADSHEET_ID_HERE"


class SheetsConfig(BaseModel):
    """Configuration for the Google Sheets upload."""

    spreadsheet_id: Optional[str] = Field(
        None, description="Target spreadsheet; upload is skipped when unset"
    )
    range: str = Field(default="Sheet1!A:D", description="A1 range to append to")
    credentials_file: Path = Field(
        default=Path("credentials.json"),
        description="OAuth client file (installed or web client)",
    )
    token_file: Path = Field(
        default=Path("token.json"), description="Persisted authorized-user token"
    )
    scopes: List[str] = Field(
        default_factory=lambda: ["https://www.googleapis.com/auth/spreadsheets"]
    )

    @field_validator("spreadsheet_id")
    @classmethod
    def drop_placeholder(cls, v: Optional[str]) -> Optional[str]:
        """The sample placeholder id counts as no id at all."""
        if v is None:
            return None
        v = v.strip()
        if not v or v == SPREADSHEET_ID_PLACEHOLDER:
            return None
        return v

    @property
    def upload_enabled(self) -> bool:
        return self.spreadsheet_id is not None


class FinalsScraperConfig(BaseModel):
    """Complete configuration for a finals extraction run."""

    version: str = Field(default="1.0.0", description="Configuration version")

    # Source
    source_url: str = Field(default=DEFAULT_SOURCE_URL)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    request_timeout: Optional[float] = Field(
        None, description="HTTP timeout in seconds (None waits indefinitely)"
    )

    # Extraction
    max_rows: int = Field(
        default=10, ge=1, description="Rows after the header examined for data"
    )
    min_cells: int = Field(default=4, ge=1, description="Cells required per row")
    require_year: bool = Field(
        default=False, description="Keep only rows whose first cell is a year"
    )

    # Output
    output_dir: Path = Field(default=Path("."))
    json_filename: str = Field(default="fifa_data.json")
    csv_filename: str = Field(default="fifa_data.csv")

    # Upload
    sheets: SheetsConfig = Field(default_factory=SheetsConfig)

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    @property
    def json_path(self) -> Path:
        return self.output_dir / self.json_filename

    @property
    def csv_path(self) -> Path:
        return self.output_dir / self.csv_filename
