"""
World Cup Finals Configuration

This module builds the run configuration from environment variables.
All configuration models are defined in worldcup_types.
"""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from worldcup_types.schemas.config import (
    DEFAULT_SOURCE_URL,
    DEFAULT_USER_AGENT,
    FinalsScraperConfig,
    SheetsConfig,
)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return float(value)


def get_default_config() -> FinalsScraperConfig:
    """Get default finals configuration with environment variable overrides.

    Returns:
        FinalsScraperConfig: Default configuration from worldcup_types
    """
    try:
        sheets = SheetsConfig(
            spreadsheet_id=os.getenv("SPREADSHEET_ID"),
            range=os.getenv("FIFA_SHEET_RANGE", "Sheet1!A:D"),
            credentials_file=Path(
                os.getenv("GOOGLE_CREDENTIALS_FILE", "credentials.json")
            ),
            token_file=Path(os.getenv("GOOGLE_TOKEN_FILE", "token.json")),
        )

        config = FinalsScraperConfig(
            source_url=os.getenv("FIFA_SOURCE_URL", DEFAULT_SOURCE_URL),
            user_agent=os.getenv("FIFA_USER_AGENT", DEFAULT_USER_AGENT),
            request_timeout=_env_float("FIFA_REQUEST_TIMEOUT"),
            max_rows=int(os.getenv("FIFA_MAX_ROWS", "10")),
            require_year=os.getenv("FIFA_REQUIRE_YEAR", "").strip().lower()
            in _TRUE_VALUES,
            output_dir=Path(os.getenv("FIFA_OUTPUT_DIR", ".")),
            log_level=os.getenv("FIFA_LOG_LEVEL", "WARNING"),
            sheets=sheets,
        )
        return config

    except Exception as e:
        logger.error(f"Error loading configuration: {e}")
        raise


def load_config() -> FinalsScraperConfig:
    """Alias for get_default_config."""
    return get_default_config()


_SHEETS_KEYS = {"spreadsheet_id", "range", "credentials_file", "token_file", "scopes"}


def apply_overrides(config: FinalsScraperConfig, **overrides) -> FinalsScraperConfig:
    """Return a re-validated copy of ``config`` with non-None overrides applied.

    Keys belonging to SheetsConfig (``spreadsheet_id``, ``range``,
    ``credentials_file``, ``token_file``, ``scopes``) are routed to the nested
    sheets section.
    """
    data = config.model_dump()
    for key, value in overrides.items():
        if value is None:
            continue
        if key in _SHEETS_KEYS:
            data["sheets"][key] = value
        else:
            data[key] = value
    return FinalsScraperConfig.model_validate(data)
