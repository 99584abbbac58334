"""
Tests for the environment-driven configuration.
"""

from pathlib import Path

import pytest
from loguru import logger
from pydantic import ValidationError

from worldcup_hydrator.adapters.world_cup_finals.config import (
    apply_overrides,
    get_default_config,
    load_config,
)
from worldcup_types.schemas.config import (
    DEFAULT_SOURCE_URL,
    FinalsScraperConfig,
    SheetsConfig,
)


def test_defaults(clean_env):
    config = get_default_config()

    assert config.source_url == DEFAULT_SOURCE_URL
    assert config.max_rows == 10
    assert config.require_year is False
    assert config.request_timeout is None
    assert config.log_level == "WARNING"
    assert config.json_path == Path("fifa_data.json")
    assert config.csv_path == Path("fifa_data.csv")
    assert config.sheets.range == "Sheet1!A:D"
    assert not config.sheets.upload_enabled


def test_environment_overrides(clean_env, tmp_path):
    clean_env.setenv("SPREADSHEET_ID", "  1AbCdEf  ")
    clean_env.setenv("FIFA_MAX_ROWS", "5")
    clean_env.setenv("FIFA_REQUIRE_YEAR", "yes")
    clean_env.setenv("FIFA_REQUEST_TIMEOUT", "12.5")
    clean_env.setenv("FIFA_OUTPUT_DIR", str(tmp_path))
    clean_env.setenv("FIFA_SHEET_RANGE", "Finals!A:D")
    clean_env.setenv("GOOGLE_TOKEN_FILE", str(tmp_path / "token.json"))

    config = load_config()

    assert config.sheets.spreadsheet_id == "1AbCdEf"
    assert config.sheets.upload_enabled
    assert config.max_rows == 5
    assert config.require_year is True
    assert config.request_timeout == 12.5
    assert config.json_path == tmp_path / "fifa_data.json"
    assert config.sheets.range == "Finals!A:D"
    assert config.sheets.token_file == tmp_path / "token.json"


@pytest.mark.parametrize("value", ["YOUR_SPREADSHEET_ID_HERE", "", "   "])
def test_placeholder_spreadsheet_id_disables_upload(clean_env, value):
    clean_env.setenv("SPREADSHEET_ID", value)

    assert get_default_config().sheets.spreadsheet_id is None


def test_invalid_max_rows_rejected(clean_env):
    clean_env.setenv("FIFA_MAX_ROWS", "0")

    with pytest.raises(ValidationError):
        get_default_config()


def test_apply_overrides_ignores_none(clean_env):
    config = get_default_config()

    updated = apply_overrides(config, max_rows=None, spreadsheet_id=None)

    assert updated == config


def test_apply_overrides_routes_sheet_keys(clean_env, tmp_path):
    config = get_default_config()

    updated = apply_overrides(
        config,
        spreadsheet_id="abc",
        range="Other!A:D",
        credentials_file=tmp_path / "client.json",
        output_dir=tmp_path,
        max_rows=3,
    )

    assert updated.sheets.spreadsheet_id == "abc"
    assert updated.sheets.range == "Other!A:D"
    assert updated.sheets.credentials_file == tmp_path / "client.json"
    assert updated.output_dir == tmp_path
    assert updated.max_rows == 3
    assert config.max_rows == 10


def test_apply_overrides_validates(clean_env):
    with pytest.raises(ValidationError):
        apply_overrides(get_default_config(), max_rows=0)


def test_apply_overrides_placeholder_id():
    config = FinalsScraperConfig(sheets=SheetsConfig(spreadsheet_id="abc"))

    updated = apply_overrides(config, spreadsheet_id="YOUR_SPREADSHEET_ID_HERE")

    assert not updated.sheets.upload_enabled


def test_loading_config_logs_nothing(clean_env):
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG")
    try:
        get_default_config()
    finally:
        logger.remove(handler_id)

    assert messages == []


def test_invalid_environment_logged_as_error(clean_env):
    clean_env.setenv("FIFA_MAX_ROWS", "many")
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG")
    try:
        with pytest.raises(ValueError):
            get_default_config()
    finally:
        logger.remove(handler_id)

    assert len(messages) == 1
    assert messages[0].record["level"].name == "ERROR"
