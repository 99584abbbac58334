"""
Tests for Data Writer

Tests the JSON and CSV writers and loading a written matrix back.
"""

import hashlib
import json

import pytest

from worldcup_hydrator.adapters.world_cup_finals.writer import (
    read_json,
    to_dataframe,
    write_csv,
    write_json,
)
from worldcup_hydrator.errors import WriterError
from worldcup_types.schemas.models import FinalRecord, SheetMatrix


class TestToDataFrame:
    """Test DataFrame conversion."""

    def test_columns_follow_header(self, sample_matrix):
        df = to_dataframe(sample_matrix)

        assert list(df.columns) == ["Year", "Winner", "Score", "Runners-up"]
        assert len(df) == 3
        assert df.iloc[0]["Winner"] == "Uruguay"

    def test_header_only_matrix(self):
        df = to_dataframe(SheetMatrix())
        assert len(df) == 0


class TestWriteJSON:
    """Test JSON output."""

    def test_write_json(self, tmp_path, sample_matrix):
        output_path = tmp_path / "fifa_data.json"

        file_hash = write_json(sample_matrix, output_path)

        payload = json.loads(output_path.read_text(encoding="utf-8"))
        assert payload["majorDimension"] == "ROWS"
        assert payload["values"][0] == ["Year", "Winner", "Score", "Runners-up"]
        assert payload["values"][1] == ["1930", "Uruguay", "4–2", "Argentina"]
        assert file_hash == hashlib.sha256(output_path.read_bytes()).hexdigest()

    def test_write_json_keeps_unicode(self, tmp_path, sample_matrix):
        output_path = tmp_path / "fifa_data.json"
        write_json(sample_matrix, output_path)

        assert "4–2" in output_path.read_text(encoding="utf-8")

    def test_write_json_overwrites(self, tmp_path, sample_matrix):
        output_path = tmp_path / "fifa_data.json"
        output_path.write_text("stale", encoding="utf-8")

        write_json(sample_matrix, output_path)

        assert read_json(output_path) == sample_matrix

    def test_write_json_creates_parent(self, tmp_path, sample_matrix):
        output_path = tmp_path / "nested" / "out" / "fifa_data.json"
        write_json(sample_matrix, output_path)
        assert output_path.exists()

    def test_write_json_failure(self, tmp_path, sample_matrix):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(WriterError) as exc_info:
            write_json(sample_matrix, blocker / "fifa_data.json")

        assert exc_info.value.path.endswith("fifa_data.json")


class TestWriteCSV:
    """Test CSV output."""

    def test_every_field_quoted(self, tmp_path, sample_matrix):
        output_path = tmp_path / "fifa_data.csv"

        write_csv(sample_matrix, output_path)

        lines = output_path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == '"Year","Winner","Score","Runners-up"'
        assert lines[1] == '"1930","Uruguay","4–2","Argentina"'
        assert len(lines) == 4

    def test_embedded_quotes_doubled(self, tmp_path):
        matrix = SheetMatrix(
            values=[
                ["Year", "Winner", "Score", "Runners-up"],
                FinalRecord(year="1950", winner='The "Maracanazo"', score="2–1").as_row(),
            ]
        )
        output_path = tmp_path / "fifa_data.csv"

        write_csv(matrix, output_path)

        lines = output_path.read_text(encoding="utf-8").splitlines()
        assert lines[1] == '"1950","The ""Maracanazo""","2–1",""'

    def test_header_only(self, tmp_path):
        output_path = tmp_path / "fifa_data.csv"
        write_csv(SheetMatrix(), output_path)

        assert output_path.read_text(encoding="utf-8") == (
            '"Year","Winner","Score","Runners-up"\n'
        )

    def test_write_csv_returns_hash(self, tmp_path, sample_matrix):
        output_path = tmp_path / "fifa_data.csv"
        file_hash = write_csv(sample_matrix, output_path)
        assert file_hash == hashlib.sha256(output_path.read_bytes()).hexdigest()

    def test_write_csv_failure(self, tmp_path, sample_matrix):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(WriterError):
            write_csv(sample_matrix, blocker / "fifa_data.csv")


class TestReadJSON:
    """Test loading a written matrix."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(WriterError, match="cannot load matrix"):
            read_json(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(WriterError):
            read_json(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"majorDimension": "ROWS", "values": [["a"]]}))

        with pytest.raises(WriterError):
            read_json(path)
