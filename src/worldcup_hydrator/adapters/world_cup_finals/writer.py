"""
Data Writer for World Cup Finals

This module writes the sheet matrix to JSON and CSV files. Both writers
overwrite their target and return the SHA256 of what they wrote.
"""

import csv
import hashlib
import json
import logging
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from worldcup_types.schemas.models import SheetMatrix

from ...errors import WriterError

logger = logging.getLogger(__name__)


def _file_sha256(path: Path) -> str:
    with open(path, "rb") as f:
        return hashlib.sha256(f.read()).hexdigest()


def to_dataframe(matrix: SheetMatrix) -> pd.DataFrame:
    """
    Convert a SheetMatrix to a pandas DataFrame.

    Args:
        matrix: Header + rows matrix

    Returns:
        DataFrame with the header as columns and one row per final
    """
    return pd.DataFrame(matrix.rows, columns=matrix.header, dtype=str)


def write_json(matrix: SheetMatrix, output_path: Path) -> str:
    """
    Write the matrix as ``{"majorDimension": "ROWS", "values": [...]}``.

    Args:
        matrix: Matrix to write
        output_path: Output file path

    Returns:
        SHA256 hash of the written file

    Raises:
        WriterError: If the file cannot be written
    """
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(matrix.to_payload(), f, indent=2, ensure_ascii=False)
        file_hash = _file_sha256(output_path)
    except OSError as e:
        logger.error(f"Error saving JSON file {output_path}: {e}")
        raise WriterError(output_path, str(e)) from e

    logger.info(f"Data saved to {output_path}")
    return file_hash


def write_csv(matrix: SheetMatrix, output_path: Path) -> str:
    """
    Write the matrix as CSV with every field double-quoted.

    Embedded double quotes are escaped by doubling them.

    Args:
        matrix: Matrix to write
        output_path: Output file path

    Returns:
        SHA256 hash of the written file

    Raises:
        WriterError: If the file cannot be written
    """
    output_path = Path(output_path)
    df = to_dataframe(matrix)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(
            output_path,
            index=False,
            quoting=csv.QUOTE_ALL,
            lineterminator="\n",
            encoding="utf-8",
        )
        file_hash = _file_sha256(output_path)
    except OSError as e:
        logger.error(f"Error saving CSV file {output_path}: {e}")
        raise WriterError(output_path, str(e)) from e

    logger.info(f"Wrote {len(df)} rows to {output_path}")
    return file_hash


def read_json(input_path: Path) -> SheetMatrix:
    """
    Load a matrix previously written by :func:`write_json`.

    Raises:
        WriterError: If the file is missing, unreadable or not a valid matrix
    """
    input_path = Path(input_path)
    try:
        with open(input_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        return SheetMatrix.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise WriterError(input_path, f"cannot load matrix: {e}") from e
