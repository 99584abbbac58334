"""
CLI for working with the Google Sheets side on its own.

Usage:
    fifa-sheets upload <spreadsheet_id> [--input fifa_data.json]
    fifa-sheets read <spreadsheet_id> [--range Sheet1!A:D]
    fifa-sheets create "World Cup Finals"
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from ..errors import AuthenticationError, HydratorError, UploadError
from ..adapters.google_sheets.auth import InstalledAppTokenProvider
from ..adapters.google_sheets.client import SheetsClient
from ..adapters.world_cup_finals.config import apply_overrides, get_default_config
from ..adapters.world_cup_finals.writer import read_json
from ..utils.logging_utils import setup_logging

load_dotenv()

app = typer.Typer(name="fifa-sheets", help="Google Sheets helpers for the finals data")


def _connect(
    credentials_file: Optional[Path], token_file: Optional[Path], verbose: bool
) -> SheetsClient:
    config = apply_overrides(
        get_default_config(), credentials_file=credentials_file, token_file=token_file
    )
    setup_logging(config.log_level, verbose=verbose)

    client = SheetsClient(
        InstalledAppTokenProvider(
            credentials_file=config.sheets.credentials_file,
            token_file=config.sheets.token_file,
            scopes=config.sheets.scopes,
        )
    )
    try:
        client.authenticate()
    except AuthenticationError as e:
        typer.echo(f"Authentication failed: {e}", err=True)
        raise typer.Exit(1)
    return client


@app.command()
def upload(
    spreadsheet_id: str = typer.Argument(..., envvar="SPREADSHEET_ID", help="Target spreadsheet"),
    input_file: Path = typer.Option(
        Path("fifa_data.json"), "--input", "-i", help="Matrix written by fifa-finals"
    ),
    range_name: str = typer.Option(
        "Sheet1!A:D", "--range", envvar="FIFA_SHEET_RANGE", help="Range to append to"
    ),
    credentials_file: Optional[Path] = typer.Option(None, "--credentials"),
    token_file: Optional[Path] = typer.Option(None, "--token"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """
    Append an existing fifa_data.json to a spreadsheet.
    """
    try:
        matrix = read_json(input_file)
    except HydratorError as e:
        typer.echo(f"{e}\nRun fifa-finals first to produce {input_file}.", err=True)
        raise typer.Exit(1)

    client = _connect(credentials_file, token_file, verbose)
    typer.echo("Appending FIFA World Cup data to Google Sheets...")
    try:
        updated = client.append(spreadsheet_id, range_name, matrix)
    except UploadError as e:
        typer.echo(f"Failed to append data to Google Sheets: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Data successfully appended to Google Sheets! ({updated} rows)")


@app.command()
def read(
    spreadsheet_id: str = typer.Argument(..., envvar="SPREADSHEET_ID"),
    range_name: str = typer.Option("Sheet1!A:D", "--range", envvar="FIFA_SHEET_RANGE"),
    credentials_file: Optional[Path] = typer.Option(None, "--credentials"),
    token_file: Optional[Path] = typer.Option(None, "--token"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """
    Print the values of a spreadsheet range.
    """
    client = _connect(credentials_file, token_file, verbose)
    try:
        values = client.read_values(spreadsheet_id, range_name)
    except UploadError as e:
        typer.echo(f"Error reading data: {e}", err=True)
        raise typer.Exit(1)

    if not values:
        typer.echo("Range is empty")
        return
    for row in values:
        typer.echo(" | ".join(row))


@app.command()
def create(
    title: str = typer.Argument(..., help="Title of the new spreadsheet"),
    credentials_file: Optional[Path] = typer.Option(None, "--credentials"),
    token_file: Optional[Path] = typer.Option(None, "--token"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """
    Create a new spreadsheet and print its id.
    """
    client = _connect(credentials_file, token_file, verbose)
    try:
        spreadsheet_id = client.create_spreadsheet(title)
    except UploadError as e:
        typer.echo(f"Error creating spreadsheet: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Created spreadsheet: {spreadsheet_id}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
