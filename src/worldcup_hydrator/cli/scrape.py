"""
CLI for the World Cup finals scraper.

Usage:
    fifa-finals                      # Scrape and write fifa_data.json / fifa_data.csv
    fifa-finals <spreadsheet_id>     # Also append the data to Google Sheets
    SPREADSHEET_ID=<id> fifa-finals  # Same, with the id taken from the environment
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from ..adapters.google_sheets.auth import console_code_prompt
from ..adapters.google_sheets.client import describe_append_request
from ..adapters.world_cup_finals.config import apply_overrides, get_default_config
from ..adapters.world_cup_finals.observers import ConsoleObserver
from ..adapters.world_cup_finals.providers.wikipedia import StaticPageProvider
from ..adapters.world_cup_finals.usecase import FinalsExtractionUseCase
from ..utils.logging_utils import setup_logging

load_dotenv()  # Load environment variables from .env if present

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

app = typer.Typer(
    name="fifa-finals",
    help="Scrape the FIFA World Cup finals table from Wikipedia",
    add_completion=False,
)


@app.command()
def scrape(
    spreadsheet_id: Optional[str] = typer.Argument(
        None,
        envvar="SPREADSHEET_ID",
        help="Google Sheets ID; when given, the data is also appended to the sheet",
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory for fifa_data.json and fifa_data.csv"
    ),
    max_rows: Optional[int] = typer.Option(
        None, "--max-rows", min=1, help="Rows below the header to examine (default: 10)"
    ),
    range_name: Optional[str] = typer.Option(
        None, "--range", help="Sheet range to append to (default: Sheet1!A:D)"
    ),
    credentials_file: Optional[Path] = typer.Option(
        None, "--credentials", help="OAuth client file (default: credentials.json)"
    ),
    token_file: Optional[Path] = typer.Option(
        None, "--token", help="Stored OAuth token (default: token.json)"
    ),
    html_file: Optional[Path] = typer.Option(
        None,
        "--html-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Parse a saved copy of the page instead of fetching it",
    ),
    require_year: bool = typer.Option(
        False, "--require-year", help="Keep only rows whose first cell is a 19xx/20xx year"
    ),
    show_request: bool = typer.Option(
        False, "--show-request", help="Print the equivalent Sheets API request"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """
    Scrape the finals table and save it locally, optionally uploading it.
    """
    try:
        config = apply_overrides(
            get_default_config(),
            spreadsheet_id=spreadsheet_id,
            output_dir=output_dir,
            max_rows=max_rows,
            range=range_name,
            credentials_file=credentials_file,
            token_file=token_file,
            require_year=True if require_year else None,
        )
        setup_logging(config.log_level, verbose=verbose)

        typer.echo("Starting FIFA World Cup Data Extraction...\n")
        usecase = FinalsExtractionUseCase.from_config(
            config,
            observer=ConsoleObserver(typer.echo),
            code_prompt=console_code_prompt,
        )
        if html_file is not None:
            usecase.provider = StaticPageProvider(html_file)

        result = usecase.execute()

    except Exception as e:
        typer.echo(f"Extraction failed: {e}", err=True)
        if verbose:
            import traceback

            typer.echo(traceback.format_exc(), err=True)
        raise typer.Exit(EXIT_FATAL)

    if show_request and result.matrix is not None:
        typer.echo("")
        typer.echo(
            describe_append_request(
                result.matrix, config.sheets.spreadsheet_id, config.sheets.range
            )
        )

    if not result.records:
        raise typer.Exit(EXIT_FATAL)
    if result.partial:
        raise typer.Exit(EXIT_PARTIAL_FAILURE)
    if not result.success:
        raise typer.Exit(EXIT_FATAL)

    typer.echo("\nWorkflow completed successfully!")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
