"""Command line entry points: fifa-finals and fifa-sheets."""

from .scrape import app as scrape_app
from .sheets import app as sheets_app

__all__ = ["scrape_app", "sheets_app"]
