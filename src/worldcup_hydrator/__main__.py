"""
Main entry point for the World Cup finals scraper

This allows the scraper to be run as a module:
    python -m worldcup_hydrator --help
"""

from .cli.scrape import app

if __name__ == "__main__":
    app()
