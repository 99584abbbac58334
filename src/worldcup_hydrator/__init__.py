"""
worldcup_hydrator: fetch, parse and publish the FIFA World Cup finals table.

Adapters:
- adapters/world_cup_finals/: Wikipedia provider, HTML table parser,
  normalizer, sheet formatter, writers and the use case orchestrator
- adapters/google_sheets/: OAuth token providers and the Sheets client
"""

__version__ = "0.1.0"
