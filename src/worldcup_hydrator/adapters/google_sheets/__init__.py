"""
Google Sheets Adapter

Publishes the finals matrix to a spreadsheet:
- auth.py: pluggable OAuth2 token providers
- client.py: gspread-backed append/read/create operations
"""

from .auth import (
    SHEETS_SCOPES,
    InstalledAppTokenProvider,
    StaticTokenProvider,
    TokenProvider,
    console_code_prompt,
)
from .client import DEFAULT_RANGE, SheetsClient, describe_append_request

__all__ = [
    "SHEETS_SCOPES",
    "DEFAULT_RANGE",
    "TokenProvider",
    "InstalledAppTokenProvider",
    "StaticTokenProvider",
    "console_code_prompt",
    "SheetsClient",
    "describe_append_request",
]
