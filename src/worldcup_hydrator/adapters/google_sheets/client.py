"""
Google Sheets client for publishing the finals matrix.

Wraps gspread with the three operations the tool needs: append the matrix,
read a range back, and create a new spreadsheet.
"""

import json
import logging
from typing import Callable, List, Optional, Sequence

import gspread
import requests
from google.auth.exceptions import GoogleAuthError
from gspread.exceptions import GSpreadException

from worldcup_types.schemas.models import SheetMatrix

from ...errors import UploadError
from .auth import SHEETS_SCOPES, TokenProvider

logger = logging.getLogger(__name__)

DEFAULT_RANGE = "Sheet1!A:D"
VALUE_INPUT_OPTION = "USER_ENTERED"
APPEND_URL_TEMPLATE = (
    "https://sheets.googleapis.com/v4/spreadsheets/{spreadsheet_id}"
    "/values/{range}:append?valueInputOption=" + VALUE_INPUT_OPTION
)

_API_ERRORS = (GSpreadException, GoogleAuthError, requests.RequestException)


class SheetsClient:
    """Google Sheets API client authenticated through a TokenProvider."""

    def __init__(
        self,
        token_provider: TokenProvider,
        client_factory: Callable[..., gspread.Client] = gspread.authorize,
    ):
        """
        Args:
            token_provider: Source of OAuth credentials
            client_factory: Builds the gspread client from credentials
        """
        self.token_provider = token_provider
        self.client_factory = client_factory
        self._client: Optional[gspread.Client] = None

    @property
    def is_authenticated(self) -> bool:
        return self._client is not None

    def authenticate(self) -> bool:
        """
        Obtain credentials and build the gspread client.

        Returns:
            True once the client is ready

        Raises:
            AuthenticationError: Propagated from the token provider
        """
        credentials = self.token_provider.get_credentials()
        self._client = self.client_factory(credentials)
        logger.info("Authenticated with Google Sheets")
        return True

    def _require_client(self, operation: str) -> gspread.Client:
        if self._client is None:
            raise UploadError(
                operation, "Not authenticated. Please run authenticate() first."
            )
        return self._client

    def append(
        self, spreadsheet_id: str, range_name: str, matrix: SheetMatrix
    ) -> int:
        """
        Append the matrix below the existing data in ``range_name``.

        Returns:
            Number of rows the API reports as updated

        Raises:
            UploadError: If the client is not authenticated or the API fails
        """
        client = self._require_client("append")
        try:
            spreadsheet = client.open_by_key(spreadsheet_id)
            response = spreadsheet.values_append(
                range_name,
                params={"valueInputOption": VALUE_INPUT_OPTION},
                body=matrix.to_payload(),
            )
        except _API_ERRORS as e:
            logger.error(f"Error appending data: {e}")
            raise UploadError("append", str(e)) from e

        updated_rows = int(response.get("updates", {}).get("updatedRows", 0))
        logger.info(f"Successfully appended {updated_rows} rows")
        return updated_rows

    def read_values(self, spreadsheet_id: str, range_name: str) -> List[List[str]]:
        """Read a range; an empty range returns an empty list."""
        client = self._require_client("read")
        try:
            response = client.open_by_key(spreadsheet_id).values_get(range_name)
        except _API_ERRORS as e:
            logger.error(f"Error reading data: {e}")
            raise UploadError("read", str(e)) from e
        return response.get("values", [])

    def create_spreadsheet(self, title: str) -> str:
        """Create a spreadsheet and return its id."""
        client = self._require_client("create")
        try:
            spreadsheet = client.create(title)
        except _API_ERRORS as e:
            logger.error(f"Error creating spreadsheet: {e}")
            raise UploadError("create", str(e)) from e
        logger.info(f"Created spreadsheet: {spreadsheet.id}")
        return spreadsheet.id


def describe_append_request(
    matrix: SheetMatrix,
    spreadsheet_id: Optional[str] = None,
    range_name: str = DEFAULT_RANGE,
    scopes: Sequence[str] = SHEETS_SCOPES,
) -> str:
    """
    Render the REST request equivalent to :meth:`SheetsClient.append`.

    Useful for replaying the upload by hand in an HTTP client.
    """
    url = APPEND_URL_TEMPLATE.format(
        spreadsheet_id=spreadsheet_id or "{SPREADSHEET_ID}", range=range_name
    )
    lines = [
        "=" * 60,
        "GOOGLE SHEETS API REQUEST DETAILS",
        "=" * 60,
        "",
        "1. POST Request URL:",
        url,
        "",
        "2. Headers:",
        "Authorization: Bearer {ACCESS_TOKEN}",
        "Content-Type: application/json",
        "",
        "3. Request Body:",
        json.dumps(matrix.to_payload(), indent=2, ensure_ascii=False),
        "",
        "4. OAuth 2.0:",
        "Auth URL: https://accounts.google.com/o/oauth2/v2/auth",
        "Access Token URL: https://oauth2.googleapis.com/token",
        f"Scope: {' '.join(scopes)}",
    ]
    return "\n".join(lines)
