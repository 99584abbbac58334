"""
OAuth2 token providers for the Google Sheets client.

The Sheets client only asks a TokenProvider for credentials. The default
provider reuses a persisted token, refreshes it when it has expired, and
falls back to the authorization-code flow where the operator pastes the code
shown after visiting the consent URL.
"""

import json
import logging
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence

import requests
import typer
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from ...errors import AuthenticationError

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
GOOGLE_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

CodePrompt = Callable[[str], str]


class TokenProvider(Protocol):
    """Hands out credentials that are valid for the Sheets API."""

    def get_credentials(self) -> Credentials: ...


def console_code_prompt(auth_url: str) -> str:
    """Show the consent URL and read the pasted authorization code."""
    typer.echo(f"Authorize this app by visiting this url: {auth_url}")
    typer.echo(
        "After authorization, you will be redirected to a URL with a code parameter."
    )
    return typer.prompt("Enter the code", default="", show_default=False)


class StaticTokenProvider:
    """Provider wrapping credentials obtained elsewhere."""

    def __init__(self, credentials: Credentials):
        self.credentials = credentials

    def get_credentials(self) -> Credentials:
        return self.credentials


class InstalledAppTokenProvider:
    """
    Token provider backed by a client secrets file and a persisted token.

    Args:
        credentials_file: OAuth client JSON with an ``installed`` or ``web``
            section holding ``client_id``, ``client_secret`` and ``redirect_uris``
        token_file: Where the authorized-user token is read from and saved to
        scopes: OAuth scopes to request
        prompt: Callable receiving the consent URL and returning the code
    """

    def __init__(
        self,
        credentials_file: Path = Path("credentials.json"),
        token_file: Path = Path("token.json"),
        scopes: Optional[Sequence[str]] = None,
        prompt: CodePrompt = console_code_prompt,
    ):
        self.credentials_file = Path(credentials_file)
        self.token_file = Path(token_file)
        self.scopes: List[str] = list(scopes or SHEETS_SCOPES)
        self.prompt = prompt

    def load_client_config(self) -> dict:
        """Read and validate the OAuth client file."""
        if not self.credentials_file.exists():
            raise AuthenticationError(
                f"{self.credentials_file} not found. Download your OAuth 2.0 "
                "credentials from Google Cloud Console and save them there."
            )
        try:
            client_config = json.loads(self.credentials_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise AuthenticationError(
                f"Cannot read {self.credentials_file}: {e}"
            ) from e

        section = client_config.get("installed") or client_config.get("web")
        if not isinstance(section, dict):
            raise AuthenticationError(
                f"{self.credentials_file} has neither an 'installed' nor a 'web' client"
            )
        missing = [
            key
            for key in ("client_id", "client_secret", "redirect_uris")
            if not section.get(key)
        ]
        if missing:
            raise AuthenticationError(
                f"{self.credentials_file} is missing {', '.join(missing)}"
            )
        # Files holding only the client fields still use Google's endpoints
        section.setdefault("auth_uri", GOOGLE_AUTH_URI)
        section.setdefault("token_uri", GOOGLE_TOKEN_URI)
        return client_config

    def load_token(self) -> Optional[Credentials]:
        """Load the persisted token, or None when there is none yet."""
        if not self.token_file.exists():
            return None
        try:
            return Credentials.from_authorized_user_file(
                str(self.token_file), self.scopes
            )
        except (OSError, ValueError) as e:
            raise AuthenticationError(
                f"Stored token {self.token_file} is malformed: {e}"
            ) from e

    def save_token(self, credentials: Credentials) -> None:
        self.token_file.write_text(credentials.to_json(), encoding="utf-8")
        logger.info(f"Token saved to {self.token_file}")

    def _refresh(self, credentials: Credentials) -> Credentials:
        logger.debug("Refreshing expired access token")
        try:
            credentials.refresh(Request())
        except (GoogleAuthError, requests.RequestException) as e:
            raise AuthenticationError(f"Token refresh failed: {e}") from e
        self.save_token(credentials)
        return credentials

    def authorize_interactively(self) -> Credentials:
        """Run the authorization-code exchange and persist the new token."""
        client_config = self.load_client_config()
        section = client_config.get("installed") or client_config.get("web")
        try:
            flow = Flow.from_client_config(
                client_config,
                scopes=self.scopes,
                redirect_uri=section["redirect_uris"][0],
            )
            auth_url, _ = flow.authorization_url(
                access_type="offline", prompt="consent"
            )
        except (OAuth2Error, ValueError) as e:
            raise AuthenticationError(
                f"Cannot start authorization with {self.credentials_file}: {e}"
            ) from e

        code = (self.prompt(auth_url) or "").strip()
        if not code:
            raise AuthenticationError("Authorization declined: no code entered")

        try:
            flow.fetch_token(code=code)
        except (OAuth2Error, GoogleAuthError, requests.RequestException, ValueError) as e:
            raise AuthenticationError(f"Error retrieving access token: {e}") from e

        credentials = flow.credentials
        self.save_token(credentials)
        return credentials

    def get_credentials(self) -> Credentials:
        """
        Return valid credentials.

        Raises:
            AuthenticationError: Missing/invalid client file, malformed token,
                failed refresh, or a declined authorization
        """
        credentials = self.load_token()
        if credentials is not None:
            if credentials.valid:
                logger.debug(f"Reusing stored token from {self.token_file}")
                return credentials
            if credentials.expired and credentials.refresh_token:
                return self._refresh(credentials)
            logger.info("Stored token cannot be refreshed, re-authorizing")

        return self.authorize_interactively()
