"""YouTube authentication.

Runs the OAuth2 authorization-code flow for an installed application: the
user opens the printed URL, approves access and pastes back the code from
the localhost address Google redirects to.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs, urlsplit

import click
from google_auth_oauthlib.flow import Flow

from podcast_to_youtube.core.errors import AuthError

YOUTUBE_UPLOAD_SCOPE = "https://www.googleapis.com/auth/youtube.upload"

# Loopback redirect; nothing listens on it, the browser shows the code in the address bar
REDIRECT_URI = "http://localhost"


def load_client_config(path: Path) -> dict[str, Any]:
    """Read the OAuth2 client secrets file.

    Raises:
        AuthError: If the file cannot be read or is not valid JSON.
    """
    try:
        content = path.read_text()
    except OSError as e:
        raise AuthError(f"could not open {path}: {e}") from e

    try:
        config = json.loads(content)
    except json.JSONDecodeError as e:
        raise AuthError(f"could not parse config: {e}") from e

    if not isinstance(config, dict):
        raise AuthError("could not parse config: client secrets must be a JSON object")
    return config


def create_flow(client_config: dict[str, Any]) -> Flow:
    """Build the OAuth2 flow for the YouTube upload scope.

    Raises:
        AuthError: If the client secrets are not for a web or installed app.
    """
    try:
        return Flow.from_client_config(
            client_config,
            scopes=[YOUTUBE_UPLOAD_SCOPE],
            redirect_uri=REDIRECT_URI,
        )
    except ValueError as e:
        raise AuthError(f"could not parse config: {e}") from e


def extract_code(answer: str) -> str:
    """Return the authorization code from a pasted code or redirect URL.

    >>> extract_code("http://localhost/?state=xyz&code=4/abc&scope=...")
    '4/abc'
    """
    answer = answer.strip()
    codes = parse_qs(urlsplit(answer).query).get("code")
    if codes:
        return codes[0]
    return answer


def authenticate(
    client_secrets: str | Path,
    prompt: Callable[[str], str] | None = None,
    echo: Callable[[str], None] | None = None,
) -> Any:
    """Perform the interactive OAuth2 flow and return the user's credentials.

    Args:
        client_secrets: Path to the client secrets JSON file.
        prompt: Reads the authorization code; defaults to click.prompt.
        echo: Prints the authorization URL and hints; defaults to click.echo.

    Returns:
        google.oauth2.credentials.Credentials bound to the obtained token.

    Raises:
        AuthError: If the secrets cannot be loaded or the code exchange fails.
    """
    prompt = prompt or click.prompt
    echo = echo or click.echo

    flow = create_flow(load_client_config(Path(client_secrets)))

    url, _ = flow.authorization_url(access_type="offline", prompt="consent")
    echo(f"Go here: \n\t{url}")
    echo("After approving, your browser opens a localhost address that fails to load.")
    code = extract_code(prompt("Then enter the code (or paste that address)"))

    try:
        flow.fetch_token(code=code)
    except Exception as e:
        raise AuthError(f"could not exchange code: {e}") from e

    return flow.credentials
