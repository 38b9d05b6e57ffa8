"""Credential and endpoint resolution.

A client needs exactly two settings: the API key and the base URL.  Both are
resolved once, when the client is constructed, with this precedence:

* **API key** -- explicit argument > credential descriptor
  (``api_key_source``) > ``TAXJAR_API_KEY`` environment variable.
* **Base URL** -- explicit argument > ``TAXJAR_API_URL`` environment
  variable > :data:`DEFAULT_API_URL`.

A blank API key after every source has been consulted raises
:class:`~taxjar.exceptions.ConfigError` before any network I/O.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from taxjar.exceptions import ConfigError
from taxjar.models import Credentials

DEFAULT_API_URL = "https://api.taxjar.com/v2/"
SANDBOX_API_URL = "https://api.sandbox.taxjar.com/v2/"

API_KEY_ENV_VAR = "TAXJAR_API_KEY"
API_URL_ENV_VAR = "TAXJAR_API_URL"


def resolve_credentials(
    api_key: Optional[str] = None,
    api_url: Optional[str] = None,
    api_key_source: Optional[str] = None,
) -> Credentials:
    """Build the immutable :class:`~taxjar.models.Credentials` for a client.

    Args:
        api_key: Explicit API key.  Blank strings are treated as absent.
        api_url: Explicit base URL override (e.g. :data:`SANDBOX_API_URL`).
        api_key_source: Credential descriptor, see :func:`resolve_credential`.

    Returns:
        Credentials with a non-blank key and a base URL ending in ``/``.

    Raises:
        ConfigError: If no source yields a non-blank API key, or if
            *api_key_source* cannot be resolved.
    """
    key = (api_key or "").strip()
    if not key and api_key_source:
        key = resolve_credential(api_key_source).strip()
    if not key:
        key = os.environ.get(API_KEY_ENV_VAR, "").strip()
    if not key:
        raise ConfigError("Please provide a TaxJar API key.")

    url = api_url or os.environ.get(API_URL_ENV_VAR) or DEFAULT_API_URL
    if not url.endswith("/"):
        url += "/"

    return Credentials(api_key=key, api_url=url)


def resolve_credential(source: str) -> str:
    """Read an API key from ``env:NAME`` or ``file:PATH``.

    Keys kept in a file (a mounted secret, say) are stripped of surrounding
    whitespace.

    Raises:
        ConfigError: If *source* cannot be resolved.
    """
    kind, _, target = source.partition(":")

    if kind == "env":
        if target not in os.environ:
            raise ConfigError(f"TaxJar API key variable '{target}' is not set")
        return os.environ[target]

    if kind == "file":
        key_file = Path(target).expanduser()
        try:
            return key_file.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read TaxJar API key from {key_file}: {exc}") from exc

    raise ConfigError(f"Unknown credential source format: {source}")
