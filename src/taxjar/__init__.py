"""taxjar -- typed client for the TaxJar sales tax API.

Every call goes through one request engine: the parameters are validated
into pydantic models, encoded (query string for ``GET``, JSON body
otherwise), sent with a ``Bearer`` API key, and the response is either
unwrapped into a typed resource or raised as a
:class:`~taxjar.exceptions.TaxjarResponseError`.

Typical usage::

    import taxjar

    with taxjar.Client(api_key="...") as client:
        tax = client.tax_for_order({"to_country": "US", "to_zip": "90002", "amount": 15})

Modules:
    client: Blocking and async clients.
    operations: Endpoint catalog shared by both clients.
    models: Pydantic models for parameters, resources and envelopes.
    config: API key and base URL resolution.
    exceptions: Exception hierarchy.
    log: Package logger and Rich debug handler.
"""

__version__ = "0.1.0"

from taxjar.client import AsyncClient, Client
from taxjar.config import DEFAULT_API_URL, SANDBOX_API_URL
from taxjar.exceptions import (
    AuthError,
    ConfigError,
    InvalidParametersError,
    MalformedErrorResponseError,
    NotFoundError,
    ServerError,
    TaxjarDecodeError,
    TaxjarError,
    TaxjarResponseError,
)
from taxjar.log import enable_debug_logging

__all__ = [
    "AsyncClient",
    "Client",
    "DEFAULT_API_URL",
    "SANDBOX_API_URL",
    "AuthError",
    "ConfigError",
    "InvalidParametersError",
    "MalformedErrorResponseError",
    "NotFoundError",
    "ServerError",
    "TaxjarDecodeError",
    "TaxjarError",
    "TaxjarResponseError",
    "enable_debug_logging",
]
