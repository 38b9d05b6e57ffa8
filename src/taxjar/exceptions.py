"""Exception hierarchy for taxjar.

All exceptions inherit from :class:`TaxjarError`, so callers can catch the
whole family with one ``except`` clause.  Failures reported by the service
itself are always a :class:`TaxjarResponseError` carrying the HTTP status
and the decoded :class:`~taxjar.models.ServiceError`.

Transport failures (DNS, refused connections, timeouts) are not wrapped:
the :mod:`httpx` exception reaches the caller unchanged.

Subclass hierarchy::

    TaxjarError
    +-- ConfigError
    +-- InvalidParametersError
    +-- TaxjarDecodeError
    +-- TaxjarResponseError          (any HTTP status >= 400)
        +-- AuthError                (401 / 403)
        +-- NotFoundError            (404)
        +-- ServerError              (5xx)
        +-- MalformedErrorResponseError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from taxjar.models import ServiceError


class TaxjarError(Exception):
    """Base exception for all taxjar errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(TaxjarError):
    """Raised when no usable API key or credential source is configured."""


class InvalidParametersError(TaxjarError):
    """Raised before any request is built when call parameters are unusable."""


class TaxjarDecodeError(TaxjarError):
    """Raised when a successful response body does not match its envelope."""


class TaxjarResponseError(TaxjarError):
    """Raised when the service answers with an HTTP status >= 400.

    The message is composed as ``"<error> - <detail>"`` from the decoded
    error payload.

    Args:
        status_code: The HTTP status of the response.
        service_error: The decoded ``{"error", "detail"}`` payload, or
            ``None`` when the payload could not be decoded.
        message: Human-readable error description.

    Example::

        try:
            client.tax_for_order({"to_country": "US", "amount": 15})
        except TaxjarResponseError as exc:
            print(exc.status_code, exc.service_error.detail)
    """

    def __init__(
        self,
        status_code: int,
        service_error: Optional[ServiceError],
        message: str,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.service_error = service_error

    @property
    def error(self) -> Optional[str]:
        """The short error code from the payload (e.g. ``"unauthorized"``)."""
        return self.service_error.error if self.service_error else None

    @property
    def detail(self) -> Optional[str]:
        """The long error description from the payload."""
        return self.service_error.detail if self.service_error else None


class AuthError(TaxjarResponseError):
    """Raised when the service rejects the API key (HTTP 401 / 403)."""


class NotFoundError(TaxjarResponseError):
    """Raised when the requested resource does not exist (HTTP 404)."""


class ServerError(TaxjarResponseError):
    """Raised when the service returns an HTTP 5xx error."""


class MalformedErrorResponseError(TaxjarResponseError):
    """Raised when an error response body is not a ``{"error", "detail"}`` object.

    ``service_error`` is always ``None``; the raw payload is kept in ``body``.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(
            status_code,
            None,
            f"HTTP {status_code} - malformed error payload",
        )
        self.body = body
