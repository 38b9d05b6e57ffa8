"""Response classification and envelope decoding.

:func:`classify_response` is the single place where an HTTP status is turned
into either the raw success body or a typed
:class:`~taxjar.exceptions.TaxjarResponseError`.  :func:`decode_envelope`
then unwraps the single-key JSON envelope of a successful response into the
resource model the caller asked for.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from taxjar.exceptions import (
    AuthError,
    MalformedErrorResponseError,
    NotFoundError,
    ServerError,
    TaxjarDecodeError,
    TaxjarResponseError,
)
from taxjar.models import ServiceError


@dataclass(frozen=True)
class RawResponse:
    """Status code and text body of one HTTP exchange."""

    status_code: int
    body: str


def classify_response(raw: RawResponse) -> str:
    """Return the body of a successful response or raise a typed error.

    Args:
        raw: The response to classify.

    Returns:
        ``raw.body`` unchanged when ``raw.status_code < 400``.

    Raises:
        AuthError: On 401 / 403.
        NotFoundError: On 404.
        ServerError: On 5xx.
        TaxjarResponseError: On any other status >= 400.
        MalformedErrorResponseError: When the error body is not a
            ``{"error", "detail"}`` object.
    """
    status = raw.status_code
    if status < 400:
        return raw.body

    try:
        service_error = ServiceError.model_validate_json(raw.body)
    except ValidationError:
        raise MalformedErrorResponseError(status, raw.body) from None

    message = f"{service_error.error} - {service_error.detail}"
    raise _error_class(status)(status, service_error, message)


def _error_class(status: int) -> type[TaxjarResponseError]:
    if status in (401, 403):
        return AuthError
    if status == 404:
        return NotFoundError
    if status >= 500:
        return ServerError
    return TaxjarResponseError


def decode_envelope(body: str, envelope: type[BaseModel], key: str) -> Any:
    """Validate *body* against *envelope* and return its *key* field.

    Raises:
        TaxjarDecodeError: If the body is not valid JSON or does not match
            the envelope.
    """
    try:
        wrapper = envelope.model_validate_json(body)
    except ValidationError as exc:
        raise TaxjarDecodeError(
            f"Unexpected response for '{key}': {exc.error_count()} validation error(s)"
        ) from exc
    return getattr(wrapper, key)
