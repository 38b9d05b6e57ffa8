"""Shared request engine for the blocking and awaitable clients.

:class:`BaseClient` owns everything except the transport call:

1. :meth:`~BaseClient._prepare` -- build the request with
   :func:`~taxjar.client.request.build_request`.
2. *(subclass)* ``_send`` -- one HTTP exchange, blocking or awaited.
3. :meth:`~BaseClient._finish` -- classify the response with
   :func:`~taxjar.client.response.classify_response` and unwrap the
   envelope.

:class:`~taxjar.client.sync_client.Client` and
:class:`~taxjar.client.async_client.AsyncClient` differ only in step 2.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from taxjar.client.request import PreparedRequest, build_request
from taxjar.client.response import RawResponse, classify_response, decode_envelope
from taxjar.config import resolve_credentials
from taxjar.models import Credentials
from taxjar.operations import Operation

logger = logging.getLogger(__name__)


class BaseClient:
    """Credentials plus the transport-independent halves of every call.

    Args:
        api_key: TaxJar API key.  Falls back to *api_key_source*, then to
            the ``TAXJAR_API_KEY`` environment variable.
        api_url: Base URL override, e.g.
            :data:`~taxjar.config.SANDBOX_API_URL`.
        api_key_source: Credential descriptor (``env:VAR`` or
            ``file:/path``).

    Raises:
        ConfigError: If no API key can be resolved.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        api_key_source: Optional[str] = None,
    ) -> None:
        self._credentials = resolve_credentials(api_key, api_url, api_key_source)

    @property
    def credentials(self) -> Credentials:
        """The immutable API key and base URL of this client."""
        return self._credentials

    def _prepare(self, operation: Operation) -> PreparedRequest:
        request = build_request(operation, self._credentials)
        logger.debug("%s %s", request.method.value, operation.path)
        return request

    def _finish(self, operation: Operation, raw: RawResponse) -> Any:
        logger.debug("%s %s -> HTTP %d", operation.method.value, operation.path, raw.status_code)
        body = classify_response(raw)
        if operation.envelope is None:
            return body
        return decode_envelope(body, operation.envelope, operation.key)

    @staticmethod
    def _to_raw(response: httpx.Response) -> RawResponse:
        return RawResponse(status_code=response.status_code, body=response.text)
