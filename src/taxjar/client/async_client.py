"""Asynchronous TaxJar client -- mirrors :class:`~taxjar.client.sync_client.Client` API.

This module provides :class:`AsyncClient`, the non-blocking counterpart to
:class:`~taxjar.client.sync_client.Client`.  It wraps
:class:`httpx.AsyncClient` and shares request building and response
classification with the blocking client through
:class:`~taxjar.client.base.BaseClient`; only the transport call is awaited.

If a pending call is cancelled, :class:`asyncio.CancelledError` propagates
from the awaited send and the response is never classified.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

import httpx

from taxjar import operations
from taxjar.client.base import BaseClient
from taxjar.client.request import PreparedRequest
from taxjar.client.response import RawResponse
from taxjar.models import Category, NexusRegion, Order, Rate, Refund, SummaryRate, Tax, Validation
from taxjar.operations import Operation, ParamsInput


class AsyncClient(BaseClient):
    """Non-blocking client for the TaxJar API.

    Provides the same methods as :class:`~taxjar.client.sync_client.Client`
    as coroutines.  Use as an async context manager or close explicitly
    with :meth:`aclose`.

    Args:
        api_key: TaxJar API key.  Falls back to *api_key_source*, then to
            the ``TAXJAR_API_KEY`` environment variable.
        api_url: Base URL override.
        api_key_source: Credential descriptor (``env:VAR`` or ``file:/path``).
        http_client: Optional pre-configured :class:`httpx.AsyncClient`.
            A client passed in is not closed by :meth:`aclose`.

    Example::

        async with AsyncClient(api_key="...") as client:
            rate = await client.rates_for_location("90210")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        api_key_source: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(api_key, api_url, api_key_source)
        self._owns_client = http_client is None
        self._client: httpx.AsyncClient = http_client or httpx.AsyncClient()

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying :class:`httpx.AsyncClient` if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------ #
    # Engine
    # ------------------------------------------------------------------ #

    async def execute(self, operation: Operation) -> Any:
        """Build, send, and classify *operation*, returning its decoded value.

        Behaves identically to
        :meth:`~taxjar.client.sync_client.Client.execute` but is non-blocking.
        """
        request = self._prepare(operation)
        raw = await self._send(request)
        return self._finish(operation, raw)

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Call any endpoint and return the raw body of a successful response."""
        return await self.execute(operations.raw(method, path, params))

    async def _send(self, request: PreparedRequest) -> RawResponse:
        response = await self._client.request(**request.to_httpx_kwargs())
        return self._to_raw(response)

    # ------------------------------------------------------------------ #
    # Resources
    # ------------------------------------------------------------------ #

    async def categories(self) -> list[Category]:
        return await self.execute(operations.categories())

    async def rates_for_location(self, zip: str, params: Optional[ParamsInput] = None) -> Rate:
        return await self.execute(operations.rates_for_location(zip, params))

    async def tax_for_order(self, params: ParamsInput) -> Tax:
        return await self.execute(operations.tax_for_order(params))

    async def list_orders(self, params: Optional[ParamsInput] = None) -> list[str]:
        return await self.execute(operations.list_orders(params))

    async def show_order(self, transaction_id: str) -> Order:
        return await self.execute(operations.show_order(transaction_id))

    async def create_order(self, params: ParamsInput) -> Order:
        return await self.execute(operations.create_order(params))

    async def update_order(self, params: ParamsInput) -> Order:
        return await self.execute(operations.update_order(params))

    async def delete_order(self, transaction_id: str) -> Order:
        return await self.execute(operations.delete_order(transaction_id))

    async def list_refunds(self, params: Optional[ParamsInput] = None) -> list[str]:
        return await self.execute(operations.list_refunds(params))

    async def show_refund(self, transaction_id: str) -> Refund:
        return await self.execute(operations.show_refund(transaction_id))

    async def create_refund(self, params: ParamsInput) -> Refund:
        return await self.execute(operations.create_refund(params))

    async def update_refund(self, params: ParamsInput) -> Refund:
        return await self.execute(operations.update_refund(params))

    async def delete_refund(self, transaction_id: str) -> Refund:
        return await self.execute(operations.delete_refund(transaction_id))

    async def nexus_regions(self) -> list[NexusRegion]:
        return await self.execute(operations.nexus_regions())

    async def validate(self, params: ParamsInput) -> Validation:
        return await self.execute(operations.validate(params))

    async def summary_rates(self) -> list[SummaryRate]:
        return await self.execute(operations.summary_rates())
