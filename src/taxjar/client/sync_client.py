"""Synchronous TaxJar client.

This module provides :class:`Client`, the blocking client.  It wraps
:class:`httpx.Client` and adds nothing to the shared engine in
:mod:`taxjar.client.base` except the blocking transport call.

Every resource method makes exactly one HTTP request.  There is no retry,
caching, or rate limiting.

See Also:
    :class:`~taxjar.client.async_client.AsyncClient` for the
    equivalent non-blocking implementation.
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


class Client(BaseClient):
    """Blocking client for the TaxJar API.

    Can be used as a context manager so that the underlying transport is
    closed, or closed explicitly with :meth:`close`.

    Args:
        api_key: TaxJar API key.  Falls back to *api_key_source*, then to
            the ``TAXJAR_API_KEY`` environment variable.
        api_url: Base URL override.
        api_key_source: Credential descriptor (``env:VAR`` or ``file:/path``).
        http_client: Optional pre-configured :class:`httpx.Client`
            (custom transport, proxies, timeouts).  A client passed in is
            not closed by :meth:`close`.

    Raises:
        ConfigError: If no API key can be resolved.

    Example::

        with Client(api_key="...") as client:
            rate = client.rates_for_location("90210")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        api_key_source: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(api_key, api_url, api_key_source)
        self._owns_client = http_client is None
        self._client: httpx.Client = http_client or httpx.Client()

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying :class:`httpx.Client` if this client created it."""
        if self._owns_client:
            self._client.close()

    # ------------------------------------------------------------------ #
    # Engine
    # ------------------------------------------------------------------ #

    def execute(self, operation: Operation) -> Any:
        """Build, send, and classify *operation*, returning its decoded value.

        Raises:
            TaxjarResponseError: On any HTTP status >= 400.
            httpx.TransportError: On network failures (not wrapped).
        """
        request = self._prepare(operation)
        raw = self._send(request)
        return self._finish(operation, raw)

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Call any endpoint and return the raw body of a successful response.

        Args:
            method: ``GET``, ``POST``, ``PUT`` or ``DELETE``.
            path: Endpoint path relative to the base URL.
            params: Query parameters for ``GET``, JSON body otherwise.
        """
        return self.execute(operations.raw(method, path, params))

    def _send(self, request: PreparedRequest) -> RawResponse:
        response = self._client.request(**request.to_httpx_kwargs())
        return self._to_raw(response)

    # ------------------------------------------------------------------ #
    # Resources
    # ------------------------------------------------------------------ #

    def categories(self) -> list[Category]:
        """List all product tax categories."""
        return self.execute(operations.categories())

    def rates_for_location(self, zip: str, params: Optional[ParamsInput] = None) -> Rate:
        """Show sales tax rates for a location.

        Args:
            zip: Postal code of the location.
            params: Optional :class:`~taxjar.models.RateParams` refinements.
        """
        return self.execute(operations.rates_for_location(zip, params))

    def tax_for_order(self, params: ParamsInput) -> Tax:
        """Calculate sales tax for an order (:class:`~taxjar.models.TaxParams`)."""
        return self.execute(operations.tax_for_order(params))

    def list_orders(self, params: Optional[ParamsInput] = None) -> list[str]:
        return self.execute(operations.list_orders(params))

    def show_order(self, transaction_id: str) -> Order:
        return self.execute(operations.show_order(transaction_id))

    def create_order(self, params: ParamsInput) -> Order:
        return self.execute(operations.create_order(params))

    def update_order(self, params: ParamsInput) -> Order:
        """Update an order; ``params.transaction_id`` selects which one."""
        return self.execute(operations.update_order(params))

    def delete_order(self, transaction_id: str) -> Order:
        return self.execute(operations.delete_order(transaction_id))

    def list_refunds(self, params: Optional[ParamsInput] = None) -> list[str]:
        return self.execute(operations.list_refunds(params))

    def show_refund(self, transaction_id: str) -> Refund:
        return self.execute(operations.show_refund(transaction_id))

    def create_refund(self, params: ParamsInput) -> Refund:
        return self.execute(operations.create_refund(params))

    def update_refund(self, params: ParamsInput) -> Refund:
        """Update a refund; ``params.transaction_id`` selects which one."""
        return self.execute(operations.update_refund(params))

    def delete_refund(self, transaction_id: str) -> Refund:
        return self.execute(operations.delete_refund(transaction_id))

    def nexus_regions(self) -> list[NexusRegion]:
        """List the regions where the account has nexus."""
        return self.execute(operations.nexus_regions())

    def validate(self, params: ParamsInput) -> Validation:
        """Validate a VAT number (:class:`~taxjar.models.ValidationParams`)."""
        return self.execute(operations.validate(params))

    def summary_rates(self) -> list[SummaryRate]:
        """Minimum and average sales tax rates by region."""
        return self.execute(operations.summary_rates())
