"""Pydantic models shared across all taxjar modules.

This is the single source of truth for data shapes in the project.  The
models fall into four groups:

**Client models** -- :class:`Credentials`, :class:`HTTPMethod` and
:class:`ServiceError`.

**Parameter models** -- what callers send:
    :class:`RateParams`, :class:`TaxParams`, :class:`ListTransactionsParams`,
    :class:`OrderParams`, :class:`RefundParams`, :class:`ValidationParams`,
    plus the nested :class:`LineItem` and :class:`NexusAddress`.

**Resource models** -- what the service returns:
    :class:`Category`, :class:`Rate`, :class:`Tax`, :class:`Order`,
    :class:`Refund`, :class:`NexusRegion`, :class:`Validation`,
    :class:`SummaryRate` and their nested types.

**Envelopes** -- single-field wrappers whose field name matches the JSON
root key of each response (``{"rate": {...}}`` -> :class:`RateEnvelope`).

Parameter and resource models use ``extra="allow"`` so that fields the
service adds later are passed through rather than dropped.
"""

from __future__ import annotations

import enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Monetary inputs: an int stays an int and a float stays a float.
Number = Union[int, float]


# --- Client models ---


class HTTPMethod(str, enum.Enum):
    """HTTP verbs used by the TaxJar API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Credentials(BaseModel):
    """API key and base URL, fixed for the lifetime of a client.

    Built by :func:`~taxjar.config.resolve_credentials`, which enforces a
    non-blank key and a trailing ``/`` on the URL.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, repr=False)
    api_url: str


class ServiceError(BaseModel):
    """Error payload returned by the service with any status >= 400."""

    model_config = ConfigDict(frozen=True)

    error: str
    detail: str


# --- Parameter models ---


class _Params(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class LineItem(_Params):
    """A line item on a tax calculation, order, or refund."""

    id: Optional[str] = None
    quantity: Optional[int] = None
    product_identifier: Optional[str] = None
    description: Optional[str] = None
    product_tax_code: Optional[str] = None
    unit_price: Optional[Number] = None
    discount: Optional[Number] = None
    sales_tax: Optional[Number] = None


class NexusAddress(_Params):
    """A location where the seller has nexus, sent with a tax calculation."""

    id: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    street: Optional[str] = None


class RateParams(_Params):
    """Optional address refinements for ``rates/{zip}``."""

    country: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    street: Optional[str] = None


class TaxParams(_Params):
    """Order details for a sales tax calculation (``POST taxes``)."""

    from_country: Optional[str] = None
    from_zip: Optional[str] = None
    from_state: Optional[str] = None
    from_city: Optional[str] = None
    from_street: Optional[str] = None
    to_country: Optional[str] = None
    to_zip: Optional[str] = None
    to_state: Optional[str] = None
    to_city: Optional[str] = None
    to_street: Optional[str] = None
    amount: Optional[Number] = None
    shipping: Optional[Number] = None
    customer_id: Optional[str] = None
    exemption_type: Optional[str] = None
    nexus_addresses: Optional[list[NexusAddress]] = None
    line_items: Optional[list[LineItem]] = None


class ListTransactionsParams(_Params):
    """Date filters for listing order or refund transaction ids."""

    transaction_date: Optional[str] = None
    from_transaction_date: Optional[str] = None
    to_transaction_date: Optional[str] = None
    provider: Optional[str] = None


class OrderParams(_Params):
    """An order transaction.  ``transaction_id`` is required and also names
    the resource for updates (``PUT transactions/orders/{transaction_id}``).
    """

    transaction_id: str = Field(min_length=1)
    transaction_date: Optional[str] = None
    provider: Optional[str] = None
    from_country: Optional[str] = None
    from_zip: Optional[str] = None
    from_state: Optional[str] = None
    from_city: Optional[str] = None
    from_street: Optional[str] = None
    to_country: Optional[str] = None
    to_zip: Optional[str] = None
    to_state: Optional[str] = None
    to_city: Optional[str] = None
    to_street: Optional[str] = None
    amount: Optional[Number] = None
    shipping: Optional[Number] = None
    sales_tax: Optional[Number] = None
    customer_id: Optional[str] = None
    exemption_type: Optional[str] = None
    line_items: Optional[list[LineItem]] = None


class RefundParams(OrderParams):
    """A refund transaction, linked to its order by ``transaction_reference_id``."""

    transaction_reference_id: Optional[str] = None


class ValidationParams(_Params):
    """VAT number to validate."""

    vat: str = Field(min_length=1)


# --- Resource models ---


class _Resource(BaseModel):
    model_config = ConfigDict(extra="allow")


class Category(_Resource):
    """A product tax category."""

    name: Optional[str] = None
    product_tax_code: Optional[str] = None
    description: Optional[str] = None


class Rate(_Resource):
    """Sales tax rates for a location.

    Rates are kept as the strings the service sends (``"0.065"``) so that no
    precision is lost.
    """

    zip: Optional[str] = None
    country: Optional[str] = None
    country_rate: Optional[str] = None
    state: Optional[str] = None
    state_rate: Optional[str] = None
    county: Optional[str] = None
    county_rate: Optional[str] = None
    city: Optional[str] = None
    city_rate: Optional[str] = None
    combined_district_rate: Optional[str] = None
    combined_rate: Optional[str] = None
    freight_taxable: Optional[bool] = None
    # International
    name: Optional[str] = None
    standard_rate: Optional[str] = None
    reduced_rate: Optional[str] = None
    super_reduced_rate: Optional[str] = None
    parking_rate: Optional[str] = None
    distance_sale_threshold: Optional[str] = None


class Jurisdictions(_Resource):
    country: Optional[str] = None
    state: Optional[str] = None
    county: Optional[str] = None
    city: Optional[str] = None


class TaxBreakdown(_Resource):
    """Per-jurisdiction breakdown of a tax calculation."""

    taxable_amount: Optional[float] = None
    tax_collectable: Optional[float] = None
    combined_tax_rate: Optional[float] = None
    state_taxable_amount: Optional[float] = None
    state_tax_rate: Optional[float] = None
    state_tax_collectable: Optional[float] = None
    county_taxable_amount: Optional[float] = None
    county_tax_rate: Optional[float] = None
    county_tax_collectable: Optional[float] = None
    city_taxable_amount: Optional[float] = None
    city_tax_rate: Optional[float] = None
    city_tax_collectable: Optional[float] = None
    line_items: list[dict[str, Any]] = Field(default_factory=list)


class Tax(_Resource):
    """Result of a sales tax calculation."""

    order_total_amount: Optional[float] = None
    shipping: Optional[float] = None
    taxable_amount: Optional[float] = None
    amount_to_collect: Optional[float] = None
    rate: Optional[float] = None
    has_nexus: Optional[bool] = None
    freight_taxable: Optional[bool] = None
    tax_source: Optional[str] = None
    exemption_type: Optional[str] = None
    jurisdictions: Optional[Jurisdictions] = None
    breakdown: Optional[TaxBreakdown] = None


class Order(_Resource):
    """An order transaction as stored by the service."""

    transaction_id: Optional[str] = None
    user_id: Optional[int] = None
    transaction_date: Optional[str] = None
    provider: Optional[str] = None
    exemption_type: Optional[str] = None
    from_country: Optional[str] = None
    from_zip: Optional[str] = None
    from_state: Optional[str] = None
    from_city: Optional[str] = None
    from_street: Optional[str] = None
    to_country: Optional[str] = None
    to_zip: Optional[str] = None
    to_state: Optional[str] = None
    to_city: Optional[str] = None
    to_street: Optional[str] = None
    amount: Optional[float] = None
    shipping: Optional[float] = None
    sales_tax: Optional[float] = None
    line_items: list[LineItem] = Field(default_factory=list)


class Refund(Order):
    """A refund transaction as stored by the service."""

    transaction_reference_id: Optional[str] = None


class NexusRegion(_Resource):
    country_code: Optional[str] = None
    country: Optional[str] = None
    region_code: Optional[str] = None
    region: Optional[str] = None


class Validation(_Resource):
    """Result of a VAT number validation."""

    valid: Optional[bool] = None
    exists: Optional[bool] = None
    vies_available: Optional[bool] = None
    vies_response: Optional[dict[str, Any]] = None


class SummaryRateAmount(_Resource):
    label: Optional[str] = None
    rate: Optional[float] = None


class SummaryRate(_Resource):
    """Minimum and average rates for a region, for use as a backup."""

    country_code: Optional[str] = None
    country: Optional[str] = None
    region_code: Optional[str] = None
    region: Optional[str] = None
    minimum_rate: Optional[SummaryRateAmount] = None
    average_rate: Optional[SummaryRateAmount] = None


# --- Envelopes ---


class CategoriesEnvelope(BaseModel):
    categories: list[Category]


class RateEnvelope(BaseModel):
    rate: Rate


class TaxEnvelope(BaseModel):
    tax: Tax


class OrdersEnvelope(BaseModel):
    orders: list[str]


class OrderEnvelope(BaseModel):
    order: Order


class RefundsEnvelope(BaseModel):
    refunds: list[str]


class RefundEnvelope(BaseModel):
    refund: Refund


class RegionsEnvelope(BaseModel):
    regions: list[NexusRegion]


class ValidationEnvelope(BaseModel):
    validation: Validation


class SummaryRatesEnvelope(BaseModel):
    summary_rates: list[SummaryRate]
