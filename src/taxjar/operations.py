"""Resource catalog -- one :class:`Operation` factory per API endpoint.

Each factory fixes the path, verb, parameter model and response envelope of
one endpoint.  The clients only execute what these factories return, so the
sync and async method tables cannot drift apart.

Parameters may be given as the matching pydantic model or as a plain
mapping; a mapping is validated into the model first.  Either way the
operation carries an explicit ``dict`` of the non-``None`` fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union, cast
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from taxjar.exceptions import InvalidParametersError
from taxjar.models import (
    CategoriesEnvelope,
    HTTPMethod,
    ListTransactionsParams,
    OrderEnvelope,
    OrderParams,
    OrdersEnvelope,
    RateEnvelope,
    RateParams,
    RefundEnvelope,
    RefundParams,
    RefundsEnvelope,
    RegionsEnvelope,
    SummaryRatesEnvelope,
    TaxEnvelope,
    TaxParams,
    ValidationEnvelope,
    ValidationParams,
)

ParamsInput = Union[BaseModel, Mapping[str, Any]]

ORDERS_PATH = "transactions/orders"
REFUNDS_PATH = "transactions/refunds"


@dataclass(frozen=True)
class Operation:
    """One logical API action.

    Attributes:
        method: HTTP verb.
        path: Endpoint path relative to the base URL (no leading ``/``).
        envelope: Pydantic model wrapping the response.  ``None`` for raw
            calls, whose classified body is returned undecoded.
        key: Name of the envelope's single field (the JSON root key).
        params: Flat mapping of parameter names to values, or ``None``.
    """

    method: HTTPMethod
    path: str
    envelope: Optional[type[BaseModel]] = None
    key: str = ""
    params: Optional[dict[str, Any]] = None


def categories() -> Operation:
    return Operation(HTTPMethod.GET, "categories", CategoriesEnvelope, "categories")


def rates_for_location(zip: str, params: Optional[ParamsInput] = None) -> Operation:
    return Operation(
        HTTPMethod.GET,
        f"rates/{_path_id(zip, 'zip')}",
        RateEnvelope,
        "rate",
        _coerce(params, RateParams),
    )


def tax_for_order(params: ParamsInput) -> Operation:
    return Operation(HTTPMethod.POST, "taxes", TaxEnvelope, "tax", _require(params, TaxParams))


def list_orders(params: Optional[ParamsInput] = None) -> Operation:
    return Operation(
        HTTPMethod.GET, ORDERS_PATH, OrdersEnvelope, "orders",
        _coerce(params, ListTransactionsParams),
    )


def show_order(transaction_id: str) -> Operation:
    return Operation(
        HTTPMethod.GET,
        f"{ORDERS_PATH}/{_path_id(transaction_id, 'transaction_id')}",
        OrderEnvelope,
        "order",
    )


def create_order(params: ParamsInput) -> Operation:
    return Operation(
        HTTPMethod.POST, ORDERS_PATH, OrderEnvelope, "order", _require(params, OrderParams),
    )


def update_order(params: ParamsInput) -> Operation:
    """``PUT transactions/orders/{transaction_id}``, with the id taken from *params*."""
    body = _require(params, OrderParams)
    return Operation(
        HTTPMethod.PUT,
        f"{ORDERS_PATH}/{_path_id(body['transaction_id'], 'transaction_id')}",
        OrderEnvelope,
        "order",
        body,
    )


def delete_order(transaction_id: str) -> Operation:
    return Operation(
        HTTPMethod.DELETE,
        f"{ORDERS_PATH}/{_path_id(transaction_id, 'transaction_id')}",
        OrderEnvelope,
        "order",
    )


def list_refunds(params: Optional[ParamsInput] = None) -> Operation:
    return Operation(
        HTTPMethod.GET, REFUNDS_PATH, RefundsEnvelope, "refunds",
        _coerce(params, ListTransactionsParams),
    )


def show_refund(transaction_id: str) -> Operation:
    return Operation(
        HTTPMethod.GET,
        f"{REFUNDS_PATH}/{_path_id(transaction_id, 'transaction_id')}",
        RefundEnvelope,
        "refund",
    )


def create_refund(params: ParamsInput) -> Operation:
    return Operation(
        HTTPMethod.POST, REFUNDS_PATH, RefundEnvelope, "refund", _require(params, RefundParams),
    )


def update_refund(params: ParamsInput) -> Operation:
    """``PUT transactions/refunds/{transaction_id}``, with the id taken from *params*."""
    body = _require(params, RefundParams)
    return Operation(
        HTTPMethod.PUT,
        f"{REFUNDS_PATH}/{_path_id(body['transaction_id'], 'transaction_id')}",
        RefundEnvelope,
        "refund",
        body,
    )


def delete_refund(transaction_id: str) -> Operation:
    return Operation(
        HTTPMethod.DELETE,
        f"{REFUNDS_PATH}/{_path_id(transaction_id, 'transaction_id')}",
        RefundEnvelope,
        "refund",
    )


def nexus_regions() -> Operation:
    return Operation(HTTPMethod.GET, "nexus/regions", RegionsEnvelope, "regions")


def validate(params: ParamsInput) -> Operation:
    return Operation(
        HTTPMethod.GET, "validation", ValidationEnvelope, "validation",
        _require(params, ValidationParams),
    )


def summary_rates() -> Operation:
    return Operation(HTTPMethod.GET, "summary_rates", SummaryRatesEnvelope, "summary_rates")


def raw(method: str, path: str, params: Optional[Mapping[str, Any]] = None) -> Operation:
    """An operation for any endpoint, returning the classified body undecoded."""
    try:
        verb = HTTPMethod(method.upper())
    except ValueError:
        raise InvalidParametersError(f"Unsupported HTTP method: {method}") from None
    return Operation(verb, path.lstrip("/"), params=dict(params) if params is not None else None)


# ------------------------------------------------------------------ #
# Private helpers
# ------------------------------------------------------------------ #


def _require(params: Optional[ParamsInput], model: type[BaseModel]) -> dict[str, Any]:
    if params is None:
        raise InvalidParametersError(f"{model.__name__} are required for this operation")
    return cast(dict[str, Any], _coerce(params, model))


def _coerce(params: Optional[ParamsInput], model: type[BaseModel]) -> Optional[dict[str, Any]]:
    """Validate *params* against *model* and return its non-``None`` fields."""
    if params is None:
        return None
    if isinstance(params, model):
        validated = params
    elif isinstance(params, Mapping):
        try:
            validated = model.model_validate(dict(params))
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) or "(root)"
                for err in exc.errors()
            )
            raise InvalidParametersError(
                f"Invalid {model.__name__}: {fields}"
            ) from exc
    else:
        raise InvalidParametersError(
            f"Expected {model.__name__} or a mapping, got {type(params).__name__}"
        )
    return validated.model_dump(mode="json", exclude_none=True)


def _path_id(value: Any, name: str) -> str:
    """Quote a path identifier, rejecting blanks so no malformed path is built."""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidParametersError(f"'{name}' must be a string, got {type(value).__name__}")
    text = str(value).strip()
    if not text:
        raise InvalidParametersError(f"'{name}' is required")
    return quote(text, safe="")
