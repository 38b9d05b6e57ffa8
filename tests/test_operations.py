"""Tests for the endpoint catalog."""

from __future__ import annotations

import pytest

from taxjar import operations
from taxjar.exceptions import InvalidParametersError
from taxjar.models import (
    CategoriesEnvelope,
    HTTPMethod,
    LineItem,
    OrderEnvelope,
    OrderParams,
    RateParams,
    RefundParams,
    TaxParams,
)


class TestCatalog:
    @pytest.mark.parametrize(
        "operation, method, path, key",
        [
            (operations.categories(), HTTPMethod.GET, "categories", "categories"),
            (operations.rates_for_location("90210"), HTTPMethod.GET, "rates/90210", "rate"),
            (operations.tax_for_order({"amount": 1}), HTTPMethod.POST, "taxes", "tax"),
            (operations.list_orders(), HTTPMethod.GET, "transactions/orders", "orders"),
            (operations.show_order("1"), HTTPMethod.GET, "transactions/orders/1", "order"),
            (operations.create_order({"transaction_id": "1"}), HTTPMethod.POST, "transactions/orders", "order"),
            (operations.update_order({"transaction_id": "1"}), HTTPMethod.PUT, "transactions/orders/1", "order"),
            (operations.delete_order("1"), HTTPMethod.DELETE, "transactions/orders/1", "order"),
            (operations.list_refunds(), HTTPMethod.GET, "transactions/refunds", "refunds"),
            (operations.show_refund("2"), HTTPMethod.GET, "transactions/refunds/2", "refund"),
            (operations.create_refund({"transaction_id": "2"}), HTTPMethod.POST, "transactions/refunds", "refund"),
            (operations.update_refund({"transaction_id": "2"}), HTTPMethod.PUT, "transactions/refunds/2", "refund"),
            (operations.delete_refund("2"), HTTPMethod.DELETE, "transactions/refunds/2", "refund"),
            (operations.nexus_regions(), HTTPMethod.GET, "nexus/regions", "regions"),
            (operations.validate({"vat": "FR1"}), HTTPMethod.GET, "validation", "validation"),
            (operations.summary_rates(), HTTPMethod.GET, "summary_rates", "summary_rates"),
        ],
    )
    def test_endpoint_table(self, operation, method, path, key) -> None:
        assert operation.method == method
        assert operation.path == path
        assert operation.key == key
        assert key in operation.envelope.model_fields

    def test_parameterless_operations(self) -> None:
        assert operations.categories().params is None
        assert operations.show_order("1").params is None
        assert operations.delete_refund("1").params is None
        assert operations.categories().envelope is CategoriesEnvelope


class TestParameters:
    def test_model_and_mapping_are_equivalent(self) -> None:
        from_model = operations.rates_for_location("90210", RateParams(country="US", city="LA"))
        from_mapping = operations.rates_for_location("90210", {"country": "US", "city": "LA"})
        assert from_model.params == from_mapping.params == {"country": "US", "city": "LA"}

    def test_none_fields_dropped(self) -> None:
        op = operations.tax_for_order(TaxParams(to_country="US", to_zip=None))
        assert op.params == {"to_country": "US"}

    def test_nested_line_items_in_body(self) -> None:
        params = TaxParams(amount=10, line_items=[LineItem(quantity=2, unit_price=5)])
        op = operations.tax_for_order(params)
        assert op.params == {"amount": 10, "line_items": [{"quantity": 2, "unit_price": 5}]}

    def test_extra_fields_pass_through(self) -> None:
        op = operations.create_order({"transaction_id": "1", "future_field": "x"})
        assert op.params == {"transaction_id": "1", "future_field": "x"}

    def test_refund_params_accepted_by_order_update(self) -> None:
        op = operations.update_order(RefundParams(transaction_id="9"))
        assert op.path == "transactions/orders/9"
        assert op.envelope is OrderEnvelope

    def test_required_params_missing(self) -> None:
        with pytest.raises(InvalidParametersError, match="TaxParams are required"):
            operations.tax_for_order(None)

    def test_invalid_mapping(self) -> None:
        with pytest.raises(InvalidParametersError, match="Invalid TaxParams: amount"):
            operations.tax_for_order({"amount": "lots"})

    def test_wrong_type(self) -> None:
        with pytest.raises(InvalidParametersError, match="Expected ValidationParams"):
            operations.validate(["FR1"])

    def test_wrong_model(self) -> None:
        with pytest.raises(InvalidParametersError, match="Expected OrderParams"):
            operations.create_order(TaxParams(amount=1))

    def test_amount_types_preserved(self) -> None:
        op = operations.tax_for_order(
            {"amount": 15, "shipping": 1.5, "line_items": [{"unit_price": 10, "discount": 0.25}]}
        )
        assert type(op.params["amount"]) is int
        assert type(op.params["shipping"]) is float
        assert type(op.params["line_items"][0]["unit_price"]) is int
        assert type(op.params["line_items"][0]["discount"]) is float

    def test_numeric_zip_becomes_string(self) -> None:
        op = operations.tax_for_order({"to_country": "US", "to_zip": 90002, "amount": 15})
        assert op.params == {"to_country": "US", "to_zip": "90002", "amount": 15}


class TestTransactionIds:
    @pytest.mark.parametrize("params", [{}, {"transaction_id": ""}, {"amount": 1}])
    def test_update_requires_transaction_id(self, params: dict) -> None:
        with pytest.raises(InvalidParametersError, match="transaction_id"):
            operations.update_refund(params)

    def test_model_enforces_transaction_id(self) -> None:
        assert "transaction_id" in OrderParams.model_fields
        assert OrderParams.model_fields["transaction_id"].is_required()

    @pytest.mark.parametrize("value", ["", "   ", None, 1.5, True])
    def test_path_id_rejected(self, value: object) -> None:
        with pytest.raises(InvalidParametersError):
            operations.show_order(value)

    def test_path_id_quoted(self) -> None:
        assert operations.show_order("a/b c").path == "transactions/orders/a%2Fb%20c"

    def test_integer_id(self) -> None:
        assert operations.delete_order(123).path == "transactions/orders/123"

    def test_update_id_from_model(self) -> None:
        op = operations.update_order(OrderParams(transaction_id="T-1", amount=5))
        assert op.path == "transactions/orders/T-1"
        assert op.params == {"transaction_id": "T-1", "amount": 5}

    @pytest.mark.parametrize("update", [operations.update_order, operations.update_refund])
    def test_update_with_integer_id(self, update) -> None:
        op = update({"transaction_id": 123, "amount": 20})
        assert op.path.endswith("/123")
        assert op.params == {"transaction_id": "123", "amount": 20}


class TestRaw:
    def test_raw_operation(self) -> None:
        op = operations.raw("post", "/custom", {"a": 1})
        assert op.method == HTTPMethod.POST
        assert op.path == "custom"
        assert op.envelope is None
        assert op.params == {"a": 1}

    def test_raw_rejects_unknown_verb(self) -> None:
        with pytest.raises(InvalidParametersError, match="Unsupported HTTP method"):
            operations.raw("OPTIONS", "x")
