"""
Flavorbase Backend: Request Validation Unit Tests
===================================================

What:  Tests for the rule runner in app.validation, without HTTP.

What we test:
    ✅ Coercion of valid values and canonical snake_case keys
    ✅ Error descriptors: location, field, message, value (omitted when absent)
    ✅ Declaration order of errors
    ✅ Optional paging values
"""

from decimal import Decimal

import pytest

from app.validation import (
    PAGINATION_RULES,
    body_decimal,
    body_int,
    body_str,
    canonical_name,
    path_int,
    run_rules,
)


def run(rules, path=None, query=None, body=None):
    return run_rules(tuple(rules), path or {}, query or {}, body or {})


class TestCanonicalName:

    @pytest.mark.parametrize(
        "field,expected",
        [("id", "id"), ("flavorId", "flavor_id"), ("dataSupplierId", "data_supplier_id")],
    )
    def test_camel_case_becomes_snake_case(self, field, expected):
        assert canonical_name(field) == expected


class TestIntegerRules:

    def test_path_string_is_coerced(self):
        values, errors = run([path_int("flavorId")], path={"flavorId": "123"})
        assert errors == []
        assert values == {"flavor_id": 123}

    def test_below_minimum_is_rejected(self):
        _, errors = run([path_int("id")], path={"id": "0"})
        assert errors == [
            {"location": "params", "field": "id", "message": "Invalid value", "value": "0"}
        ]

    def test_zero_allowed_when_minimum_is_zero(self):
        values, errors = run([path_int("id", min_value=0)], path={"id": "0"})
        assert errors == []
        assert values == {"id": 0}

    @pytest.mark.parametrize("raw", ["ham", "1.5", "", "12abc", "123\n", " 7"])
    def test_non_integers_are_rejected(self, raw):
        _, errors = run([path_int("id")], path={"id": raw})
        assert errors[0]["value"] == raw

    def test_json_numbers_in_body(self):
        values, errors = run([body_int("vendorId")], body={"vendorId": 2.0})
        assert errors == []
        assert values == {"vendor_id": 2}

    def test_booleans_are_not_integers(self):
        _, errors = run([body_int("vendorId")], body={"vendorId": True})
        assert errors[0]["message"] == "Invalid value"

    @pytest.mark.parametrize("raw", ["2147483648", 99999999999999999999])
    def test_beyond_integer_column_range_is_rejected(self, raw):
        _, errors = run([path_int("id")], path={"id": raw})
        assert errors == [
            {"location": "params", "field": "id", "message": "Invalid value", "value": raw}
        ]

    def test_largest_integer_column_value_is_accepted(self):
        values, errors = run([path_int("id")], path={"id": "2147483647"})
        assert errors == []
        assert values == {"id": 2147483647}


class TestBodyRules:

    def test_missing_field_has_no_value(self):
        _, errors = run([body_str("name")])
        assert errors == [{"location": "body", "field": "name", "message": "Invalid value"}]

    def test_empty_string_reports_length(self):
        _, errors = run([body_str("slug")], body={"slug": ""})
        assert errors[0]["message"] == "length"

    def test_non_string_is_rejected(self):
        _, errors = run([body_str("name")], body={"name": 42})
        assert errors[0]["message"] == "Invalid value"

    @pytest.mark.parametrize("raw,expected", [("1.0300", Decimal("1.0300")), (1.5, Decimal("1.5")), ("2", Decimal("2"))])
    def test_decimal_values(self, raw, expected):
        values, errors = run([body_decimal("density")], body={"density": raw})
        assert errors == []
        assert values["density"] == expected

    @pytest.mark.parametrize("raw", ["heavy", "", "NaN", "Infinity", " 1.2", None, False])
    def test_bad_decimals(self, raw):
        _, errors = run([body_decimal("density")], body={"density": raw})
        assert len(errors) == 1

    def test_small_float_decimal_is_accepted(self):
        values, errors = run([body_decimal("density")], body={"density": 0.00001})
        assert errors == []
        assert values["density"] == Decimal("0.00001")

    def test_errors_follow_declaration_order(self):
        rules = [path_int("id"), body_int("vendorId"), body_str("name")]
        _, errors = run(rules, path={"id": "x"}, body={"vendorId": "y", "name": ""})
        assert [e["field"] for e in errors] == ["id", "vendorId", "name"]


class TestPaginationRules:

    def test_absent_values_are_skipped(self):
        values, errors = run(PAGINATION_RULES)
        assert values == {}
        assert errors == []

    def test_numeric_values_are_truncated(self):
        values, _ = run(PAGINATION_RULES, query={"offset": "3", "limit": "2.7"})
        assert values == {"offset": 3, "limit": 2}

    def test_out_of_range_value_is_rejected(self):
        _, errors = run(PAGINATION_RULES, query={"limit": "99999999999"})
        assert [e["field"] for e in errors] == ["limit"]

    def test_empty_value_is_rejected(self):
        _, errors = run(PAGINATION_RULES, query={"limit": ""})
        assert errors == [
            {"location": "query", "field": "limit", "message": "Invalid value", "value": ""}
        ]
