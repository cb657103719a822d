"""Tests for the error response mapping."""

import json

import pytest
from starlette.requests import Request

from src.api.middleware.error_handler import _status_for, build_error_response
from src.core.exceptions import (
    DatabaseError,
    InsufficientStockError,
    ItemNotFoundError,
    ValidationError,
)


def _request(path: str = "/api/inventory/items") -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("test", 80),
            "path": path,
            "query_string": b"",
            "headers": [],
        }
    )


class TestStatusFor:
    @pytest.mark.parametrize(
        "exc,expected",
        [
            (ValidationError("quantity", "must be positive"), 400),
            (ItemNotFoundError("missing"), 404),
            (InsufficientStockError("denim", requested=16, available=15), 409),
            (DatabaseError("save", "disk full"), 500),
        ],
    )
    def test_ledger_errors(self, exc, expected):
        assert _status_for(exc) == expected

    @pytest.mark.parametrize("exc", [KeyError("current_stock"), ValueError("bad float")])
    def test_builtin_errors_are_server_errors(self, exc):
        assert _status_for(exc) == 500


class TestBuildErrorResponse:
    def test_stray_key_error_is_not_reported_as_missing_item(self):
        resp = build_error_response(_request(), KeyError("current_stock"))

        assert resp.status_code == 500
        body = json.loads(resp.body)
        assert body["error_code"] == "KeyError"
        assert body["hint"] == "An internal error occurred. Check server logs."

    def test_validation_error_lists_fields(self):
        exc = ValidationError("min_stock", "must not exceed max_stock")

        resp = build_error_response(_request(), exc)

        assert resp.status_code == 400
        body = json.loads(resp.body)
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["invalid_fields"] == ["min_stock"]
        assert body["path"] == "/api/inventory/items"
