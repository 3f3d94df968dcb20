"""Tests for core/submission.py."""

from __future__ import annotations

import json

import pytest

from siren_client.core.exceptions import UnsupportedEncodingError
from siren_client.core.submission import ActionTarget, append_query, build_action_request

FORM = "application/x-www-form-urlencoded"


class TestReadOnlyMethods:
    """Tests for GET and HEAD submissions."""

    def test_get_payload_in_query(self):
        """Test GET appends the payload as query parameters."""
        request = build_action_request(ActionTarget("http://api.x.io/get", "GET", FORM), {"answer": 42})

        assert request.url == "http://api.x.io/get?answer=42"
        assert request.options.method == "GET"
        assert request.options.body is None
        assert "content-type" not in request.options.headers

    def test_head_payload_in_query(self):
        """Test HEAD behaves like GET."""
        request = build_action_request(ActionTarget("http://api.x.io/get", "HEAD", FORM), {"answer": 42})

        assert request.url == "http://api.x.io/get?answer=42"
        assert request.options.method == "HEAD"
        assert request.options.body is None

    def test_method_case_insensitive(self):
        """Test a lower-case method is normalised."""
        request = build_action_request(ActionTarget("http://api.x.io/get", "get", FORM), {"q": "x"})

        assert request.options.method == "GET"
        assert request.url == "http://api.x.io/get?q=x"

    def test_get_ignores_encoding(self):
        """Test a GET action with an unsupported encoding still works."""
        request = build_action_request(
            ActionTarget("http://api.x.io/search", "GET", "multipart/form-data"), {"q": "siren"}
        )

        assert request.url == "http://api.x.io/search?q=siren"

    def test_existing_query_kept(self):
        """Test parameters already in the href survive."""
        request = build_action_request(
            ActionTarget("http://api.x.io/search?sort=asc", "GET", FORM), {"page": 2}
        )

        assert request.url == "http://api.x.io/search?sort=asc&page=2"

    def test_existing_query_bytes_untouched(self):
        """Test the server's query string is not re-encoded."""
        url = append_query("http://api.x.io/search?flag&name=a%20b", {"page": 2})

        assert url == "http://api.x.io/search?flag&name=a%20b&page=2"

    def test_empty_payload_keeps_url(self):
        """Test no payload leaves the href untouched."""
        request = build_action_request(ActionTarget("http://api.x.io/search#top", "GET", FORM), {})

        assert request.url == "http://api.x.io/search#top"

    def test_scalar_formatting(self):
        """Test booleans and None are encoded predictably."""
        url = append_query("http://api.x.io/s", {"a": True, "b": False, "c": None, "d": 1.5, "e": "x y"})

        assert url == "http://api.x.io/s?a=true&b=false&c=&d=1.5&e=x+y"


class TestBodyMethods:
    """Tests for methods carrying a body."""

    def test_json_body(self):
        """Test application/json encodes a JSON body."""
        request = build_action_request(
            ActionTarget("http://api.x.io/authenticate", "POST", "application/json"),
            {"username": "testuser", "password": "password"},
        )

        assert request.url == "http://api.x.io/authenticate"
        assert request.options.method == "POST"
        assert request.options.headers == {"content-type": "application/json"}
        assert json.loads(request.options.body) == {"username": "testuser", "password": "password"}

    def test_json_keeps_types(self):
        """Test JSON bodies keep numbers and booleans."""
        request = build_action_request(
            ActionTarget("http://api.x.io/items", "POST", "application/json"),
            {"quantity": 3, "gift": True, "note": None},
        )

        assert json.loads(request.options.body) == {"quantity": 3, "gift": True, "note": None}

    def test_json_with_parameters(self):
        """Test media type parameters do not prevent JSON encoding."""
        request = build_action_request(
            ActionTarget("http://api.x.io/items", "PUT", "application/json; charset=utf-8"), {"a": 1}
        )

        assert request.options.headers == {"content-type": "application/json"}
        assert request.options.method == "PUT"

    def test_form_body(self):
        """Test form encoding."""
        request = build_action_request(
            ActionTarget("http://api.x.io/authentication", "POST", FORM), {"username": "testuser"}
        )

        assert request.url == "http://api.x.io/authentication"
        assert request.options.body == "username=testuser"
        assert request.options.headers == {"content-type": FORM}

    def test_form_body_escaping(self):
        """Test form values are percent-encoded."""
        request = build_action_request(
            ActionTarget("http://api.x.io/items", "POST", FORM), {"productCode": "A&B", "quantity": 2}
        )

        assert request.options.body == "productCode=A%26B&quantity=2"

    def test_delete_uses_declared_encoding(self):
        """Test non-GET methods other than POST are encoded too."""
        request = build_action_request(ActionTarget("http://api.x.io/items/1", "delete", FORM), {"force": True})

        assert request.options.method == "DELETE"
        assert request.options.body == "force=true"
        assert request.url == "http://api.x.io/items/1"

    def test_unsupported_encoding(self):
        """Test multipart and other encodings are rejected."""
        with pytest.raises(UnsupportedEncodingError) as exc_info:
            build_action_request(ActionTarget("http://api.x.io/upload", "POST", "multipart/form-data"), {})

        assert exc_info.value.encoding == "multipart/form-data"
        assert isinstance(exc_info.value, ValueError)
