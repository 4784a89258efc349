"""
Tests for request/response models and error types.
"""

from restmediator.exceptions import HTTPError, MethodNotAllowed, NotAcceptable, http_error
from restmediator.models import Headers, HTTPMethod, Request, Response


class TestHeaders:

    def test_case_insensitive_lookup(self):
        headers = Headers({"Content-Type": "application/json"})
        assert headers.get("content-type") == "application/json"
        assert headers["CONTENT-TYPE"] == "application/json"
        assert "content-TYPE" in headers

    def test_set_replaces_regardless_of_case(self):
        """Test that header names stay unique ignoring case."""
        headers = Headers({"Allow": "GET"})
        headers["allow"] = "GET, PUT"
        assert len(headers) == 1
        assert headers.to_dict() == {"allow": "GET, PUT"}

    def test_missing_header(self):
        assert Headers().get("Accept") is None

    def test_equality_with_dict(self):
        assert Headers({"A": "1"}) == {"a": "1"}


class TestRequest:

    def test_headers_are_wrapped(self):
        request = Request(HTTPMethod.GET, {"accept": "text/html"})
        assert request.header("Accept") == "text/html"
        assert request.header("X-Missing") is None

    def test_method_name(self):
        assert Request("patch").method_name == "PATCH"
        assert Request(HTTPMethod.PUT).method_name == "PUT"

    def test_accept_types(self):
        request = Request("GET", {"Accept": "text/html;q=0.5, application/json"})
        assert list(request.accept_types()) == ["application/json", "text/html"]

    def test_body_is_replaceable(self):
        request = Request("POST", body=b"{}")
        request.body = {"parsed": True}
        assert request.body == {"parsed": True}


class TestResponse:

    def test_defaults(self):
        response = Response()
        assert response.status_code == 200
        assert response.body is None
        assert len(response.headers) == 0

    def test_content_type(self):
        assert Response(headers={"content-type": "text/plain"}).content_type == "text/plain"


class TestHTTPError:

    def test_default_message_is_status_phrase(self):
        assert MethodNotAllowed().message == "Method Not Allowed"

    def test_factory_substitutes_params(self):
        """Test that :name placeholders are replaced from params."""
        error = http_error(406, "Types: :types.", {":types": "a, b"})
        assert isinstance(error, NotAcceptable)
        assert error.message == "Types: a, b."

    def test_factory_generic_status(self):
        error = http_error(418)
        assert type(error) is HTTPError
        assert error.status_code == 418
        assert error.message == "I'm a Teapot"
        assert not error.is_server_error

    def test_factory_unknown_status(self):
        """Test that a status without a standard phrase gets a generic message."""
        error = http_error(499)
        assert type(error) is HTTPError
        assert error.status_code == 499
        assert error.message == "HTTP Error"
        assert not error.is_server_error

    def test_server_errors(self):
        assert http_error(503).is_server_error
