"""
Tests for the transport boundary turning errors into responses.
"""

import json
import logging

import pytest

from restmediator import RestApplication, RestResource
from restmediator.content_renderers import RendererRegistry
from restmediator.exceptions import RegistryFrozenError, UnknownAggregateError


class TestRestApplication:

    def test_successful_request(self, notes_resource, make_request):
        app = RestApplication(notes_resource)
        response = app.execute(make_request("GET"))

        assert response.status_code == 200
        assert json.loads(response.body)["notes"][0]["text"] == "first"

    def test_method_not_allowed_keeps_allow_header(self, notes_resource, make_request):
        """Test that the Allow header survives the 405 error response."""
        response = RestApplication(notes_resource).execute(make_request("PATCH"))

        assert response.status_code == 405
        assert response.headers["Allow"] == "GET, PUT, POST, DELETE"
        assert json.loads(response.body) == {"error": "Method Not Allowed", "status": 405}

    @pytest.mark.parametrize("method,headers,body,status,message", [
        ("POST", {}, b'{"a": 1}', 400, "NO_CONTENT_TYPE_PROVIDED"),
        ("PUT", {"Content-Type": "application/xml"}, b"<a/>", 415, "Unsupported Media Type"),
        ("POST", {"Content-Type": "application/json"}, b"", 400, "MALFORMED_REQUEST_BODY"),
        ("GET", {"Accept": "text/xml"}, None, 406,
         "This service delivers following types: application/json, text/plain, text/html."),
    ])
    def test_client_errors(self, notes_resource, make_request, method, headers, body, status, message):
        response = RestApplication(notes_resource).execute(make_request(method, headers, body=body))

        assert response.status_code == status
        assert response.headers["Content-Type"] == "application/json"
        assert json.loads(response.body)["error"] == message

    def test_client_errors_are_logged_as_warnings(self, notes_resource, make_request, caplog):
        with caplog.at_level(logging.WARNING, logger="restmediator.application"):
            RestApplication(notes_resource).execute(make_request("PATCH"))

        assert [r.levelno for r in caplog.records] == [logging.WARNING]

    def test_misconfiguration_is_logged_as_error(self, make_request, caplog):
        class Broken(RestResource):
            action_map = {"GET": "missing"}

        with caplog.at_level(logging.ERROR, logger="restmediator"):
            response = RestApplication(Broken).execute(make_request("GET"))

        assert response.status_code == 500
        assert json.loads(response.body)["error"] == "METHOD_MISCONFIGURED"
        assert any(r.levelno == logging.ERROR for r in caplog.records)

    def test_unexpected_exception_becomes_500(self, make_request):
        class Failing(RestResource):
            def action_get(self):
                raise KeyError("boom")

        response = RestApplication(Failing).execute(make_request("GET"))

        assert response.status_code == 500
        assert json.loads(response.body)["error"] == "Internal Server Error"

    def test_unknown_aggregate_propagates(self, make_request):
        """Test that an unknown data shape is surfaced to the caller."""
        class Leaky(RestResource):
            def action_get(self):
                return object()

        with pytest.raises(UnknownAggregateError):
            RestApplication(Leaky).execute(make_request("GET"))

    def test_registries_are_frozen(self, notes_resource):
        """Test that registries become read-only once the app is built."""
        renderers = RendererRegistry()
        app = RestApplication(notes_resource, renderers=renderers)

        assert app.renderers.frozen
        with pytest.raises(RegistryFrozenError):
            renderers.register("text/csv", lambda data: "")

    def test_override_on_write(self, notes_resource, make_request):
        request = make_request("POST", {"X-HTTP-Method-Override": "PUT", "Content-Type": "application/json"},
                               body=b'{"text": "changed"}')
        response = RestApplication(notes_resource).execute(request)

        assert response.status_code == 200
        assert json.loads(response.body) == {"updated": {"text": "changed"}}
        assert response.headers["Cache-Control"].startswith("no-cache")
