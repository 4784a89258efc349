"""
Tests for negotiating response types against the Accept header.
"""

from collections import OrderedDict

import pytest

from restmediator.content_renderers import PlainTextRenderer, RendererRegistry, default_renderers
from restmediator.exceptions import NotAcceptable
from restmediator.models import HTTPMethod, parse_accept_header
from restmediator.negotiation import negotiate


@pytest.fixture
def json_only():
    registry = RendererRegistry()
    registry.register("application/json", lambda data: "{}")
    return registry.freeze()


class TestNegotiate:

    @pytest.mark.parametrize("accept", [{}, {"*/*": 1}])
    def test_empty_or_wildcard_yields_default(self, accept, json_only):
        """Test that accepting anything yields exactly the default type."""
        assert negotiate(accept, json_only, "application/json") == ["application/json"]

    def test_default_is_used_even_without_a_renderer(self):
        """Test that the default type is returned as configured."""
        assert negotiate({}, RendererRegistry(), "text/csv") == ["text/csv"]

    def test_unsupported_types_are_dropped(self, json_only):
        """Test that only types with a renderer survive."""
        accept = OrderedDict([("application/json", 1.0), ("text/xml", 0.9)])
        assert negotiate(accept, json_only, "application/json") == ["application/json"]

    def test_preference_order_is_kept(self):
        """Test that negotiated types keep the client's order."""
        accept = OrderedDict([("text/html", 1.0), ("text/xml", 0.95), ("application/json", 0.9), ("text/plain", 0.5)])
        result = negotiate(accept, default_renderers(), "application/json")
        assert result == ["text/html", "application/json", "text/plain"]

    def test_wildcard_alongside_other_types_is_not_default(self, json_only):
        """Test that */* only means "default" when it is the sole entry."""
        accept = OrderedDict([("text/xml", 1.0), ("*/*", 0.1)])
        with pytest.raises(NotAcceptable):
            negotiate(accept, json_only, "application/json", HTTPMethod.GET)

    def test_get_with_nothing_acceptable_fails(self):
        """Test that GET requests with no renderable type raise 406."""
        registry = RendererRegistry()
        registry.register("application/json", lambda data: "{}")
        registry.add(PlainTextRenderer())

        with pytest.raises(NotAcceptable) as exc_info:
            negotiate({"text/xml": 1.0}, registry, "application/json", "GET")

        assert exc_info.value.status_code == 406
        assert exc_info.value.message == "This service delivers following types: application/json, text/plain."

    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", HTTPMethod.POST])
    def test_non_get_tolerates_empty_result(self, method, json_only):
        """Test that write methods do not fail at negotiation."""
        assert negotiate({"text/xml": 1.0}, json_only, "application/json", method) == []


class TestParseAcceptHeader:

    def test_missing_header_is_empty(self):
        """Test that no header means an empty mapping."""
        assert parse_accept_header(None) == {}
        assert parse_accept_header("") == {}

    def test_sorted_by_quality_then_position(self):
        """Test that higher quality comes first and ties keep header order."""
        result = parse_accept_header("text/plain;q=0.5, text/html, application/json;q=0.9, text/csv")
        assert list(result) == ["text/html", "text/csv", "application/json", "text/plain"]
        assert result["text/plain"] == 0.5

    def test_zero_quality_is_excluded(self):
        """Test that q=0 marks a type as not acceptable."""
        assert list(parse_accept_header("application/json, text/html;q=0")) == ["application/json"]

    def test_parameters_and_case_are_dropped(self):
        """Test that non-q parameters and letter case are ignored."""
        result = parse_accept_header("Application/JSON; charset=utf-8")
        assert list(result) == ["application/json"]

    def test_malformed_quality_defaults_to_one(self):
        """Test that an unparseable q value is treated as 1."""
        assert parse_accept_header("text/html;q=abc") == {"text/html": 1.0}

    def test_wildcard_only(self):
        """Test that */* parses into a single wildcard entry."""
        assert parse_accept_header("*/*") == {"*/*": 1.0}
