"""
Shared fixtures for mediator tests.
"""

import pytest

from restmediator import RestResource
from restmediator.models import Request


class NotesResource(RestResource):
    """Resource exercising every default action."""

    notes = {1: {"id": 1, "text": "first"}}

    def action_get(self):
        self.response({"notes": list(self.notes.values())})

    def action_create(self):
        self.response({"created": self.request.body})

    def action_update(self):
        return {"updated": self.request.body}

    def action_delete(self):
        self.response({"deleted": True})


@pytest.fixture
def notes_resource():
    return NotesResource


@pytest.fixture
def make_request():
    """Build a Request from keyword arguments."""
    def _make(method="GET", headers=None, body=None, form=None):
        return Request(method, headers or {}, body=body, form=form)
    return _make
