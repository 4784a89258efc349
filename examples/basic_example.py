"""
Basic usage example for restmediator.

This example demonstrates:
- Mapping HTTP methods onto resource actions
- Body parsing by Content-Type
- Content negotiation with the Accept header
- Method override with X-HTTP-Method-Override
- Error responses from the transport boundary
"""

import logging

from pydantic import BaseModel

from restmediator import HTTPMethod, Request, RestApplication, RestResource


class User(BaseModel):
    id: str
    name: str
    email: str


# In-memory data store for this example
users_db = {
    "1": User(id="1", name="Alice", email="alice@example.com"),
    "2": User(id="2", name="Bob", email="bob@example.com"),
}


class Users(RestResource):
    """User collection resource."""

    def action_get(self):
        """List all users."""
        self.response([user.model_dump() for user in users_db.values()])

    def action_create(self):
        """Create a new user from the parsed body."""
        new_id = str(len(users_db) + 1)
        user = User(id=new_id, **self.request.body)
        users_db[new_id] = user
        return user

    def action_update(self):
        """Update users by id from a mapping of id to fields."""
        for user_id, fields in self.request.body.items():
            users_db[user_id] = users_db[user_id].model_copy(update=fields)
        return [user.model_dump() for user in users_db.values()]

    def action_delete(self):
        """Delete every user."""
        users_db.clear()
        return {"deleted": True}


def show(title, response):
    print(f"--- {title}: {int(response.status_code)}")
    for name, value in response.headers.items():
        print(f"{name}: {value}")
    print()
    print(response.body)
    print()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = RestApplication(Users)

    show("List as JSON", app.execute(Request(HTTPMethod.GET)))

    show("List as text", app.execute(Request(HTTPMethod.GET, {"Accept": "text/plain"})))

    show("Create", app.execute(Request(
        HTTPMethod.POST,
        {"Content-Type": "application/json"},
        body=b'{"name": "Carol", "email": "carol@example.com"}',
    )))

    show("Unsupported body", app.execute(Request(
        HTTPMethod.PUT,
        {"Content-Type": "application/xml"},
        body=b"<user/>",
    )))

    show("Not acceptable", app.execute(Request(HTTPMethod.GET, {"Accept": "text/xml"})))

    show("Method override", app.execute(Request(
        HTTPMethod.POST,
        {"X-HTTP-Method-Override": "DELETE"},
    )))
