"""Users — a small JSON CRUD API.

Demonstrates the route builder, parameter extraction (query string plus
JSON body), and the status helpers. Paths are matched exactly, so the
single-user routes use a literal ``/users/:id`` path and read the id
from the query string.

Run:
    cd examples/users && python app.py [asgi|wsgi] [port]
"""

import sys
import threading
from datetime import UTC, datetime

import flashapi
from flashapi import App, Responder, RouteBuilder
from flashapi.errors import AdapterNotFound

routes = (
    RouteBuilder()
    .get("/", to="HomeResponder")
    .get("/users", to="UsersResponder")
    .post("/users", to="CreateUserResponder")
    .get("/users/:id", to="UserResponder")
    .put("/users/:id", to="UpdateUserResponder")
    .delete("/users/:id", to="DeleteUserResponder")
)

app = App(routes=routes.build())


# ---------------------------------------------------------------------------
# In-memory storage
# ---------------------------------------------------------------------------

_users: dict[int, dict[str, object]] = {
    1: {"id": 1, "name": "Alice", "email": "alice@example.com"},
    2: {"id": 2, "name": "Bob", "email": "bob@example.com"},
}
_next_id = 3
_lock = threading.Lock()


def _user_id(params: dict[str, object]) -> int | None:
    try:
        return int(str(params.get("id", "")))
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Responders
# ---------------------------------------------------------------------------


@app.responder
class HomeResponder(Responder):
    def call(self):
        return self.ok(message="Welcome to flashapi!", version=flashapi.__version__)


@app.responder
class UsersResponder(Responder):
    def call(self):
        with _lock:
            users = sorted(_users.values(), key=lambda u: u["id"])
        return self.ok(users=users, count=len(users))


@app.responder
class CreateUserResponder(Responder):
    def call(self):
        global _next_id
        name = self.params.get("name")
        email = self.params.get("email")
        if not isinstance(name, str) or not isinstance(email, str):
            return self.unprocessable_entity(
                {
                    "name": None if name else "is required",
                    "email": None if email else "is required",
                }
            )
        with _lock:
            user = {
                "id": _next_id,
                "name": name,
                "email": email,
                "created_at": datetime.now(UTC).isoformat(),
            }
            _users[_next_id] = user
            _next_id += 1
        return self.created(user=user)


@app.responder
class UserResponder(Responder):
    def call(self):
        user_id = _user_id(self.params)
        with _lock:
            user = _users.get(user_id) if user_id is not None else None
        if user is None:
            return self.not_found(f"User with id {self.params.get('id')} not found")
        return self.ok(user=user)


@app.responder
class UpdateUserResponder(Responder):
    def call(self):
        user_id = _user_id(self.params)
        changes = {k: self.params[k] for k in ("name", "email") if isinstance(self.params.get(k), str)}
        with _lock:
            user = _users.get(user_id) if user_id is not None else None
            if user is None:
                return self.not_found(f"User with id {self.params.get('id')} not found")
            if not changes:
                return self.bad_request("Invalid update parameters")
            user.update(changes, updated_at=datetime.now(UTC).isoformat())
        return self.ok(user=user)


@app.responder
class DeleteUserResponder(Responder):
    def call(self):
        user_id = _user_id(self.params)
        with _lock:
            if user_id is None or _users.pop(user_id, None) is None:
                return self.not_found(f"User with id {self.params.get('id')} not found")
        return self.no_content()


if __name__ == "__main__":
    adapter = sys.argv[1] if len(sys.argv) > 1 else "asgi"
    port = int(sys.argv[2]) if len(sys.argv) > 2 else 3000
    try:
        flashapi.start(app, adapter, port=port)
    except AdapterNotFound as exc:
        print(f"Error: {exc}")
        print("Usage: python app.py [adapter] [port]")
