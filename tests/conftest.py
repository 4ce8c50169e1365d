# File: tests/conftest.py

"""
Shared fixtures.

The storefront only talks to Supabase through `supabase.Client`, so the
tests swap in a small in-memory stand-in (`FakeSupabase`) through the
application factory's `client_factory` argument. All fake clients share
one `FakeBackend`, the way every browser shares one Supabase project.

To run:
    pytest -q
"""

import os
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

os.environ.setdefault("SUPABASE_URL", "https://fake.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "anon-test-key")
# TestClient talks plain http://testserver, which never sends Secure cookies back.
os.environ.setdefault("SESSION_COOKIE_SECURE", "false")

import pytest
from fastapi.testclient import TestClient
from supabase import AuthError, PostgrestAPIError, StorageException

from storefront.main import create_application

API = "/api/v1"


class FakeAuthError(AuthError):
    def __init__(self, message: str):
        Exception.__init__(self, message)
        self.message = message


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


class FakeBackend:
    """
    Shared state: tables, storage objects, registered users, and the set
    of operations that should fail, e.g. {("cart_items", "insert")}.
    """

    def __init__(self):
        self.tables: dict[str, list[dict]] = {
            "products": [],
            "cart_items": [],
            "profiles": [],
        }
        self.objects: dict[str, dict[str, bytes]] = {}
        self.users: dict[str, dict] = {}
        self.fail_on: set[tuple[str, str]] = set()
        self.calls: list[tuple[str, str]] = []
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def next_timestamp(self) -> str:
        self._clock += timedelta(minutes=1)
        return self._clock.isoformat()

    def add_user(self, email: str, password: str = "secret123", role: str | None = None) -> str:
        user_id = str(uuid.uuid4())
        self.users[email] = {
            "id": user_id,
            "password": password,
            "app_metadata": {"role": role} if role else {},
        }
        return user_id

    def add_product(
        self,
        name: str,
        price: float,
        category: str = "living room",
        image_url: str | None = None,
    ) -> dict:
        row = {
            "id": str(uuid.uuid4()),
            "name": name,
            "description": f"{name} description",
            "price": price,
            "category": category,
            "image_url": image_url,
            "created_at": self.next_timestamp(),
            "user_id": None,
        }
        self.tables["products"].append(row)
        return row

    def check(self, target: str, op: str) -> None:
        self.calls.append((target, op))
        if (target, op) in self.fail_on:
            raise PostgrestAPIError({"message": f"{op} on {target} failed", "code": "500"})


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Chainable subset of the PostgREST query builder."""

    def __init__(self, backend: FakeBackend, table: str):
        self.backend = backend
        self.table = table
        self.op = "select"
        self.columns = "*"
        self.values = None
        self.on_conflict = None
        self.filters: list[tuple[str, object]] = []
        self.order_by: tuple[str, bool] | None = None
        self.mode = "many"

    # builders
    def select(self, columns: str = "*"):
        self.op, self.columns = "select", columns
        return self

    def insert(self, values):
        self.op, self.values = "insert", values
        return self

    def update(self, values):
        self.op, self.values = "update", values
        return self

    def upsert(self, values, on_conflict: str = "id"):
        self.op, self.values, self.on_conflict = "upsert", values, on_conflict
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column: str, value):
        self.filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False):
        self.order_by = (column, desc)
        return self

    def single(self):
        self.mode = "single"
        return self

    def maybe_single(self):
        self.mode = "maybe_single"
        return self

    # execution
    @property
    def rows(self) -> list[dict]:
        return self.backend.tables[self.table]

    def _matches(self, row: dict) -> bool:
        return all(str(row.get(col)) == str(val) for col, val in self.filters)

    def _project(self, row: dict) -> dict:
        out = dict(row)
        if "product:products" in self.columns:
            product = next(
                p for p in self.backend.tables["products"] if p["id"] == row["product_id"]
            )
            out["product"] = {
                "name": product["name"],
                "price": product["price"],
                "image_url": product["image_url"],
            }
        return out

    def _new_row(self, values: dict) -> dict:
        row = {"id": str(uuid.uuid4()), "created_at": self.backend.next_timestamp()}
        if self.table == "cart_items":
            row["quantity"] = 1
        row.update(values)
        self.rows.append(row)
        return dict(row)

    def execute(self):
        self.backend.check(self.table, self.op)

        if self.op == "select":
            found = [self._project(r) for r in self.rows if self._matches(r)]
            if self.order_by:
                col, desc = self.order_by
                found.sort(key=lambda r: r[col], reverse=desc)
            if self.mode == "single":
                if len(found) != 1:
                    raise PostgrestAPIError(
                        {"message": "JSON object requested, multiple (or no) rows returned",
                         "code": "PGRST116"}
                    )
                return FakeResponse(found[0])
            if self.mode == "maybe_single":
                return FakeResponse(found[0]) if found else None
            return FakeResponse(found)

        if self.op == "insert":
            values = self.values if isinstance(self.values, list) else [self.values]
            return FakeResponse([self._new_row(v) for v in values])

        if self.op == "update":
            changed = []
            for row in self.rows:
                if self._matches(row):
                    row.update(self.values)
                    changed.append(dict(row))
            return FakeResponse(changed)

        if self.op == "delete":
            gone = [r for r in self.rows if self._matches(r)]
            self.backend.tables[self.table] = [r for r in self.rows if not self._matches(r)]
            return FakeResponse(gone)

        if self.op == "upsert":
            key = self.on_conflict
            for row in self.rows:
                if row.get(key) == self.values.get(key):
                    row.update(self.values)
                    return FakeResponse([dict(row)])
            return FakeResponse([self._new_row(self.values)])

        raise AssertionError(f"unsupported op {self.op}")


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class FakeBucket:
    def __init__(self, backend: FakeBackend, name: str):
        self.backend = backend
        self.name = name

    def _check(self, op: str):
        self.backend.calls.append((f"storage:{self.name}", op))
        if (f"storage:{self.name}", op) in self.backend.fail_on:
            raise StorageException({"message": f"{op} failed", "statusCode": 500})

    def upload(self, path: str, file: bytes, file_options=None):
        self._check("upload")
        self.backend.objects.setdefault(self.name, {})[path] = file
        return SimpleNamespace(path=path)

    def get_public_url(self, path: str) -> str:
        return f"https://fake.supabase.co/storage/v1/object/public/{self.name}/{path}"

    def remove(self, paths: list[str]):
        self._check("remove")
        objects = self.backend.objects.setdefault(self.name, {})
        for path in paths:
            objects.pop(path, None)
        return []


class FakeStorage:
    def __init__(self, backend: FakeBackend):
        self.backend = backend

    def from_(self, bucket: str) -> FakeBucket:
        return FakeBucket(self.backend, bucket)


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------


class FakeSubscription:
    def __init__(self, auth: "FakeAuth", callback):
        self.auth = auth
        self.callback = callback

    def unsubscribe(self):
        if self.callback in self.auth.callbacks:
            self.auth.callbacks.remove(self.callback)


class FakeAuth:
    """Per-client auth session, like the real client's in-memory storage."""

    def __init__(self, backend: FakeBackend):
        self.backend = backend
        self.session = None
        self.callbacks: list = []

    def _emit(self, event: str):
        for callback in list(self.callbacks):
            callback(event, self.session)

    def _session_for(self, email: str):
        record = self.backend.users[email]
        user = SimpleNamespace(
            id=record["id"],
            email=email,
            app_metadata=dict(record["app_metadata"]),
        )
        return SimpleNamespace(user=user, access_token=str(uuid.uuid4()))

    def get_session(self):
        return self.session

    def on_auth_state_change(self, callback):
        self.callbacks.append(callback)
        return FakeSubscription(self, callback)

    def sign_in_with_password(self, credentials: dict):
        record = self.backend.users.get(credentials["email"])
        if record is None or record["password"] != credentials["password"]:
            raise FakeAuthError("Invalid login credentials")
        self.session = self._session_for(credentials["email"])
        self._emit("SIGNED_IN")
        return SimpleNamespace(user=self.session.user, session=self.session)

    def sign_up(self, credentials: dict):
        if credentials["email"] in self.backend.users:
            raise FakeAuthError("User already registered")
        self.backend.add_user(credentials["email"], credentials["password"])
        self.session = self._session_for(credentials["email"])
        self._emit("SIGNED_IN")
        return SimpleNamespace(user=self.session.user, session=self.session)

    def sign_out(self):
        self.session = None
        self._emit("SIGNED_OUT")

    def refresh(self):
        """Simulate a token refresh: same user, new token."""
        self.session = SimpleNamespace(
            user=self.session.user, access_token=str(uuid.uuid4())
        )
        self._emit("TOKEN_REFRESHED")


class FakeSupabase:
    def __init__(self, backend: FakeBackend):
        self.backend = backend
        self.auth = FakeAuth(backend)
        self.storage = FakeStorage(backend)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self.backend, name)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def fake_client(backend) -> FakeSupabase:
    return FakeSupabase(backend)


@pytest.fixture
def client_factory(backend):
    """Builds a fresh fake client (one per visitor) on the shared backend."""
    return lambda: FakeSupabase(backend)


@pytest.fixture
def app(client_factory):
    return create_application(client_factory=client_factory)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def customer(backend) -> dict:
    email = "alice@example.com"
    return {"id": backend.add_user(email), "email": email, "password": "secret123"}


@pytest.fixture
def admin(backend) -> dict:
    email = "boss@example.com"
    return {
        "id": backend.add_user(email, role="admin"),
        "email": email,
        "password": "secret123",
    }


@pytest.fixture
def login_as(client):
    """Sign the test client in as the given account (follows the redirect)."""

    def _login(account: dict):
        return client.post(
            f"{API}/login",
            json={"email": account["email"], "password": account["password"]},
        )

    return _login


@pytest.fixture
def customer_client(client, customer, login_as) -> TestClient:
    resp = login_as(customer)
    assert resp.status_code == 200
    return client


@pytest.fixture
def admin_client(client, admin, login_as) -> TestClient:
    resp = login_as(admin)
    assert resp.status_code == 200
    return client
