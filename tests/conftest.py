import json
import os

os.environ.setdefault("JWT_SECRET", "test-secret")

import httpx
import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.core.dependencies import get_expenses_client, get_snapshot_store
from app.main import app
from app.services.expenses_client import ExpensesClient
from app.services.snapshot_store import SnapshotStore
from factories import make_token


class FakeExpensesApi:
    """In-memory stand-in for the expenses API, served through httpx.MockTransport."""

    def __init__(self):
        self.groups = {}
        self.payments = []
        self.fail_payments_with = None
        self.balance_reads_left = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/health":
            return httpx.Response(200, text="OK")

        if not request.headers.get("Authorization", "").startswith("Bearer "):
            return httpx.Response(401, json={"error": "No auth header"})

        parts = request.url.path.strip("/").split("/")
        group_id, resource = parts[1], parts[2]

        if group_id not in self.groups:
            return httpx.Response(403, json={"error": "Not a group member"})

        if resource == "balances" and request.method == "GET":
            if self.balance_reads_left is not None:
                if self.balance_reads_left == 0:
                    return httpx.Response(503, json={"error": "busy"})
                self.balance_reads_left -= 1
            return httpx.Response(200, json=self.groups[group_id])

        if resource == "payments" and request.method == "POST":
            if self.fail_payments_with is not None:
                status, body = self.fail_payments_with
                return httpx.Response(status, json=body)
            token = request.headers["Authorization"].split(" ")[1]
            payer = jwt.get_unverified_claims(token)["user_id"]
            body = json.loads(request.content)
            self.payments.append((group_id, payer, body))
            for row in self.groups[group_id]:
                if row["user_id"] == payer:
                    row["balance"] += body["amount"]
                if row["user_id"] == body["to_user_id"]:
                    row["balance"] -= body["amount"]
            return httpx.Response(200, json={"message": "Payment recorded"})

        return httpx.Response(404, json={"error": "Not found"})


@pytest.fixture
def upstream():
    return FakeExpensesApi()


@pytest.fixture
def expenses_client(upstream):
    return ExpensesClient("http://expenses.test", transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def client(expenses_client):
    store = SnapshotStore(expenses_client)
    app.dependency_overrides[get_expenses_client] = lambda: expenses_client
    app.dependency_overrides[get_snapshot_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth():
    def _auth(user_id):
        return {"Authorization": f"Bearer {make_token(user_id)}"}
    return _auth
