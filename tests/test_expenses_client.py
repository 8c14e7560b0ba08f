import asyncio

import httpx
import pytest

from app.core.exceptions import ExpensesApiError
from app.schemas.payments import PaymentIntent
from app.services.expenses_client import ExpensesClient


def run(coro):
    return asyncio.run(coro)


def client_for(handler):
    return ExpensesClient("http://expenses.test/", transport=httpx.MockTransport(handler))


def test_get_group_balances_sends_token_and_parses_rows():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["auth"] = request.headers["Authorization"]
        return httpx.Response(200, json=[
            {"user_id": "a", "username": "ann", "balance": -12.5},
            {"user_id": "b", "username": "bob", "balance": 12.5},
        ])

    balances = run(client_for(handler).get_group_balances("g1", "tok"))

    assert seen == {"path": "/groups/g1/balances", "auth": "Bearer tok"}
    assert [(b.user_id, b.username, b.balance) for b in balances] == [
        ("a", "ann", -12.5),
        ("b", "bob", 12.5),
    ]


def test_record_payment_posts_the_intent():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = request.content
        return httpx.Response(200, json={"message": "Payment recorded"})

    body = run(client_for(handler).record_payment("g1", PaymentIntent(to_user_id="b", amount=10), "tok"))

    assert body == {"message": "Payment recorded"}
    assert seen["method"] == "POST"
    assert seen["path"] == "/groups/g1/payments"
    assert b'"to_user_id":"b"' in seen["body"].replace(b" ", b"")


def test_upstream_error_keeps_status_and_message():
    def handler(request):
        return httpx.Response(403, json={"error": "Not a group member"})

    with pytest.raises(ExpensesApiError) as exc:
        run(client_for(handler).get_group_balances("g1", "tok"))

    assert exc.value.status_code == 403
    assert exc.value.message == "Not a group member"
    assert exc.value.friendly_message() == "You do not have permission to access this resource."


def test_upstream_error_code_maps_to_friendly_message():
    def handler(request):
        return httpx.Response(403, json={"code": "GROUP_NOT_MEMBER", "message": "User is not a member"})

    with pytest.raises(ExpensesApiError) as exc:
        run(client_for(handler).get_group_balances("g1", "tok"))

    assert exc.value.code == "GROUP_NOT_MEMBER"
    assert exc.value.friendly_message() == "You are not a member of this group."


def test_non_json_server_error_becomes_bad_gateway():
    def handler(request):
        return httpx.Response(500, text="boom")

    with pytest.raises(ExpensesApiError) as exc:
        run(client_for(handler).get_group_balances("g1", "tok"))

    assert exc.value.status_code == 500
    assert exc.value.to_http().status_code == 502


def test_unreachable_upstream_is_service_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ExpensesApiError) as exc:
        run(client_for(handler).get_group_balances("g1", "tok"))

    assert exc.value.status_code == 503
    assert exc.value.to_http().status_code == 503


def test_validation_messages_pass_through():
    err = ExpensesApiError(400, "payment amount must be greater than 0", "VALIDATION_INVALID_FORMAT")

    assert err.friendly_message() == "payment amount must be greater than 0"


def test_check_health():
    up = client_for(lambda request: httpx.Response(200, text="OK"))
    down = client_for(lambda request: httpx.Response(503))

    assert run(up.check_health()) is True
    assert run(down.check_health()) is False
