import logging
from typing import List

import httpx

from app.core.exceptions import ExpensesApiError
from app.schemas.balances import Balance
from app.schemas.payments import PaymentIntent

logger = logging.getLogger("splito.upstream")


class ExpensesClient:
    """
    Thin async client for the expenses API.

    It is the source of balance snapshots and the sink for recorded
    payments. Every call forwards the caller's bearer token; failures come
    back as ExpensesApiError.
    """

    def __init__(self, base_url: str, timeout: float = 3.0, transport=None):
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self):
        await self._client.aclose()

    @staticmethod
    def _auth(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            res = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException:
            logger.warning("Expenses API timed out | %s %s", method, url)
            raise ExpensesApiError(503, "Expenses API timed out")
        except httpx.TransportError as e:
            logger.warning("Expenses API unreachable | %s %s | %s", method, url, e)
            raise ExpensesApiError(503, "Expenses API unreachable")

        if res.is_error:
            err = self._error_from(res)
            logger.warning(
                "Expenses API error | %s %s -> %s %s", method, url, res.status_code, err.code
            )
            raise err

        return res

    @staticmethod
    def _error_from(res: httpx.Response) -> ExpensesApiError:
        try:
            body = res.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            message = body.get("message") or body.get("error") or res.reason_phrase
            return ExpensesApiError(res.status_code, message, body.get("code"))

        return ExpensesApiError(res.status_code, f"HTTP {res.status_code}: {res.reason_phrase}")

    async def get_group_balances(self, group_id: str, token: str) -> List[Balance]:
        res = await self._request("GET", f"/groups/{group_id}/balances", headers=self._auth(token))
        return [Balance(**row) for row in res.json()]

    async def record_payment(self, group_id: str, intent: PaymentIntent, token: str) -> dict:
        res = await self._request(
            "POST",
            f"/groups/{group_id}/payments",
            json=intent.model_dump(),
            headers=self._auth(token),
        )
        return res.json()

    async def check_health(self) -> bool:
        try:
            await self._request("GET", "/health")
        except ExpensesApiError:
            return False
        return True
