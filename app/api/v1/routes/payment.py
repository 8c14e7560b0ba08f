import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.core.dependencies import get_expenses_client, get_session, get_snapshot_store, load_snapshot
from app.core.exceptions import ExpensesApiError
from app.core.session import SessionContext
from app.schemas.balances import Balance, GroupBalancesOut
from app.schemas.payments import MaxPayableOut, PaymentIntent, PaymentValidation
from app.api.v1.routes.balance import balances_out
from app.services.expenses_client import ExpensesClient
from app.services.payment_service import max_payable_for, validate_payment
from app.services.snapshot_store import SnapshotStore

logger = logging.getLogger("splito.payments")

router = APIRouter()


@router.get("/{group_id}/payments/max", response_model=MaxPayableOut)
async def max_payable(
    group_id: str,
    to_user_id: str = "",
    balances: List[Balance] = Depends(load_snapshot),
    session: SessionContext = Depends(get_session),
):
    return MaxPayableOut(
        group_id=group_id,
        to_user_id=to_user_id,
        max_payable=max_payable_for(session.user_id, to_user_id, balances),
    )


@router.post("/{group_id}/payments/validate", response_model=PaymentValidation)
async def check_payment(
    group_id: str,
    intent: PaymentIntent,
    balances: List[Balance] = Depends(load_snapshot),
    session: SessionContext = Depends(get_session),
):
    return validate_payment(session.user_id, balances, intent)


@router.post("/{group_id}/payments", response_model=GroupBalancesOut, status_code=201)
async def record_payment(
    group_id: str,
    intent: PaymentIntent,
    balances: List[Balance] = Depends(load_snapshot),
    session: SessionContext = Depends(get_session),
    client: ExpensesClient = Depends(get_expenses_client),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    result = validate_payment(session.user_id, balances, intent)

    if not result.admissible:
        raise HTTPException(400, {"code": result.reason.value, "message": result.message})

    try:
        await client.record_payment(group_id, intent, session.token)
    except ExpensesApiError as e:
        raise e.to_http()

    logger.info(
        "Payment recorded | group=%s from=%s to=%s amount=%.2f",
        group_id, session.user_id, intent.to_user_id, intent.amount,
    )

    # the payment is stored upstream from here on, whatever the refresh does
    try:
        fresh = await store.refresh(group_id, session.token)
    except ExpensesApiError as e:
        logger.warning(
            "Payment recorded but balance refresh failed | group=%s status=%s",
            group_id, e.status_code,
        )
        return balances_out(group_id, balances, session.user_id, stale=True)

    return balances_out(group_id, fresh, session.user_id)
