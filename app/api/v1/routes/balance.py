from typing import List

from fastapi import APIRouter, Depends

from app.core.dependencies import get_session, load_snapshot
from app.core.session import SessionContext
from app.schemas.balances import Balance, GroupBalancesOut
from app.services.balance_service import classify
from app.services.payment_service import can_record_payment, payable_recipients

router = APIRouter()


def balances_out(group_id: str, balances: List[Balance], user_id: str, stale: bool = False):
    return GroupBalancesOut(
        group_id=group_id,
        balances=balances,
        partition=classify(balances),
        can_record_payment=can_record_payment(user_id, balances),
        payable_recipients=payable_recipients(balances),
        stale=stale,
    )


@router.get("/{group_id}/balances", response_model=GroupBalancesOut)
async def group_balances(
    group_id: str,
    balances: List[Balance] = Depends(load_snapshot),
    session: SessionContext = Depends(get_session),
):
    return balances_out(group_id, balances, session.user_id)
