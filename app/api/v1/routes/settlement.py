from typing import List

from fastapi import APIRouter, Depends

from app.core.dependencies import load_snapshot
from app.schemas.balances import Balance, GroupSettlementsOut
from app.services.settlement_service import suggest_settlements

router = APIRouter()


@router.get("/{group_id}/settlements", response_model=GroupSettlementsOut)
async def group_settlements(group_id: str, balances: List[Balance] = Depends(load_snapshot)):
    return GroupSettlementsOut(group_id=group_id, settlements=suggest_settlements(balances))
