from pydantic import BaseModel, ConfigDict, Field
from typing import List


class Balance(BaseModel):
    user_id: str
    username: str = ""
    balance: float = 0.0


class BalancePartition(BaseModel):
    creditors: List[Balance]
    debtors: List[Balance]
    settled: List[Balance]


class SettlementSuggestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: Balance = Field(alias="from")
    to: Balance
    amount: float


class GroupBalancesOut(BaseModel):
    group_id: str
    balances: List[Balance]
    partition: BalancePartition
    can_record_payment: bool = False
    payable_recipients: List[Balance] = []
    # set when the balances predate a payment that was just recorded
    stale: bool = False


class GroupSettlementsOut(BaseModel):
    group_id: str
    settlements: List[SettlementSuggestion]
