from typing import Iterable, List, Optional

from app.core.utils import is_negative, is_positive, is_zero
from app.schemas.balances import Balance, BalancePartition


def positives(balances: Iterable[Balance]) -> List[Balance]:
    """Members who are owed money."""
    return [b for b in balances if is_positive(b.balance)]


def negatives(balances: Iterable[Balance]) -> List[Balance]:
    """Members who owe money."""
    return [b for b in balances if is_negative(b.balance)]


def zeros(balances: Iterable[Balance]) -> List[Balance]:
    return [b for b in balances if is_zero(b.balance)]


def classify(balances: List[Balance]) -> BalancePartition:
    return BalancePartition(
        creditors=positives(balances),
        debtors=negatives(balances),
        settled=zeros(balances),
    )


def find_balance(balances: Iterable[Balance], user_id: Optional[str]) -> Optional[Balance]:
    if not user_id:
        return None

    for b in balances:
        if b.user_id == user_id:
            return b

    return None
