import logging
from typing import List

from app.core.utils import EPSILON, is_negative, is_positive, round2
from app.schemas.balances import Balance, SettlementSuggestion
from app.services.balance_service import negatives, positives

logger = logging.getLogger("splito.settlements")


def suggest_settlements(balances: List[Balance]) -> List[SettlementSuggestion]:
    """
    Greedy left-to-right fill: every debtor, in snapshot order, pays the
    creditors in snapshot order until one side runs out.

    Not a minimum-transaction solution. The pairing order is part of the
    result, so balances are never re-sorted.
    """
    # Step 1: working copies, the snapshot itself stays untouched
    debtors = [[b, b.balance] for b in negatives(balances)]
    creditors = [[b, b.balance] for b in positives(balances)]

    # Step 2: debtor-major, creditor-minor scan
    suggestions: List[SettlementSuggestion] = []

    for debtor in debtors:
        for creditor in creditors:
            if not (is_negative(debtor[1]) and is_positive(creditor[1])):
                continue

            amount = round2(min(abs(debtor[1]), creditor[1]))

            if is_positive(amount):
                suggestions.append(
                    SettlementSuggestion(from_=debtor[0], to=creditor[0], amount=amount)
                )
                debtor[1] += amount
                creditor[1] -= amount

    # Step 3: anything left over means the snapshot did not sum to zero
    residual_debt = sum(abs(d[1]) for d in debtors if is_negative(d[1]))
    residual_credit = sum(c[1] for c in creditors if is_positive(c[1]))

    if residual_debt > EPSILON or residual_credit > EPSILON:
        logger.warning(
            "Unmatched balance after settlement scan: debt=%.2f credit=%.2f",
            residual_debt,
            residual_credit,
        )

    return suggestions
