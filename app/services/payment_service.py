import logging
from typing import List, Optional

from app.core.utils import is_finite, is_negative, is_positive, round2
from app.schemas.balances import Balance
from app.schemas.payments import PaymentIntent, PaymentRejection, PaymentValidation
from app.services.balance_service import find_balance, positives

logger = logging.getLogger("splito.payments")

REJECTION_MESSAGES = {
    PaymentRejection.NO_CURRENT_USER_BALANCE: "Only members who owe money (negative balance) can record payments.",
    PaymentRejection.NO_RECIPIENT_CREDIT_BALANCE: "You can only pay members who are owed money (positive balance).",
    PaymentRejection.INVALID_INTENT: "Please select a user and enter a valid amount",
}


def _max_between(debtor: Balance, creditor: Balance) -> float:
    return round2(min(abs(debtor.balance), creditor.balance))


def _reject(reason: PaymentRejection, message: Optional[str] = None, max_payable: float = 0.0):
    logger.info("Payment rejected: %s", reason.value)
    return PaymentValidation(
        admissible=False,
        reason=reason,
        message=message or REJECTION_MESSAGES[reason],
        max_payable=max_payable,
    )


def can_record_payment(acting_user_id: Optional[str], balances: List[Balance]) -> bool:
    current = find_balance(balances, acting_user_id)
    return current is not None and is_negative(current.balance)


def payable_recipients(balances: List[Balance]) -> List[Balance]:
    return positives(balances)


def max_payable_for(
    acting_user_id: Optional[str], recipient_id: Optional[str], balances: List[Balance]
) -> float:
    """
    Largest amount the acting user may currently pay the recipient.

    Returns 0 unless the acting user is a debtor and the recipient a creditor.
    """
    current = find_balance(balances, acting_user_id)
    recipient = find_balance(balances, recipient_id)

    if current is None or not is_negative(current.balance):
        return 0.0
    if recipient is None or not is_positive(recipient.balance):
        return 0.0

    return _max_between(current, recipient)


def validate_payment(
    acting_user_id: Optional[str], balances: List[Balance], intent: PaymentIntent
) -> PaymentValidation:
    """
    Decide whether the acting user may record ``intent``.

    Checks run in a fixed order and the first failure is reported. Nothing
    here touches the balances; after a successful submission the caller
    refreshes the snapshot from source.
    """
    current = find_balance(balances, acting_user_id)
    if current is None or not is_negative(current.balance):
        return _reject(PaymentRejection.NO_CURRENT_USER_BALANCE)

    recipient = find_balance(balances, intent.to_user_id)
    if recipient is None or not is_positive(recipient.balance):
        return _reject(PaymentRejection.NO_RECIPIENT_CREDIT_BALANCE)

    if not intent.to_user_id or not is_finite(intent.amount) or intent.amount <= 0:
        return _reject(PaymentRejection.INVALID_INTENT)

    max_payable = _max_between(current, recipient)

    # both sides sit on the cent grid here, so one cent over is already too much
    if round2(intent.amount) > max_payable:
        return _reject(
            PaymentRejection.EXCEEDS_PAYABLE_LIMIT,
            f"You cannot pay more than {max_payable:.2f} (your debt amount).",
            max_payable,
        )

    return PaymentValidation(admissible=True, max_payable=max_payable)
