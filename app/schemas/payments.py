from enum import Enum
from typing import Optional

from pydantic import BaseModel


class PaymentIntent(BaseModel):
    # defaults keep a half-filled form a rejection rather than a 422
    to_user_id: str = ""
    amount: float = 0.0


class PaymentRejection(str, Enum):
    NO_CURRENT_USER_BALANCE = "NoCurrentUserBalance"
    NO_RECIPIENT_CREDIT_BALANCE = "NoRecipientCreditBalance"
    INVALID_INTENT = "InvalidIntent"
    EXCEEDS_PAYABLE_LIMIT = "ExceedsPayableLimit"


class PaymentValidation(BaseModel):
    admissible: bool
    reason: Optional[PaymentRejection] = None
    message: Optional[str] = None
    max_payable: float = 0.0


class MaxPayableOut(BaseModel):
    group_id: str
    to_user_id: str
    max_payable: float
