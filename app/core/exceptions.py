from typing import Optional

from fastapi import HTTPException

FRIENDLY_MESSAGES = {
    "AUTH_INVALID_CREDENTIALS": "Invalid email or password. Please try again.",
    "AUTH_MISSING_JWT_SECRET": "Authentication configuration error. Please contact support.",
    "AUTH_INSUFFICIENT_PERMISSIONS": "You do not have permission to perform this action.",
    "USER_NOT_FOUND": "User not found.",
    "DATABASE_QUERY_FAILED": "Database error. Please try again later.",
    "GROUP_NOT_FOUND": "Group not found.",
    "GROUP_NOT_MEMBER": "You are not a member of this group.",
    "EXPENSE_NOT_FOUND": "Expense not found.",
}

STATUS_MESSAGES = {
    401: "Your session has expired. Please log in again.",
    403: "You do not have permission to access this resource.",
    404: "The requested resource was not found.",
    500: "Server error. Please try again later.",
    503: "Cannot connect to server. Please check your connection.",
}


class ExpensesApiError(Exception):
    """A failed call to the expenses API, already reduced to code and message."""

    def __init__(self, status_code: int, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code

    def friendly_message(self) -> str:
        # validation messages from upstream are already meant for users
        if self.code and self.code.startswith("VALIDATION_"):
            return self.message
        if self.code in FRIENDLY_MESSAGES:
            return FRIENDLY_MESSAGES[self.code]
        if self.status_code in STATUS_MESSAGES:
            return STATUS_MESSAGES[self.status_code]
        return self.message or "An unexpected error occurred."

    def to_http(self) -> HTTPException:
        status = self.status_code
        # upstream breaking is our gateway problem, not an internal error
        if status >= 500 and status != 503:
            status = 502
        return HTTPException(status, self.friendly_message())
