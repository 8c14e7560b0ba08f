from dataclasses import dataclass

from fastapi import Request

from app.core.security import decode_token, get_bearer_token, user_from_claims
from app.schemas.user import CurrentUser


@dataclass(frozen=True)
class SessionContext:
    """Who is acting, and the token to act upstream with."""

    user: CurrentUser
    token: str

    @property
    def user_id(self) -> str:
        return self.user.id


class BearerSessionProvider:
    """Builds a session from the request's bearer token."""

    def __call__(self, request: Request) -> SessionContext:
        token = get_bearer_token(request)
        payload = decode_token(token)
        return SessionContext(user=user_from_claims(payload), token=token)
