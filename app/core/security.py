from fastapi import HTTPException, Request
from jose import jwt

from app.core.config import get_settings
from app.schemas.user import CurrentUser


def get_bearer_token(request: Request) -> str:
    auth = request.headers.get("Authorization")
    if not auth or not auth.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing token")
    return auth.split(" ")[1]


def decode_token(token: str) -> dict:
    """
    Verify a token issued by the expenses API.

    Claims carry the user inline (user_id, email, username, is_admin) next
    to the usual exp, so no user lookup is needed afterwards.
    """
    settings = get_settings()

    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGO])
    except jwt.ExpiredSignatureError:
        raise HTTPException(401, "Token expired")
    except jwt.JWTError:
        raise HTTPException(401, "Invalid token")


def user_from_claims(payload: dict) -> CurrentUser:
    user_id = payload.get("user_id")

    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid authentication credentials")

    return CurrentUser(
        id=str(user_id),
        email=payload.get("email", ""),
        username=payload.get("username", ""),
        is_admin=bool(payload.get("is_admin", False)),
    )
