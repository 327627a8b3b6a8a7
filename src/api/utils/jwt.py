from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def create_operator_token(
    uid: str, email: str, role: str, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create an operator access token

    Args:
        uid: Operator's auth identity uid
        email: Operator's email
        role: Operator role (super_admin, admin_owner, customer)
        expires_delta: Token lifetime, JWT_EXPIRE_MINUTES when omitted

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=ApplicationConfig.JWT_EXPIRE_MINUTES)
    payload = {
        "uid": uid,
        "email": email,
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
