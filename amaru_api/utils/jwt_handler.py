from datetime import datetime, timedelta
from typing import Optional
import logging
from jose import JWTError, jwt
from ..config import settings

# Log via the uvicorn.error logger so messages appear in the uvicorn output
logger = logging.getLogger("uvicorn.error")


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT with an expiration.

    ``data`` usually carries ``sub`` (user id) and ``tipo`` (``admin`` or
    ``sin_password``), which tells ``get_current_user`` which table to look in.
    """
    to_encode = data.copy()
    # jose expects the subject as a string
    if to_encode.get("sub") is not None:
        to_encode["sub"] = str(to_encode["sub"])
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Decode a JWT token and return the payload or None on failure."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        # never log the token itself
        logger.warning("JWT decode error: %s", str(e))
        return None
