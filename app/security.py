from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.config import settings
from app.exceptions import AuthenticationError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


def create_access_token(username: str, user_id: str, expires_delta: timedelta | None = None) -> str:
    """
    Sign a token identifying *username* / *user_id*.

    The ``exp`` claim defaults to ``ACCESS_TOKEN_EXPIRE_MINUTES`` from now.
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    claims = {"username": username, "id": user_id, "exp": expire}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Verify *token* and return its claims.

    Raises ``AuthenticationError`` when the signature is bad, the token has
    expired, or the claims do not carry a user id.
    """
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise AuthenticationError("token expired")
    except JWTError:
        raise AuthenticationError("token invalid")

    if not claims.get("id"):
        raise AuthenticationError("token invalid")
    return claims
