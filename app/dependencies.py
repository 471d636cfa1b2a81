import logging

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import AuthenticationError
from app.models import User
from app.security import decode_access_token

logger = logging.getLogger(__name__)

# auto_error=False so a missing header surfaces as our own 401 body.
bearer_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


async def get_current_user(
    token: str | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Resolve the ``Authorization: bearer <token>`` header to a ``User``.

    The scheme name is matched case-insensitively.  The token's user must
    still exist; a well-signed token for a removed account is rejected the
    same way as a forged one.
    """
    if not token:
        raise AuthenticationError("token missing")

    claims = decode_access_token(token)
    user = await db.get(User, claims["id"])
    if user is None:
        logger.warning("Token presented for unknown user id %s", claims["id"])
        raise AuthenticationError("token invalid")
    return user
