"""
Auth service — credential checks and token issuance for ``POST /api/login``.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import AuthenticationError
from app.schemas import LoginRequest
from app.security import create_access_token, verify_password
from app.services.user_service import get_user_by_username

logger = logging.getLogger(__name__)


async def login(db: AsyncSession, data: LoginRequest) -> dict:
    """
    Verify *data* against the stored hash and return a signed token.

    Unknown usernames and wrong passwords produce the same error so the
    response does not reveal which accounts exist.
    """
    user = await get_user_by_username(db, data.username)
    if user is None or not verify_password(data.password, user.password_hash):
        logger.warning("Failed login for username %r", data.username)
        raise AuthenticationError("invalid username or password")

    token = create_access_token(user.username, user.id)
    logger.info("User %s logged in", user.username)
    return {
        "token": token,
        "username": user.username,
        "name": user.name,
        "id": user.id,
    }
