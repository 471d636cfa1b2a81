"""
User service — registration and listing for the User aggregate.

Password hashes are written here and never leave this module: every
serialiser below builds its dict field by field.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions import ValidationError
from app.models import User
from app.schemas import UserCreate
from app.security import hash_password

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _blog_summary_to_dict(blog) -> dict:
    """
    Serialise a Blog for embedding inside a user.

    The owner is intentionally omitted to avoid circular nesting.
    """
    return {
        "id": blog.id,
        "title": blog.title,
        "author": blog.author,
        "url": blog.url,
        "likes": blog.likes,
    }


def _user_to_dict(user: User, blogs: list | None = None) -> dict:
    return {
        "id": user.id,
        "username": user.username,
        "name": user.name,
        "blogs": [_blog_summary_to_dict(b) for b in (blogs or [])],
    }


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def get_users(db: AsyncSession) -> list[dict]:
    """
    Return all users, oldest first, each with a summary of their blogs.

    ``selectinload`` issues a single additional query for every user's
    blogs rather than one per user.
    """
    q = select(User).options(selectinload(User.blogs)).order_by(User.created_at, User.id)
    result = await db.execute(q)
    return [_user_to_dict(u, u.blogs) for u in result.scalars().all()]


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, data: UserCreate) -> dict:
    """
    Register a new user and return its serialised dict.

    Raises ``ValidationError`` when the username is already taken.  The
    unique constraint still backs this check; the router turns the
    ``IntegrityError`` from a lost race into the same 400.
    """
    if await get_user_by_username(db, data.username) is not None:
        raise ValidationError("expected `username` to be unique")

    user = User(
        username=data.username,
        name=data.name,
        password_hash=hash_password(data.password),
    )
    db.add(user)
    await db.flush()

    logger.info("Registered user %s (%s)", user.username, user.id)
    return _user_to_dict(user)
