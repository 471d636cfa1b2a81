"""
Blog service — business logic for the Blog aggregate.

Design notes
------------
- The owning user is always eager-loaded with ``selectinload`` so the
  embedded ``user`` object never triggers a lazy load (relationships are
  declared ``lazy="raise"``).
- Creation and deletion require an authenticated ``User``; the router
  resolves it through ``get_current_user``.  Deletion additionally checks
  ownership.  Updates do not.
- Service functions flush but do not commit; the transaction boundary
  is owned by the ``get_db`` dependency in the router layer.
"""
import logging
import re

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions import AuthorizationError, MalformedIdError, NotFoundError, ValidationError
from app.models import Blog, User
from app.schemas import BlogCreate, BlogUpdate

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"[0-9a-fA-F]{32}")

# Columns that may be changed but never cleared.
_NON_NULLABLE_FIELDS: frozenset[str] = frozenset({"title", "url", "likes"})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def parse_id(value: str) -> str:
    """Return *value* normalised to lowercase, or raise ``MalformedIdError``."""
    if not _ID_RE.fullmatch(value):
        raise MalformedIdError(value)
    return value.lower()


def _serialize_owner(user: User | None) -> dict | None:
    if user is None:
        return None
    return {"id": user.id, "username": user.username, "name": user.name}


def _blog_to_dict(blog: Blog) -> dict:
    return {
        "id": blog.id,
        "title": blog.title,
        "author": blog.author,
        "url": blog.url,
        "likes": blog.likes,
        "user": _serialize_owner(blog.user),
    }


async def _load_blog(db: AsyncSession, blog_id: str) -> Blog:
    q = (
        select(Blog)
        .where(Blog.id == parse_id(blog_id))
        .options(selectinload(Blog.user))
    )
    result = await db.execute(q)
    blog = result.scalar_one_or_none()
    if blog is None:
        raise NotFoundError("blog", blog_id)
    return blog


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def get_blogs(db: AsyncSession) -> list[dict]:
    """Return every blog, oldest first, each with its owner embedded."""
    q = select(Blog).options(selectinload(Blog.user)).order_by(Blog.created_at, Blog.id)
    result = await db.execute(q)
    return [_blog_to_dict(b) for b in result.scalars().all()]


async def get_blog(db: AsyncSession, blog_id: str) -> dict:
    return _blog_to_dict(await _load_blog(db, blog_id))


async def count_blogs(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(Blog))
    return result.scalar_one()


async def create_blog(db: AsyncSession, data: BlogCreate, owner: User) -> dict:
    """
    Persist a new blog owned by *owner* and return it.

    ``likes`` falls back to 0 through the schema default.
    """
    blog = Blog(
        title=data.title,
        author=data.author,
        url=data.url,
        likes=data.likes,
    )
    blog.user = owner
    db.add(blog)
    await db.flush()

    logger.info("User %s created blog %s (%r)", owner.username, blog.id, blog.title)
    return _blog_to_dict(blog)


async def update_blog(db: AsyncSession, blog_id: str, data: BlogUpdate) -> dict:
    """
    Apply the fields present in *data* to the blog and return it.

    Only fields explicitly set in the request payload are modified
    (``model_dump(exclude_unset=True)``).  ``title``, ``url`` and ``likes``
    may be changed but not cleared.
    """
    blog = await _load_blog(db, blog_id)

    update_data = data.model_dump(exclude_unset=True)
    for field in _NON_NULLABLE_FIELDS:
        if field in update_data and update_data[field] is None:
            raise ValidationError(f"{field} must not be null")

    for field, value in update_data.items():
        setattr(blog, field, value)

    await db.flush()
    return _blog_to_dict(blog)


async def delete_blog(db: AsyncSession, blog_id: str, requester: User) -> None:
    """
    Delete the blog identified by *blog_id* on behalf of *requester*.

    Raises ``NotFoundError`` when the blog does not exist and
    ``AuthorizationError`` when *requester* is not its owner.
    """
    blog = await _load_blog(db, blog_id)
    if blog.user_id != requester.id:
        logger.warning(
            "User %s attempted to delete blog %s owned by %s",
            requester.username, blog.id, blog.user_id,
        )
        raise AuthorizationError("only the creator can delete a blog")

    await db.delete(blog)
    await db.flush()
    logger.info("User %s deleted blog %s", requester.username, blog.id)
