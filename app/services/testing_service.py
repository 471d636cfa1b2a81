import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Blog, User

logger = logging.getLogger(__name__)


async def reset(db: AsyncSession) -> None:
    """Delete every blog and user.  Blogs go first so no row is orphaned."""
    blogs = await db.execute(delete(Blog))
    users = await db.execute(delete(User))
    logger.info("Testing reset removed %d blogs and %d users", blogs.rowcount, users.rowcount)
