"""
Canonical fixture data: two users sharing one password and six blogs
with no owner.  Loaded by ``scripts/seed.py`` and by the test suite.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Blog, User
from app.security import hash_password

FIXTURE_PASSWORD = "sekret"
FIXTURE_USERNAMES = ("root", "root2")

INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
    },
    {
        "title": "First class tests",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
        "likes": 10,
    },
    {
        "title": "TDD harms architecture",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
        "likes": 0,
    },
    {
        "title": "Type wars",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
        "likes": 2,
    },
]


async def load_fixtures(session: AsyncSession) -> tuple[list[User], list[Blog]]:
    """Add the fixture users and blogs to *session* and flush."""
    # One hash for both users, bcrypt is deliberately slow.
    password_hash = hash_password(FIXTURE_PASSWORD)
    users = [User(username=username, password_hash=password_hash) for username in FIXTURE_USERNAMES]
    session.add_all(users)
    await session.flush()

    blogs = [Blog(**data) for data in INITIAL_BLOGS]
    session.add_all(blogs)
    await session.flush()
    return users, blogs
