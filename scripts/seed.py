"""Database seeder: recreate the tables and load the fixture users and blogs."""
import argparse
import asyncio
import time

from app.database import async_session, create_tables, drop_tables, engine
from app.fixtures import FIXTURE_PASSWORD, load_fixtures


async def seed(keep: bool = False):
    start = time.perf_counter()

    if not keep:
        await drop_tables()
    await create_tables()

    async with async_session() as session:
        users, blogs = await load_fixtures(session)
        await session.commit()

    await engine.dispose()

    elapsed = time.perf_counter() - start
    print(f"Seeding complete in {elapsed:.1f}s")
    print(f"  Users: {', '.join(u.username for u in users)} (password: {FIXTURE_PASSWORD})")
    print(f"  Blogs: {len(blogs)}")


def main():
    parser = argparse.ArgumentParser(description="Seed the bloglist database")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Do not drop existing tables first (fails if fixture usernames already exist)",
    )
    args = parser.parse_args()
    asyncio.run(seed(keep=args.keep))


if __name__ == "__main__":
    main()
