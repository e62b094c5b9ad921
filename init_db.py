#!/usr/bin/env python3
"""Initialize the database for the Customer Images API"""

import argparse
import asyncio

from app.db.database import Base, engine, init_db


async def init_database(reset: bool = False):
    """Create all database tables, optionally dropping them first"""
    if reset:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    await init_db()
    await engine.dispose()
    print("✅ Database tables created successfully!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="drop existing tables first")
    args = parser.parse_args()
    asyncio.run(init_database(reset=args.reset))
