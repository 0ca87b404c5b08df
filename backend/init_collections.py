#!/usr/bin/env python3
"""
Create the unique indexes on the Users and Teams collections.

The API does the same on startup; run this to prepare a database ahead of a
deployment.
"""
import asyncio
from dotenv import load_dotenv
load_dotenv()

from motor.motor_asyncio import AsyncIOMotorClient
from teamdesk.config import settings
from teamdesk.db import prepare_store


async def init_collections():
    client = AsyncIOMotorClient(settings.MONGODB_URI, serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS)
    db = client.get_default_database(settings.MONGODB_DB)

    print(f"Preparing collections in {db.name}...")
    try:
        await prepare_store(db)

        for collection in ("Users", "Teams"):
            print(f"\nIndexes on {collection}:")
            async for index in db[collection].list_indexes():
                print(f"   - {index['name']}: {dict(index['key'])}")
    finally:
        client.close()

    print("\nCollections initialized successfully!")

if __name__ == "__main__":
    asyncio.run(init_collections())
