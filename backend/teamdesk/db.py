from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from teamdesk.config import settings

USERS = "Users"
TEAMS = "Teams"
COUNTERS = "counters"
ACTIVITY_LOGS = "activity_logs"

# MongoDB Setup
client = None


def init_db(app):
    """Create the Motor client once and hang the database handle on the app."""
    global client
    client = AsyncIOMotorClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
    )
    app.state.db = client.get_default_database(settings.MONGODB_DB)


def get_db(request: Request):
    return request.app.state.db


async def prepare_store(db):
    """Create the unique indexes the record collections rely on."""
    await db[USERS].create_index("email", unique=True, name="email_unique")
    await db[USERS].create_index("id", unique=True, name="id_unique")
    await db[TEAMS].create_index("name", unique=True, name="name_unique")


def close_db():
    global client
    if client is not None:
        client.close()
        client = None
