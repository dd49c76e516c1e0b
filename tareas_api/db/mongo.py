"""MongoDB client, collections and indexes."""

import logging

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from tareas_api.config import Settings

TASKS_COLLECTION = "tareas"
USERS_COLLECTION = "usuarios"

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> MongoClient:
    """Connect and ping; raises if the server is unreachable."""
    client: MongoClient = MongoClient(
        settings.mongodb_uri,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )
    client.admin.command("ping")
    logger.info("Connected to MongoDB (db=%s)", settings.mongodb_db)
    return client


def ensure_indexes(db: Database) -> None:
    """Unique email backs the duplicate-registration check against races."""
    users = get_users_collection(db)
    users.create_index([("email", ASCENDING)], unique=True, name="email_unique")
    users.create_index([("reset_token", ASCENDING)], name="reset_token")


def get_tasks_collection(db: Database) -> Collection:
    return db[TASKS_COLLECTION]


def get_users_collection(db: Database) -> Collection:
    return db[USERS_COLLECTION]
