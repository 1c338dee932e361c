# config/dataBase.py
import os
import logging
from pymongo import MongoClient
from pymongo.collection import Collection
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

MONGO_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/")
MONGO_DB = os.getenv("MONGODB_DATABASE", "dev")
MONGO_TIMEOUT_MS = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

TODO_COLLECTION = "todos"

# MongoClient connects lazily, so importing this module never blocks on the server
client = MongoClient(MONGO_URI, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)
db = client[MONGO_DB]


def ping():
    """Round-trip to the server; raises if it cannot be reached."""
    client.admin.command("ping")
    logger.info("Connected to MongoDB at %s (database %r)", MONGO_URI, MONGO_DB)


def get_todo_collection() -> Collection:
    return db[TODO_COLLECTION]
