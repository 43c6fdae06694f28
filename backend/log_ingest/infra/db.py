import logging
import certifi
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi
from .settings import Settings

logger = logging.getLogger(__name__)

LOGS_COLLECTION = "logs"

def client_options(s: Settings) -> dict:
    kwargs = {
        "server_api": ServerApi("1"),
        "serverSelectionTimeoutMS": s.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    }
    if s.MONGODB_URI.startswith("mongodb+srv://"):
        # Atlas → CA bundle di certifi
        kwargs["tlsCAFile"] = certifi.where()
    return kwargs

def connect(s: Settings) -> Database:
    """Un solo client per processo; la connessione vera avviene alla prima operazione."""
    try:
        client = MongoClient(s.MONGODB_URI, **client_options(s))
    except PyMongoError as e:
        logger.critical("Invalid MongoDB configuration: %s", e)
        raise SystemExit(1)
    return client[s.MONGODB_NAME]

def logs_collection(db: Database) -> Collection:
    return db[LOGS_COLLECTION]
