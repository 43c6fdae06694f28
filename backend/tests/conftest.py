import os
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError
from pymongo.results import InsertOneResult
from log_ingest.app import create_app
from log_ingest.controllers.log_controller import LogController
from log_ingest.infra import settings as settings_mod

ENV_KEYS = ["MONGODB_URI", "MONGODB_NAME", "ENVIRONMENT", "EXPOSE_ERROR_DETAILS", "LOG_LEVEL"]

class FakeLogs:
    """Collection in memoria: registra i documenti come li riceverebbe Mongo."""
    name = "logs"

    def __init__(self):
        self.docs = []

    def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return InsertOneResult(doc["_id"], acknowledged=True)

class DownLogs:
    name = "logs"

    def __init__(self, message="localhost:27017: [Errno 111] Connection refused"):
        self.message = message
        self.calls = 0

    def insert_one(self, doc):
        self.calls += 1
        raise ServerSelectionTimeoutError(self.message)

@pytest.fixture
def logs():
    return FakeLogs()

@pytest.fixture
def controller(logs):
    return LogController(logs)

@pytest.fixture
def client(controller):
    return TestClient(create_app(controller))

@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for k in ENV_KEYS:
        monkeypatch.delenv(k, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings_mod, "_settings", None)
    yield
    # load_dotenv scrive in os.environ: ripulisci prima del restore di monkeypatch
    for k in ENV_KEYS:
        os.environ.pop(k, None)
