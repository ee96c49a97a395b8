# utils/mongo.py

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from pymongo import MongoClient

DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_DB_NAME = "sedona"
DEFAULT_TIMEOUT_MS = 5000

SEED_MODES = ("insert", "upsert")


@dataclass(frozen=True)
class MongoSettings:
    uri: str = DEFAULT_MONGO_URI
    db_name: str = DEFAULT_DB_NAME
    server_timeout_ms: int = DEFAULT_TIMEOUT_MS
    seed_mode: str = "insert"


def load_settings() -> MongoSettings:
    """
    Build settings from .env + environment.
    Nothing is required; the defaults point at the local sedona database.
    """
    load_dotenv()

    raw_timeout = os.getenv("MONGO_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))
    try:
        timeout_ms = int(raw_timeout)
    except ValueError:
        raise RuntimeError(f"MONGO_TIMEOUT_MS must be an integer, got {raw_timeout!r}")

    seed_mode = os.getenv("SEED_MODE", "insert").strip().lower()
    if seed_mode not in SEED_MODES:
        raise RuntimeError(f"SEED_MODE must be one of {SEED_MODES}, got {seed_mode!r}")

    return MongoSettings(
        uri=os.getenv("MONGO_URI") or DEFAULT_MONGO_URI,
        db_name=os.getenv("MONGO_DB_NAME") or DEFAULT_DB_NAME,
        server_timeout_ms=timeout_ms,
        seed_mode=seed_mode,
    )


def get_client(settings: MongoSettings) -> MongoClient:
    """
    Connect and ping right away (MongoClient is lazy otherwise),
    so a dead server or bad credentials fail before any setup step.
    """
    client = MongoClient(settings.uri, serverSelectionTimeoutMS=settings.server_timeout_ms)
    client.admin.command("ping")
    return client
