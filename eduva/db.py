"""MongoDB connection handling."""

from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from eduva.config import get_env

log = logging.getLogger(__name__)

CONNECT_TIMEOUT_MS = 60_000

_database = None


class DatabaseError(RuntimeError):
    """Raised when the database cannot be reached."""


def database_name(environment):
    """Return the database name for *environment*; the test environment gets a suffix."""
    name = get_env("DB_NAME")
    return f"{name}_{environment}" if environment == "test" else name


def connect_database(environment):
    """Connect to the database named for *environment*, ping it and make it current."""
    global _database
    log.info("Connexion à la base de données (environement : %s)", environment)
    name = database_name(environment)
    uri = get_env("DB_URI")
    try:
        client = MongoClient(
            uri, serverSelectionTimeoutMS=CONNECT_TIMEOUT_MS, connectTimeoutMS=CONNECT_TIMEOUT_MS
        )
    except (PyMongoError, ValueError) as exc:
        raise DatabaseError(f"Erreur de connexion à la base de données: {exc}") from exc
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        raise DatabaseError(f"Ping échoué sur la base '{name}': {exc}") from exc
    _database = client[name]
    log.info("Connexion à la base de données %s réussie", name)
    return _database


def get_database():
    """Return the current database; raise if no connection was made."""
    if _database is None:
        raise DatabaseError("la base de données n'est pas connectée")
    return _database