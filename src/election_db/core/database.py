"""MongoDB client creation and lifecycle helpers.

The client is created once per run, handed to the build service, and closed
by the caller when the run ends.
"""

from loguru import logger
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from election_db.core.errors import BuildError


class ConnectionFailedError(BuildError):
    """Raised when the MongoDB server cannot be reached."""


def connect(mongodb_uri: str, *, timeout_ms: int = 5000, **kwargs: object) -> MongoClient:
    """Create a MongoDB client and verify the server answers a ping.

    ``MongoClient`` connects lazily, so the ping forces the round-trip that
    surfaces an unreachable server before any file is read.

    Args:
        mongodb_uri: MongoDB connection string.
        timeout_ms: Server selection timeout in milliseconds.
        **kwargs: Additional arguments passed to MongoClient.

    Returns:
        A connected MongoClient.

    Raises:
        ConnectionFailedError: If the client cannot be created or the ping fails.
    """
    kwargs.setdefault("serverSelectionTimeoutMS", timeout_ms)
    try:
        client: MongoClient = MongoClient(mongodb_uri, **kwargs)
        client.admin.command("ping")
    except PyMongoError as exc:
        msg = f"Failed to connect to MongoDB at {mongodb_uri}: {exc}"
        raise ConnectionFailedError(msg) from exc

    logger.debug("Connected to MongoDB at {}", mongodb_uri)
    return client


def close(client: MongoClient | None) -> None:
    """Close the client and release its connections."""
    if client is not None:
        client.close()
        logger.debug("MongoDB client closed")
