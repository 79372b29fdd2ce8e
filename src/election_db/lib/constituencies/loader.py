"""Bulk loader — encode areas as BSON documents and insert them in one call."""

from dataclasses import dataclass, field

import bson
from bson.errors import BSONError
from loguru import logger
from pymongo.errors import PyMongoError

from election_db.core.errors import BuildError
from election_db.lib.constituencies.parser import Area
from election_db.lib.constituencies.walker import NothingToCreateError
from election_db.lib.elections import ElectionDatabase

AREA_COLLECTION = "area"


class LoadError(BuildError):
    """Raised when the bulk insert fails."""


@dataclass
class LoadResult:
    """Outcome of a bulk load."""

    database: str
    collection: str
    inserted: int = 0
    skipped: list[str] = field(default_factory=list)


def encode_area(area: Area) -> dict:
    """Convert an Area to a MongoDB document.

    The document is passed through ``bson.encode`` so that anything the
    driver would reject fails here, per record, instead of inside the bulk
    insert.

    Raises:
        bson.errors.BSONError: If the document cannot be encoded.
        OverflowError: If an integer does not fit in 64 bits.
    """
    doc = area.model_dump()
    bson.encode(doc)
    return doc


def encode_areas(areas: list[Area]) -> tuple[list[dict], list[str]]:
    """Encode a batch of areas, dropping any that fail to encode.

    Returns:
        Tuple of (encoded documents in input order, names of skipped areas).
    """
    docs: list[dict] = []
    skipped: list[str] = []
    for area in areas:
        try:
            docs.append(encode_area(area))
        except (BSONError, OverflowError) as exc:
            logger.warning("Couldn't convert area {!r} to BSON, skipping: {}", area.name, exc)
            skipped.append(area.name)
    return docs, skipped


def insert_areas(
    election_db: ElectionDatabase,
    areas: list[Area],
    collection_name: str = AREA_COLLECTION,
) -> LoadResult:
    """Encode ``areas`` and insert them with a single ``insert_many`` call.

    Args:
        election_db: Resolved election database holding the client.
        areas: Decoded areas, in the order they should be stored.
        collection_name: Target collection.

    Returns:
        LoadResult with the number of inserted and skipped documents.

    Raises:
        NothingToCreateError: If no area survived encoding.
        LoadError: If the insert fails.
    """
    docs, skipped = encode_areas(areas)
    result = LoadResult(database=election_db.get_database(), collection=collection_name, skipped=skipped)

    if not docs:
        msg = "Nothing to create: every area failed to encode"
        raise NothingToCreateError(msg)

    coll = election_db.collection(collection_name)
    try:
        inserted = coll.insert_many(docs)
    except PyMongoError as exc:
        msg = f"Failed to insert documents into {result.database}.{collection_name}: {exc}"
        raise LoadError(msg) from exc

    result.inserted = len(inserted.inserted_ids)
    logger.info(
        "Inserted {} document(s) into {}.{} ({} skipped)",
        result.inserted,
        result.database,
        collection_name,
        len(skipped),
    )
    return result
