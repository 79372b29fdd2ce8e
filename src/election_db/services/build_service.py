"""Build an election database from the constituency files in a directory.

Resolves the election kind from the directory name, opens the MongoDB
connection, walks and decodes every area file, then bulk-inserts the result.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from loguru import logger
from pymongo import MongoClient

from election_db.core.config import Settings
from election_db.lib.constituencies import LoadResult, insert_areas, load_areas, walk_constituencies
from election_db.lib.elections import ElectionDatabase, UnsupportedElectionError, get_cwd_name


@dataclass
class BuildResult:
    """Summary of a completed build."""

    election_db: ElectionDatabase
    constituencies: int
    files: int
    load: LoadResult


def create_database(
    settings: Settings,
    client_factory: Callable[[], MongoClient],
    db_name: str | None = None,
    cwd: Path | None = None,
) -> BuildResult:
    """Build the election database for ``cwd``.

    The election kind is resolved before ``client_factory`` is called, so an
    unsupported directory never opens a connection. Any error raised here is a
    ``BuildError``; the caller owns the client and must close it.

    Args:
        settings: Application settings.
        client_factory: Zero-argument callable returning a connected client.
        db_name: Explicit database name, or None to generate one.
        cwd: Election directory. Defaults to the current working directory.

    Returns:
        BuildResult describing what was inserted.

    Raises:
        UnsupportedElectionError: If the directory name is not an election kind.
        ConstituenciesNotFoundError: If the constituencies folder is missing.
        NothingToCreateError: If there are no area files to load.
        WalkError: If a directory cannot be listed.
        AreaDecodeError: If any area file fails to decode.
        ConnectionFailedError: If MongoDB cannot be reached.
        LoadError: If the bulk insert fails.
    """
    cwd = cwd or Path.cwd()
    name = get_cwd_name(cwd)

    election_db = ElectionDatabase.from_str(name, client_factory, db_name)
    if election_db is None:
        raise UnsupportedElectionError(name)

    logger.info("Creating database {!r} for {} elections", election_db.get_database(), election_db.kind.value)

    dirs = walk_constituencies(cwd, settings.constituencies_dir)
    areas = load_areas(dirs)
    load = insert_areas(election_db, areas, settings.collection_name)

    logger.info("Created database {!r}", election_db.get_database())
    return BuildResult(
        election_db=election_db,
        constituencies=len(dirs),
        files=sum(len(d.files) for d in dirs),
        load=load,
    )
