"""Election kinds and database naming.

The election kind is inferred from the name of the working directory. When no
database name is given, one is synthesized from the kind and a short hash of
the current epoch second.
"""

import hashlib
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from loguru import logger
from pymongo import MongoClient
from pymongo.collection import Collection

from election_db.core.errors import BuildError

# Length of the hex prefix appended to generated database names
_HASH_LENGTH = 5


class ElectionKind(StrEnum):
    """Election types recognized as working directory names."""

    ASSEMBLY = "assembly"
    DAIL = "dail"
    WESTMINSTER = "westminster"


class UnsupportedElectionError(BuildError):
    """Raised when the working directory is not an expected election type."""

    def __init__(self, name: str):
        super().__init__(f"Current working directory {name!r} is not an expected election type")
        self.name = name


def get_cwd_name(cwd: Path | None = None) -> str:
    """Return the base name of the working directory."""
    return (cwd or Path.cwd()).resolve().name


def epoch() -> str:
    """Return the current wall-clock time in whole seconds since the epoch."""
    return str(int(time.time()))


def mini_hash(seed: str | None = None) -> str:
    """Return the first five hex characters of the SHA-1 digest of ``seed``.

    Args:
        seed: Text to hash. Defaults to the current epoch second, so two runs
            within the same second produce the same value.
    """
    if seed is None:
        seed = epoch()
    return hashlib.sha1(seed.encode(), usedforsecurity=False).hexdigest()[:_HASH_LENGTH]


def resolve_election_kind(name: str) -> ElectionKind | None:
    """Map a directory name onto an election kind, or None if there is no match."""
    try:
        return ElectionKind(name)
    except ValueError:
        return None


def build_database_name(kind: ElectionKind, explicit: str | None = None) -> str:
    """Return ``explicit`` verbatim, or ``<kind>_<mini_hash>`` when not given."""
    if explicit:
        return explicit
    return f"{kind.value}_{mini_hash()}"


@dataclass
class ElectionDatabase:
    """A resolved election kind bound to a client and target database name."""

    kind: ElectionKind
    client: MongoClient
    database_name: str

    @classmethod
    def from_str(
        cls,
        name: str,
        client_factory: Callable[[], MongoClient],
        db_name: str | None = None,
    ) -> "ElectionDatabase | None":
        """Resolve ``name`` and open a connection for it.

        The kind is resolved before ``client_factory`` is called, so an
        unsupported name never opens a connection.

        Args:
            name: Working directory base name.
            client_factory: Zero-argument callable returning a connected client.
            db_name: Explicit database name, or None to generate one.

        Returns:
            The ElectionDatabase, or None if ``name`` is not an election kind.
        """
        kind = resolve_election_kind(name)
        if kind is None:
            logger.debug("Directory name {!r} does not match an election kind", name)
            return None
        return cls(kind=kind, client=client_factory(), database_name=build_database_name(kind, db_name))

    def get_database(self) -> str:
        """Return the target database name."""
        return self.database_name

    def collection(self, name: str) -> Collection:
        """Return the named collection inside the target database."""
        return self.client[self.database_name][name]
