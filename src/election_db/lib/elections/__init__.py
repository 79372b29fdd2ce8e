"""Election kind library — map working directories onto target databases.

Public API:
    - ElectionKind: Supported election types
    - ElectionDatabase: Election kind bound to a client and database name
    - UnsupportedElectionError: Raised for unrecognized directory names
    - resolve_election_kind: Directory name to ElectionKind lookup
    - build_database_name: Explicit or generated database name
    - get_cwd_name: Base name of the working directory
    - mini_hash: Short SHA-1 prefix of the current epoch second
"""

from election_db.lib.elections.kind import (
    ElectionDatabase,
    ElectionKind,
    UnsupportedElectionError,
    build_database_name,
    epoch,
    get_cwd_name,
    mini_hash,
    resolve_election_kind,
)

__all__ = [
    "ElectionDatabase",
    "ElectionKind",
    "UnsupportedElectionError",
    "build_database_name",
    "epoch",
    "get_cwd_name",
    "mini_hash",
    "resolve_election_kind",
]
