"""Constituencies library — walk, decode, and bulk-load area result files.

Public API:
    - walk_constituencies: Enumerate constituency folders and their files
    - load_area / load_areas: Decode area JSON files into Area models
    - parse_area: Validate a raw JSON dict as an Area
    - encode_areas: Convert areas to BSON documents, dropping failures
    - insert_areas: Single bulk insert into the area collection
    - Area, Candidate: Record models
"""

from election_db.lib.constituencies.loader import (
    AREA_COLLECTION,
    LoadError,
    LoadResult,
    encode_area,
    encode_areas,
    insert_areas,
)
from election_db.lib.constituencies.parser import (
    Area,
    AreaDecodeError,
    Candidate,
    load_area,
    load_areas,
    parse_area,
)
from election_db.lib.constituencies.walker import (
    CONSTITUENCIES,
    ConstituenciesNotFoundError,
    ConstituencyDir,
    NothingToCreateError,
    WalkError,
    walk_constituencies,
)

__all__ = [
    "AREA_COLLECTION",
    "CONSTITUENCIES",
    "Area",
    "AreaDecodeError",
    "Candidate",
    "ConstituenciesNotFoundError",
    "ConstituencyDir",
    "LoadError",
    "LoadResult",
    "NothingToCreateError",
    "WalkError",
    "encode_area",
    "encode_areas",
    "insert_areas",
    "load_area",
    "load_areas",
    "parse_area",
    "walk_constituencies",
]
