"""Area JSON parser and Pydantic validation models.

Each file under a constituency folder holds one JSON object describing the
result of one area (constituency) for one year. Every field is optional:
missing fields take their zero value. Fields that are present must have the
right JSON type; integers are range-checked against their storage width and
strings are never coerced to numbers.
"""

from pathlib import Path
from typing import Annotated, Any

from loguru import logger
from pydantic import (
    AfterValidator,
    AllowInfNan,
    BaseModel,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from election_db.core.errors import BuildError
from election_db.lib.constituencies.walker import ConstituencyDir

Int8 = Annotated[StrictInt, Field(ge=-(2**7), le=2**7 - 1)]
Int16 = Annotated[StrictInt, Field(ge=-(2**15), le=2**15 - 1)]
Int32 = Annotated[StrictInt, Field(ge=-(2**31), le=2**31 - 1)]
FiniteFloat = Annotated[StrictFloat, AllowInfNan(False)]
Float = Annotated[FiniteFloat | StrictInt, AfterValidator(float)]


class AreaDecodeError(BuildError):
    """Raised when an area file cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Couldn't deserialise {path}: {reason}")
        self.path = path


def _coerce_null_to_list(v: Any) -> Any:
    """Coerce explicit JSON null to empty list."""
    return v if v is not None else []


def _coerce_null_to_int(v: Any) -> Any:
    """Coerce explicit JSON null to 0."""
    return v if v is not None else 0


def _coerce_null_to_str(v: Any) -> Any:
    """Coerce explicit JSON null to empty string."""
    return v if v is not None else ""


def _coerce_null_to_false(v: Any) -> Any:
    return v if v is not None else False


class Candidate(BaseModel):
    """One candidate's result within an area."""

    counts: list[Int32] = Field(default_factory=list)
    elected: StrictBool = False
    first_pref_pc: Float | None = None
    full_name: StrictStr = ""
    party: StrictStr = ""
    transfers: Int32 | None = None
    transfers_pc: Float | None = None

    @field_validator("counts", mode="before")
    @classmethod
    def _coerce_counts(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)

    @field_validator("elected", mode="before")
    @classmethod
    def _coerce_elected(cls, v: Any) -> Any:
        return _coerce_null_to_false(v)

    @field_validator("full_name", "party", mode="before")
    @classmethod
    def _coerce_labels(cls, v: Any) -> Any:
        return _coerce_null_to_str(v)


class Area(BaseModel):
    """One electoral area's result for one year.

    ``candidates`` keeps the order given in the source file.

    An explicit JSON ``null`` on a non-optional field (the labels, ``year``,
    ``candidates``, and a candidate's ``elected``, ``counts``, ``full_name``
    and ``party``) is read as that field's zero value, exactly like a missing
    field. This is looser than the source format, which never writes nulls
    there.
    """

    area_type: StrictStr = ""
    candidates: list[Candidate] = Field(default_factory=list)
    counts_held: Int8 | None = None
    description: StrictStr = ""
    election_type: StrictStr = ""
    electorate: Int32 | None = None
    name: StrictStr = ""
    quota: Int32 | None = None
    spoilt: Int16 | None = None
    turnout: Int32 | None = None
    valid: Int32 | None = None
    year: Int16 = 0

    @field_validator("candidates", mode="before")
    @classmethod
    def _coerce_candidates(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)

    @field_validator("area_type", "description", "election_type", "name", mode="before")
    @classmethod
    def _coerce_labels(cls, v: Any) -> Any:
        return _coerce_null_to_str(v)

    @field_validator("year", mode="before")
    @classmethod
    def _coerce_year(cls, v: Any) -> Any:
        return _coerce_null_to_int(v)


def parse_area(raw: dict) -> Area:
    """Parse and validate a raw area JSON dict into an Area model.

    Args:
        raw: The decoded JSON object.

    Returns:
        A validated Area instance.

    Raises:
        pydantic.ValidationError: If a present field has the wrong type.
    """
    return Area.model_validate(raw)


def load_area(path: Path) -> Area:
    """Read and decode one area file.

    Args:
        path: Path to a JSON file holding a single area object.

    Returns:
        The decoded Area.

    Raises:
        AreaDecodeError: If the file cannot be read, is not valid JSON, or
            does not match the Area schema.
    """
    logger.info("Processing {}", path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise AreaDecodeError(path, f"couldn't open file: {exc}") from exc

    try:
        return Area.model_validate_json(data)
    except ValidationError as exc:
        raise AreaDecodeError(path, str(exc)) from exc


def load_areas(dirs: list[ConstituencyDir]) -> list[Area]:
    """Decode every file in every constituency folder.

    Areas are batched per folder, in folder order, and the batches are
    concatenated. The first file that fails to decode aborts the whole load.

    Raises:
        AreaDecodeError: On the first unreadable or undecodable file.
    """
    areas: list[Area] = []
    for constituency in dirs:
        batch = [load_area(path) for path in constituency.files]
        logger.debug("Decoded {} area(s) from {}", len(batch), constituency.name)
        areas.extend(batch)
    return areas
