"""Constituency directory walker.

Expected layout, relative to the working directory::

    constituencies/
        <constituency>/
            <result>.json

Only regular files directly inside each constituency folder are collected.
Entries are sorted by name so that the resulting order does not depend on the
filesystem.
"""

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from election_db.core.errors import BuildError

CONSTITUENCIES = "constituencies"


class ConstituenciesNotFoundError(BuildError):
    """Raised when the working directory has no constituencies folder."""

    def __init__(self, path: Path):
        super().__init__(f"Current working directory is missing {path.name!r} sub-directory")
        self.path = path


class NothingToCreateError(BuildError):
    """Raised when there are no area files to load."""

    def __init__(self, message: str = "Nothing to create"):
        super().__init__(message)


class WalkError(BuildError):
    """Raised when a directory cannot be listed."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Couldn't read directory {path}: {cause}")
        self.path = path


@dataclass
class ConstituencyDir:
    """A constituency folder and the files found directly inside it."""

    path: Path
    files: list[Path] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.path.name


def _list_dir(path: Path) -> list[Path]:
    try:
        return sorted(path.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise WalkError(path, exc) from exc


def walk_constituencies(cwd: Path | None = None, dirname: str = CONSTITUENCIES) -> list[ConstituencyDir]:
    """Enumerate constituency folders and their files.

    Args:
        cwd: Directory containing the constituencies folder. Defaults to the
            current working directory.
        dirname: Name of the constituencies folder.

    Returns:
        One ConstituencyDir per child directory that contains at least one file,
        in name order.

    Raises:
        ConstituenciesNotFoundError: If the constituencies folder does not exist.
        NothingToCreateError: If no child directory contains any file.
        WalkError: If any directory cannot be listed.
    """
    root = (cwd or Path.cwd()) / dirname
    if not root.is_dir():
        raise ConstituenciesNotFoundError(root)

    results: list[ConstituencyDir] = []
    for subdir in _list_dir(root):
        if not subdir.is_dir():
            logger.debug("Skipping non-directory {}", subdir)
            continue
        files = [p for p in _list_dir(subdir) if p.is_file()]
        if not files:
            logger.debug("No files in {}", subdir)
            continue
        results.append(ConstituencyDir(path=subdir, files=files))

    if not results:
        msg = f"Nothing to create: no area files found under {root}"
        raise NothingToCreateError(msg)

    logger.info(
        "Found {} file(s) in {} constituency folder(s)",
        sum(len(d.files) for d in results),
        len(results),
    )
    return results
