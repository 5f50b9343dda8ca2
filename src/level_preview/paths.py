"""Path helpers for level directories.

A level directory must contain two files with fixed names, the
metadata file and the polygon file. The ``ensure_*`` helpers fail fast
with a :class:`~level_preview.errors.PathError` before any parsing
starts.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .errors import PathNotADirectoryError, PathNotAFileError, PathNotFoundError

METADATA_FILENAME = "collision_info.txt"
POLYGONS_FILENAME = "polygons.txt"


def ensure_exists(path: Union[str, Path]) -> Path:
    # Path("") means the working directory; an empty argument is a missing path.
    if isinstance(path, str) and not path:
        raise PathNotFoundError("The empty path `` does not exist.")
    path = Path(path)
    if not path.exists():
        raise PathNotFoundError("Path does not exist.", path=path)
    return path


def ensure_dir(path: Union[str, Path]) -> Path:
    path = ensure_exists(path)
    if not path.is_dir():
        raise PathNotADirectoryError("Path is not a directory.", path=path)
    return path


def ensure_file(path: Union[str, Path]) -> Path:
    path = ensure_exists(path)
    if not path.is_file():
        raise PathNotAFileError("Path is not a file.", path=path)
    return path


@dataclass
class LevelPaths:
    """Resolved input files for one level directory."""

    directory: Path
    metadata: Path
    polygons: Path


def resolve_level_paths(
    directory: Union[str, Path],
    metadata_filename: str = METADATA_FILENAME,
    polygons_filename: str = POLYGONS_FILENAME,
) -> LevelPaths:
    """Validate ``directory`` and return the paths of its two input files.

    Raises :class:`PathNotFoundError`, :class:`PathNotADirectoryError` or
    :class:`PathNotAFileError` when the directory or either file is
    missing or of the wrong kind.
    """

    directory = ensure_dir(directory)
    return LevelPaths(
        directory=directory,
        metadata=ensure_file(directory / metadata_filename),
        polygons=ensure_file(directory / polygons_filename),
    )
