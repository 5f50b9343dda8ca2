"""Level loading: directory in, validated :class:`Level` out."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .config import PreviewConfig
from .geometry import Level
from .parsing import read_metadata, read_polygons
from .paths import resolve_level_paths

logger = logging.getLogger(__name__)


def load_level(directory: Union[str, Path], config: Optional[PreviewConfig] = None) -> Level:
    """Read the metadata and polygon files in ``directory`` into a level.

    Parameters
    ----------
    directory:
        Level directory holding the metadata and polygon files.
    config:
        Optional preview configuration; only the two filenames are used
        here. Defaults to ``collision_info.txt`` and ``polygons.txt``.

    Returns
    -------
    Level
        All polygons in file order plus the canvas size.

    Raises
    ------
    LevelError
        Any path, structure, format or conversion problem. There is no
        partial result.
    """

    if config is None:
        config = PreviewConfig()

    paths = resolve_level_paths(
        directory,
        metadata_filename=config.metadata_filename,
        polygons_filename=config.polygons_filename,
    )

    size, offset = read_metadata(paths.metadata)
    logger.debug("Canvas size %dx%d, origin offset (%d, %d)", size.width, size.height, offset.dx, offset.dy)

    polygons = read_polygons(paths.polygons, offset)
    level = Level(polygons=tuple(polygons), size=size)

    logger.info(
        "Loaded %d polygon(s) with %d point(s) from %s",
        len(level.polygons),
        level.point_count,
        paths.directory,
    )
    return level
