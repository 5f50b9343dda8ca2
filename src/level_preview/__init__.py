"""level_preview: collision-geometry previews for 2D game levels.

A level directory holds a two-line metadata file (canvas size and origin
offset) and a polygon file with one outline per line. ``load_level``
parses both into an immutable :class:`Level`; ``show_level`` draws it in
a matplotlib window until the window is closed.
"""

from .config import PreviewConfig, load_config
from .errors import (
    ConversionError,
    EmptyPolygonError,
    FormatError,
    LevelError,
    PathError,
    PathNotADirectoryError,
    PathNotAFileError,
    PathNotFoundError,
    StructureError,
)
from .geometry import CanvasSize, Level, OriginOffset, Point, Polygon
from .loader import load_level
from .preview import show_level

__all__ = [
    # Configuration
    "PreviewConfig",
    "load_config",
    # Data model
    "Point",
    "Polygon",
    "CanvasSize",
    "OriginOffset",
    "Level",
    # Loading and display
    "load_level",
    "show_level",
    # Errors
    "LevelError",
    "PathError",
    "PathNotFoundError",
    "PathNotADirectoryError",
    "PathNotAFileError",
    "StructureError",
    "FormatError",
    "EmptyPolygonError",
    "ConversionError",
]
