"""Text parsers for the level input files.

The level format is deliberately tiny:

* ``collision_info.txt`` holds two ``"a, b"`` lines: the canvas size
  (unsigned) and the origin offset (signed);
* ``polygons.txt`` holds one polygon per line written as
  ``"(x1, y1), (x2, y2), ..., (xn, yn)"`` with floating-point
  coordinates.

Parsers in this module work on strings only. The ``read_*`` helpers
read a file and attach the path and line number to any error raised
while parsing it.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Tuple, Union

import numpy as np

from .errors import (
    ConversionError,
    EmptyPolygonError,
    FormatError,
    LevelError,
    PathError,
    StructureError,
)
from .geometry import CanvasSize, OriginOffset, Point, Polygon, to_screen_point

logger = logging.getLogger(__name__)

PAIR_SEPARATOR = ", "
POINT_SEPARATOR = "), ("

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")


# ---- numeric types --------------------------------------------------------


@dataclass(frozen=True)
class NumericType:
    """A named conversion from text to a number.

    ``convert`` raises :class:`ValueError` when the text is not a valid
    number of this type; the message of that error is not used, callers
    only see the type ``name``.
    """

    name: str
    convert: Callable[[str], Union[int, float]]


def _integer_converter(pattern: "re.Pattern[str]", low: int, high: int) -> Callable[[str], int]:
    def convert(text: str) -> int:
        if not pattern.fullmatch(text):
            raise ValueError(text)
        value = int(text)
        if not low <= value <= high:
            raise ValueError(text)
        return value

    return convert


def _f32(text: str) -> float:
    # float() tolerates surrounding whitespace and "_" separators, the
    # file format does not.
    if text != text.strip() or "_" in text:
        raise ValueError(text)
    with np.errstate(over="ignore"):
        value = float(np.float32(float(text)))
    if not math.isfinite(value):
        raise OverflowError(text)
    return value


U32 = NumericType("u32", _integer_converter(_UNSIGNED_RE, 0, 2**32 - 1))
I32 = NumericType("i32", _integer_converter(_SIGNED_RE, -(2**31), 2**31 - 1))
F32 = NumericType("f32", _f32)


# ---- numeric pair parser ---------------------------------------------------


def parse_pair(text: str, numeric_type: NumericType, purpose: str = "value") -> Tuple[Any, Any]:
    """Parse ``"a, b"`` into two numbers of ``numeric_type``.

    Raises
    ------
    FormatError
        If splitting on ``", "`` does not give exactly two parts.
    ConversionError
        If either part is not a valid ``numeric_type``; the error names
        the side (``x`` or ``y``), the offending text and the type.
    """

    parts = text.split(PAIR_SEPARATOR)
    if len(parts) != 2:
        raise FormatError(f'The {purpose} "{text}" is not a pair "x, y".', text=text)

    values = []
    for side, part in zip(("x", "y"), parts):
        try:
            values.append(numeric_type.convert(part))
        except OverflowError as exc:
            raise ConversionError(
                side, part, numeric_type.name, purpose, reason="is not a finite"
            ) from exc
        except ValueError as exc:
            raise ConversionError(side, part, numeric_type.name, purpose) from exc
    return values[0], values[1]


# ---- metadata reader -------------------------------------------------------


def parse_metadata(text: str) -> Tuple[CanvasSize, OriginOffset]:
    """Parse the two metadata lines into the canvas size and origin offset."""

    lines = text.splitlines()
    if len(lines) != 2:
        raise StructureError(f"Expected exactly two lines (size, offset), found {len(lines)}.")
    for number, line in enumerate(lines, start=1):
        if not line:
            raise StructureError("Metadata lines must not be empty.", line=number)

    try:
        width, height = parse_pair(lines[0], U32, "size")
    except LevelError as exc:
        exc.annotate(line=1)
        raise
    try:
        dx, dy = parse_pair(lines[1], I32, "offset")
    except LevelError as exc:
        exc.annotate(line=2)
        raise
    return CanvasSize(width, height), OriginOffset(dx, dy)


# ---- polygon point transformer ---------------------------------------------


def parse_polygon_point(token: str, offset: OriginOffset) -> Point:
    """Parse a bare ``"x, y"`` coordinate token into a screen-space point."""

    x, y = parse_pair(token, F32, "coordinate")
    return to_screen_point(x, y, offset)


# ---- polygon list parser ---------------------------------------------------


def split_polygon_tokens(line: str) -> List[str]:
    """Split a polygon line into its bare ``"x, y"`` tokens, in order."""

    if not line.strip():
        return []
    tokens = line.split(POINT_SEPARATOR)
    # Every "(" of the first token and every ")" of the last are dropped.
    tokens[0] = tokens[0].replace("(", "")
    tokens[-1] = tokens[-1].replace(")", "")
    return tokens


def parse_polygon(line: str, offset: OriginOffset) -> Polygon:
    """Parse one ``"(x1, y1), ..., (xn, yn)"`` line into a polygon.

    Points keep the left-to-right order of the line; that order is the
    polygon's edge sequence.
    """

    tokens = split_polygon_tokens(line)
    if not tokens:
        raise EmptyPolygonError("The polygon definition has no points.", text=line)
    return Polygon(parse_polygon_point(token, offset) for token in tokens)


def parse_polygons(text: str, offset: OriginOffset) -> List[Polygon]:
    """Parse every line of ``text`` into a polygon, in line order."""

    polygons = []
    for number, line in enumerate(text.splitlines(), start=1):
        try:
            polygons.append(parse_polygon(line, offset))
        except LevelError as exc:
            exc.annotate(line=number)
            raise
    return polygons


# ---- file readers ----------------------------------------------------------


def read_text(path: Union[str, Path]) -> str:
    """Read a UTF-8 input file; decoding and I/O failures name the file."""

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fr:
            return fr.read()
    except UnicodeDecodeError as exc:
        raise FormatError(
            f"The file is not valid UTF-8 text (byte {exc.start}).", path=path
        ) from exc
    except OSError as exc:
        raise PathError(f"The file could not be read: {exc.strerror or exc}.", path=path) from exc


def read_metadata(path: Union[str, Path]) -> Tuple[CanvasSize, OriginOffset]:
    """Read the size/offset metadata file."""

    logger.debug("Reading metadata from %s", path)
    try:
        return parse_metadata(read_text(path))
    except LevelError as exc:
        exc.annotate(path=path)
        raise


def read_polygons(path: Union[str, Path], offset: OriginOffset) -> List[Polygon]:
    """Read the polygon file, one polygon per line."""

    logger.debug("Reading polygons from %s", path)
    try:
        return parse_polygons(read_text(path), offset)
    except LevelError as exc:
        exc.annotate(path=path)
        raise
