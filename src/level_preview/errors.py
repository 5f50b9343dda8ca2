"""Error taxonomy for level loading.

Every failure raised while turning a level directory into a
:class:`~level_preview.geometry.Level` derives from :class:`LevelError`.
Parsing stages raise with the raw offending text only; the file readers
then attach the source path and line number to the *same* exception via
:meth:`LevelError.annotate` before letting it propagate, so the final
message names the file, the line and the token.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class LevelError(Exception):
    """Base class for all level input errors."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[Union[str, Path]] = None,
        line: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None
        self.line = line

    def annotate(
        self,
        *,
        path: Optional[Union[str, Path]] = None,
        line: Optional[int] = None,
    ) -> "LevelError":
        """Fill in missing location context and return ``self``."""

        if self.path is None and path is not None:
            self.path = Path(path)
        if self.line is None and line is not None:
            self.line = line
        return self

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        if self.line is None:
            return f"{self.path}: {self.message}"
        return f"{self.path}, line {self.line}: {self.message}"


class PathError(LevelError):
    """A required path is missing or of the wrong kind."""


class PathNotFoundError(PathError, FileNotFoundError):
    pass


class PathNotADirectoryError(PathError, NotADirectoryError):
    pass


class PathNotAFileError(PathError):
    pass


class StructureError(LevelError):
    """A file has the wrong number of lines."""


class FormatError(LevelError):
    """A token does not have the expected shape (e.g. ``"a, b"``)."""

    def __init__(self, message: str, *, text: str = "", **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.text = text


class EmptyPolygonError(FormatError):
    """A polygon definition has no points."""


class ConversionError(LevelError):
    """One side of a pair could not be parsed as the requested number type."""

    def __init__(
        self,
        side: str,
        text: str,
        type_name: str,
        purpose: str = "value",
        *,
        reason: str = "is not a valid",
        **kwargs,
    ) -> None:
        super().__init__(f'The {side} {purpose} "{text}" {reason} {type_name}.', **kwargs)
        self.side = side
        self.text = text
        self.type_name = type_name
        self.purpose = purpose
