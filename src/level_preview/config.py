"""Configuration objects for the level preview.

``PreviewConfig`` is a plain dataclass so that tests and tooling can
construct one directly. Values may also come from a YAML file whose
top-level mapping overrides the defaults; the CLI then lets explicit
flags override the file.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .paths import METADATA_FILENAME, POLYGONS_FILENAME


@dataclass(frozen=True)
class PreviewConfig:
    """Settings for loading and displaying one level.

    The defaults reproduce the classic preview: a "Level Preview"
    window with red outlines on black, refreshed at 60 frames per
    second.
    """

    title: str = "Level Preview"
    fps: int = 60
    line_color: str = "red"
    background_color: str = "black"
    metadata_filename: str = METADATA_FILENAME
    polygons_filename: str = POLYGONS_FILENAME
    # Pixels per inch used to size the matplotlib figure to the canvas.
    dpi: int = 100

    def __post_init__(self) -> None:
        for name in ("title", "line_color", "background_color", "metadata_filename", "polygons_filename"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        for name in ("fps", "dpi"):
            value = getattr(self, name)
            # bool is an int subclass; "fps: yes" in YAML is not a rate.
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")

    @property
    def frame_duration(self) -> float:
        """Seconds per event-loop iteration."""

        return 1.0 / self.fps

    def with_overrides(self, **overrides: Any) -> "PreviewConfig":
        """Return a copy with every non-``None`` override applied."""

        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)


def config_from_mapping(data: Dict[str, Any]) -> PreviewConfig:
    """Build a :class:`PreviewConfig` from a plain mapping."""

    known = {f.name for f in fields(PreviewConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(unknown)}")
    return PreviewConfig(**data)


def load_config(path: Optional[Union[str, Path]] = None) -> PreviewConfig:
    """Load a YAML config file, or return the defaults when ``path`` is None."""

    if path is None:
        return PreviewConfig()
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config at {path} could not be parsed: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"YAML config at {path} must contain a mapping at the top level.")
    return config_from_mapping(data)
