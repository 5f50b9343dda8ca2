"""Draw a loaded level and keep the window alive until it is closed.

The geometry is drawn once; afterwards a fixed-rate loop only polls
window events, stopping on the first close request.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Protocol, Sequence, Tuple

from .config import PreviewConfig
from .display import CLOSE_REQUESTED, Event, create_surface
from .geometry import Level, Point

logger = logging.getLogger(__name__)


class Drawable(Protocol):
    def draw_closed_polyline(self, points: Sequence[Point], color: str) -> None: ...

    def present(self) -> None: ...

    def close(self) -> None: ...


class EventPoller(Protocol):
    def poll(self) -> Sequence[Event]: ...


SurfaceFactory = Callable[..., Tuple[Drawable, EventPoller]]


def draw_level(level: Level, frame: Drawable, color: str) -> None:
    """Draw every polygon outline in level order, then present the frame."""

    for polygon in level.polygons:
        frame.draw_closed_polyline(polygon.points, color)
    frame.present()


def run_event_loop(
    events: EventPoller,
    frame_duration: float,
    *,
    sleep: Callable[[float], None] = time.sleep,
    max_frames: Optional[int] = None,
) -> int:
    """Poll ``events`` once per frame until a close request arrives.

    Returns the number of loop iterations performed. ``max_frames``
    bounds the loop when given.
    """

    frames = 0
    while max_frames is None or frames < max_frames:
        frames += 1
        if any(event.kind == CLOSE_REQUESTED for event in events.poll()):
            logger.debug("Close requested after %d frame(s)", frames)
            break
        sleep(frame_duration)
    return frames


def show_level(
    level: Level,
    config: Optional[PreviewConfig] = None,
    *,
    surface_factory: SurfaceFactory = create_surface,
    sleep: Callable[[float], None] = time.sleep,
    max_frames: Optional[int] = None,
) -> int:
    """Open a surface sized to the level canvas, draw it and wait for close."""

    if config is None:
        config = PreviewConfig()

    frame, events = surface_factory(
        level.size.width,
        level.size.height,
        title=config.title,
        background_color=config.background_color,
        dpi=config.dpi,
    )
    try:
        draw_level(level, frame, config.line_color)
        return run_event_loop(events, config.frame_duration, sleep=sleep, max_frames=max_frames)
    finally:
        frame.close()
