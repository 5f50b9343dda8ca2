"""Display surface for level previews, backed by matplotlib.

``create_surface`` opens a figure sized to the level canvas and returns
a drawable :class:`LevelFrame` plus an :class:`EventSource` that reports
window events. The axes are set up in screen convention (origin at the
top-left, Y pointing down) so points from the loader can be drawn
as-is.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .geometry import Point

CLOSE_REQUESTED = "close"
KEY_PRESSED = "key"


@dataclass(frozen=True)
class Event:
    """A window or input event."""

    kind: str
    key: Optional[str] = None


class LevelFrame:
    """Drawable wrapper around a single matplotlib figure."""

    def __init__(self, width: int, height: int, *, title: str = "Level Preview",
                 background_color: str = "black", dpi: int = 100) -> None:
        self.size = (width, height)
        # A zero-sized figure cannot be created; keep at least one pixel.
        self.figure = plt.figure(
            figsize=(max(width, 1) / dpi, max(height, 1) / dpi),
            dpi=dpi,
            facecolor=background_color,
        )
        if self.figure.canvas.manager is not None:
            self.figure.canvas.manager.set_window_title(title)
        self.axes = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self.axes.set_facecolor(background_color)
        self.axes.set_xlim(0, width)
        self.axes.set_ylim(height, 0)
        self.axes.set_axis_off()

    def draw_closed_polyline(self, points: Iterable[Point], color: str) -> None:
        """Connect ``points`` in order and close the outline back to the first."""

        coords = np.array([(p.x, p.y) for p in points], dtype=float)
        if coords.size == 0:
            return
        coords = np.vstack([coords, coords[:1]])
        self.axes.plot(coords[:, 0], coords[:, 1], color=color, linewidth=1.0)

    def present(self) -> None:
        self.figure.canvas.draw_idle()
        plt.show(block=False)

    def close(self) -> None:
        plt.close(self.figure)


class EventSource:
    """Queue of events raised by a :class:`LevelFrame`'s figure."""

    def __init__(self, frame: LevelFrame) -> None:
        self._figure = frame.figure
        self._queue: Deque[Event] = deque()
        self._closed = False
        canvas = self._figure.canvas
        canvas.mpl_connect("close_event", self._on_close)
        canvas.mpl_connect("key_press_event", self._on_key)

    def _on_close(self, _event) -> None:
        if not self._closed:
            self._closed = True
            self._queue.append(Event(CLOSE_REQUESTED))

    def _on_key(self, event) -> None:
        self._queue.append(Event(KEY_PRESSED, key=event.key))

    def poll(self) -> List[Event]:
        """Return every event received since the last call."""

        if plt.fignum_exists(self._figure.number):
            self._figure.canvas.flush_events()
        else:
            # Closed without a close_event (e.g. plt.close on a
            # non-interactive backend).
            self._on_close(None)
        events = list(self._queue)
        self._queue.clear()
        return events


def create_surface(width: int, height: int, *, title: str = "Level Preview",
                   background_color: str = "black", dpi: int = 100) -> Tuple[LevelFrame, EventSource]:
    """Open a preview figure of ``width`` x ``height`` pixels."""

    frame = LevelFrame(width, height, title=title, background_color=background_color, dpi=dpi)
    return frame, EventSource(frame)
