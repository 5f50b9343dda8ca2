from typing import List, Sequence

from level_preview.config import PreviewConfig
from level_preview.display import CLOSE_REQUESTED, KEY_PRESSED, Event
from level_preview.geometry import CanvasSize, Level, Point, Polygon
from level_preview.preview import draw_level, run_event_loop, show_level


class FakeFrame:
    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def draw_closed_polyline(self, points: Sequence[Point], color: str) -> None:
        self.calls.append(("draw", tuple(points), color))

    def present(self) -> None:
        self.calls.append(("present",))

    def close(self) -> None:
        self.calls.append(("close",))


class ScriptedEvents:
    """Returns one scripted batch of events per poll, then nothing."""

    def __init__(self, batches: List[List[Event]]) -> None:
        self.batches = list(batches)
        self.polls = 0

    def poll(self) -> List[Event]:
        self.polls += 1
        return self.batches.pop(0) if self.batches else []


def _level() -> Level:
    square = Polygon([Point(0, 0), Point(10, 0), Point(10, -10), Point(0, -10)])
    triangle = Polygon([Point(5, 5), Point(6, 5), Point(5, 6)])
    return Level(polygons=(square, triangle), size=CanvasSize(320, 200))


def test_draw_level_draws_in_order_then_presents() -> None:
    """Every polygon is drawn in level order before a single present."""

    level = _level()
    frame = FakeFrame()

    draw_level(level, frame, "red")

    assert frame.calls == [
        ("draw", level.polygons[0].points, "red"),
        ("draw", level.polygons[1].points, "red"),
        ("present",),
    ]


def test_event_loop_stops_on_close_and_ignores_other_events() -> None:
    """Only a close request ends the loop; other events are ignored."""

    events = ScriptedEvents([[], [Event(KEY_PRESSED, key="a")], [Event(CLOSE_REQUESTED)], []])
    sleeps: List[float] = []

    frames = run_event_loop(events, 0.5, sleep=sleeps.append)

    assert frames == 3
    assert events.polls == 3
    assert sleeps == [0.5, 0.5]


def test_event_loop_respects_max_frames() -> None:
    sleeps: List[float] = []
    frames = run_event_loop(ScriptedEvents([]), 1 / 60, sleep=sleeps.append, max_frames=4)
    assert frames == 4
    assert len(sleeps) == 4


def test_show_level_sizes_surface_and_closes_frame() -> None:
    """The surface matches the canvas size and is closed when the loop ends."""

    level = _level()
    frame = FakeFrame()
    events = ScriptedEvents([[Event(CLOSE_REQUESTED)]])
    requested = {}

    def factory(width, height, **kwargs):
        requested.update(width=width, height=height, **kwargs)
        return frame, events

    config = PreviewConfig(line_color="yellow", title="Test")
    frames = show_level(level, config, surface_factory=factory, sleep=lambda _s: None)

    assert frames == 1
    assert requested["width"] == 320
    assert requested["height"] == 200
    assert requested["title"] == "Test"
    assert frame.calls[0] == ("draw", level.polygons[0].points, "yellow")
    assert frame.calls[-1] == ("close",)
