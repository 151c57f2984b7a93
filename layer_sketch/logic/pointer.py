"""
Pointer Normalizer

Turns mouse and touch input into one canonical point stream in
surface-local coordinates. The source of an event is decided once,
here at the input boundary; tools only ever see a QPointF.
"""

from enum import Enum, auto

from PyQt6.QtCore import QPointF, QRectF
from PyQt6.QtGui import QEventPoint


class PointerSource(Enum):
    MOUSE = auto()
    TOUCH = auto()
    SYNTHETIC = auto()  # Completion not tied to a real pointer


class PointerKind(Enum):
    DOWN = auto()
    MOVE = auto()
    UP = auto()
    LEAVE = auto()


class PointerEvent:
    """
    A raw pointer event in screen (client) coordinates.

    Args:
        source: Where the event came from
        kind: Press, move, release or leave
        client: (x, y) for mouse events
        touches: Active touch points as (x, y), first one wins
        changed_touches: Touch points that changed in this event (the ended ones on UP)
    """

    def __init__(self, source, kind, client=None, touches=(), changed_touches=()):
        self.source = source
        self.kind = kind
        self.client = client
        self.touches = tuple(touches)
        self.changed_touches = tuple(changed_touches)

    @classmethod
    def mouse(cls, kind, x, y):
        return cls(PointerSource.MOUSE, kind, client=(x, y))

    @classmethod
    def touch(cls, kind, touches=(), changed_touches=()):
        return cls(PointerSource.TOUCH, kind, touches=touches, changed_touches=changed_touches)

    @classmethod
    def synthetic(cls, kind):
        return cls(PointerSource.SYNTHETIC, kind)

    def __repr__(self):
        return f"PointerEvent({self.source.name}, {self.kind.name}, client={self.client})"


def _client_point(event):
    if event.source is PointerSource.MOUSE:
        return event.client

    if event.source is PointerSource.TOUCH:
        # Ended touches are gone from the active list, so look at what changed
        if event.kind is PointerKind.UP:
            candidates = event.changed_touches or event.touches
        else:
            candidates = event.touches or event.changed_touches
        return candidates[0] if candidates else None

    return None


def normalize(event, surface_rect: QRectF, fallback=None) -> QPointF:
    """
    Map a raw pointer event to surface-local coordinates.

    Args:
        event: PointerEvent
        surface_rect: Screen-space bounding rect of the drawing surface
        fallback: Point to use when the event carries no coordinates
            (normally the gesture anchor)

    Returns:
        QPointF: Position relative to the surface's top-left corner
    """
    client = _client_point(event)
    if client is None:
        return QPointF(fallback) if fallback is not None else QPointF(0, 0)

    x, y = client
    return QPointF(x - surface_rect.left(), y - surface_rect.top())


# === Qt boundary helpers === #
def from_mouse_event(kind, global_pos) -> PointerEvent:
    """Builds a PointerEvent from a QMouseEvent's globalPosition() (or QCursor.pos())."""
    return PointerEvent.mouse(kind, global_pos.x(), global_pos.y())


def from_touch_event(kind, event) -> PointerEvent:
    """Builds a PointerEvent from a QTouchEvent."""
    points = event.points()
    active = [p for p in points if p.state() != QEventPoint.State.Released]
    changed = [p for p in points if p.state() != QEventPoint.State.Stationary]

    def as_xy(point):
        pos = point.globalPosition()
        return (pos.x(), pos.y())

    return PointerEvent.touch(kind,
                              touches=[as_xy(p) for p in active],
                              changed_touches=[as_xy(p) for p in changed])
