from PyQt6.QtCore import QEvent, QPointF, QRectF, Qt
from PyQt6.QtGui import QEventPoint, QPointingDevice, QTouchEvent

from layer_sketch.logic.pointer import PointerEvent, PointerKind, PointerSource, from_touch_event, normalize

SURFACE = QRectF(100, 50, 400, 300)


def test_mouse_is_offset_by_surface_origin():
    point = normalize(PointerEvent.mouse(PointerKind.MOVE, 130, 75), SURFACE)
    assert (point.x(), point.y()) == (30, 25)


def test_touch_move_uses_first_active_touch():
    event = PointerEvent.touch(PointerKind.MOVE, touches=[(110, 60), (300, 300)])
    point = normalize(event, SURFACE)
    assert (point.x(), point.y()) == (10, 10)


def test_touch_end_uses_first_changed_touch():
    # The lifted finger is no longer in the active list
    event = PointerEvent.touch(PointerKind.UP, touches=[(300, 300)], changed_touches=[(150, 90)])
    point = normalize(event, SURFACE)
    assert (point.x(), point.y()) == (50, 40)


def test_synthetic_event_falls_back_to_anchor():
    event = PointerEvent.synthetic(PointerKind.LEAVE)
    assert event.source is PointerSource.SYNTHETIC
    assert normalize(event, SURFACE, fallback=QPointF(7, 8)) == QPointF(7, 8)


def test_no_coordinates_and_no_gesture_gives_origin():
    assert normalize(PointerEvent.synthetic(PointerKind.UP), SURFACE) == QPointF(0, 0)
    assert normalize(PointerEvent.touch(PointerKind.UP), SURFACE) == QPointF(0, 0)


def test_touch_without_points_uses_fallback():
    event = PointerEvent.touch(PointerKind.MOVE)
    assert normalize(event, SURFACE, fallback=QPointF(3, 4)) == QPointF(3, 4)


def touch_point(point_id, state, x, y):
    return QEventPoint(point_id, state, QPointF(x, y), QPointF(x, y))


def qt_touch(event_type, points):
    return QTouchEvent(event_type, QPointingDevice.primaryPointingDevice(),
                       Qt.KeyboardModifier.NoModifier, points)


def test_qt_touch_end_reports_lifted_finger_as_changed():
    event = qt_touch(QEvent.Type.TouchEnd, [
        touch_point(0, QEventPoint.State.Released, 150, 90),
        touch_point(1, QEventPoint.State.Stationary, 300, 300),
    ])
    pointer = from_touch_event(PointerKind.UP, event)

    assert pointer.source is PointerSource.TOUCH
    assert pointer.touches == ((300, 300),)
    assert pointer.changed_touches == ((150, 90),)
    point = normalize(pointer, SURFACE)
    assert (point.x(), point.y()) == (50, 40)


def test_qt_touch_update_skips_released_points():
    event = qt_touch(QEvent.Type.TouchUpdate, [
        touch_point(0, QEventPoint.State.Released, 400, 300),
        touch_point(1, QEventPoint.State.Updated, 120, 70),
    ])
    pointer = from_touch_event(PointerKind.MOVE, event)

    assert pointer.touches == ((120, 70),)
    point = normalize(pointer, SURFACE)
    assert (point.x(), point.y()) == (20, 20)
