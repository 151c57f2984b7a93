import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from layer_sketch.logic import DrawingEngine, PointerEvent, PointerKind

WIDTH, HEIGHT = 200, 120


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def engine():
    return DrawingEngine(WIDTH, HEIGHT, history_limit=50, record_clear=False)


def press(x, y):
    return PointerEvent.mouse(PointerKind.DOWN, x, y)


def move(x, y):
    return PointerEvent.mouse(PointerKind.MOVE, x, y)


def release(x, y):
    return PointerEvent.mouse(PointerKind.UP, x, y)


def drag(engine, points):
    """Press at the first point, move through the rest, release at the last."""
    engine.pointer_down(press(*points[0]))
    for point in points[1:]:
        engine.pointer_move(move(*point))
    engine.pointer_up(release(*points[-1]))


def alpha(image, x, y):
    return image.pixelColor(x, y).alpha()
