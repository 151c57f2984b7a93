from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QPainter, QPen


class Gesture:
    """State of one press → release interaction. Thrown away when it completes."""

    def __init__(self, tool, anchor: QPointF, color, width: int):
        self.active = True
        self.tool = tool
        self.anchor = QPointF(anchor)
        self.color = color
        self.width = width
        self.last_point = QPointF(anchor)  # Latest pointer position seen

    def __repr__(self):
        return f"Gesture({self.tool.value}, anchor=({self.anchor.x():.1f}, {self.anchor.y():.1f}))"


def stroke_pen(color, width) -> QPen:
    return QPen(color, width, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap, Qt.PenJoinStyle.RoundJoin)


class BaseTool:
    # Shape tools paint a preview while dragging instead of touching the layer
    has_preview = False

    def __init__(self, engine):
        self.engine = engine

    def press(self, gesture): pass
    def move(self, gesture, pos): pass
    def release(self, gesture, pos): pass

    def preview(self, painter, gesture): pass

    def layer_painter(self) -> QPainter:
        """A painter on the active layer's buffer. Caller must end() it."""
        painter = QPainter(self.engine.layers.active_layer.image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        return painter
