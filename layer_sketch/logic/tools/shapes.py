import math

from PyQt6.QtCore import QRectF, Qt
from .base import BaseTool, stroke_pen


class ShapeTool(BaseTool):
    """
    Outlined shapes spanned from the press point.
    The layer is only painted on release; until then the shape is a preview.
    """
    has_preview = True

    def release(self, gesture, pos):
        painter = self.layer_painter()
        self.draw(painter, gesture, pos)
        painter.end()

    def preview(self, painter, gesture):
        self.draw(painter, gesture, gesture.last_point)

    def draw(self, painter, gesture, end):
        painter.setPen(stroke_pen(gesture.color, gesture.width))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        self.draw_shape(painter, gesture.anchor, end)

    def draw_shape(self, painter, anchor, end):
        raise NotImplementedError


class RectangleTool(ShapeTool):
    def draw_shape(self, painter, anchor, end):
        rect = QRectF(anchor, end).normalized()
        if rect.width() == 0 and rect.height() == 0:
            painter.drawPoint(anchor)  # Zero-size rectangle still leaves a mark
        else:
            painter.drawRect(rect)


class CircleTool(ShapeTool):
    def draw_shape(self, painter, anchor, end):
        radius = math.hypot(end.x() - anchor.x(), end.y() - anchor.y())
        if radius == 0:
            painter.drawPoint(anchor)
        else:
            painter.drawEllipse(anchor, radius, radius)
