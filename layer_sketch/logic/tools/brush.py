from PyQt6.QtGui import QPainter
from .base import BaseTool, stroke_pen


class BrushTool(BaseTool):
    """Open polyline from the anchor; each move paints one segment from the last point."""

    def move(self, gesture, pos):
        # Colour and size are re-read on every move, so changes show up mid-stroke
        settings = self.engine.settings

        painter = self.layer_painter()
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceOver)
        painter.setPen(stroke_pen(settings.color, settings.brush_size))
        painter.drawLine(gesture.last_point, pos)
        painter.end()
