from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QPainter
from .base import BaseTool

class EraserTool(BaseTool):
    """Clears a square the size of the brush at every sample. No interpolation between samples."""

    def press(self, gesture):
        self.erase_at(gesture.anchor)

    def move(self, gesture, pos):
        self.erase_at(pos)

    def erase_at(self, pos):
        size = self.engine.settings.brush_size
        square = QRectF(pos.x() - size / 2, pos.y() - size / 2, size, size)

        painter = QPainter(self.engine.layers.active_layer.image)
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
        painter.fillRect(square, Qt.GlobalColor.transparent)
        painter.end()
