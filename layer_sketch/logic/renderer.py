"""
Surface Renderer

Keeps the visible surface in sync with the active layer. Every refresh
replaces the whole surface; shape previews are painted on top of the
surface only and never reach the layer buffer.
"""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPainter

from .layer import blank_image


class SurfaceRenderer:
    def __init__(self, width: int, height: int):
        self.surface = blank_image(width, height)

    def clear(self):
        self.surface.fill(Qt.GlobalColor.transparent)

    def show(self, buffer: QImage, overlay=None):
        """
        Redraw the surface from `buffer`.

        Args:
            buffer: The active layer's image
            overlay: Optional callable(painter) that paints a live preview on top
        """
        self.clear()
        painter = QPainter(self.surface)
        painter.drawImage(0, 0, buffer)
        if overlay is not None:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            overlay(painter)
        painter.end()
