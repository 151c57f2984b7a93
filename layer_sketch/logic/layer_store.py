"""
Raster Layer Store

Owns the ordered, append-only list of layers and the active index.
Only the active layer is ever mutated by drawing.
"""

import logging

from PyQt6.QtGui import QImage

from .layer import Layer, decode_png

logger = logging.getLogger(__name__)


class LayerStore:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.layers = []
        self.active_index = 0
        self._next_id = 1
        self.add_layer()

    def __len__(self):
        return len(self.layers)

    @property
    def active_layer(self) -> Layer:
        return self.layers[self.active_index]

    def add_layer(self) -> Layer:
        """Appends an empty layer. The active index stays where it is."""
        layer = Layer(self._next_id, f"Layer {self._next_id}", self.width, self.height)
        self._next_id += 1
        self.layers.append(layer)
        logger.debug("Added %r", layer)
        return layer

    def select_layer(self, index) -> bool:
        if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < len(self.layers)):
            logger.warning("Rejected layer index %r (have %d layers)", index, len(self.layers))
            return False
        self.active_index = index
        return True

    def clear_active_layer(self):
        self.active_layer.clear()

    def get_active_buffer(self) -> QImage:
        return self.active_layer.snapshot()

    def set_active_buffer(self, data) -> bool:
        """
        Replace the active layer's pixels.

        Args:
            data: A QImage, or encoded image bytes (PNG)

        Returns:
            bool: False if the data could not be decoded; the buffer is left untouched
        """
        image = data if isinstance(data, QImage) else decode_png(data)
        if image is None or image.isNull():
            logger.warning("Could not decode buffer for %r, restore dropped", self.active_layer)
            return False
        self.active_layer.restore(image)
        return True
