"""
Layer Class for Layer Sketch

Represents a single drawing layer with:
- A stable id and display name
- Image buffer (the actual pixel data)
- PNG encode/decode helpers for export and external restores

"""

from PyQt6.QtCore import QBuffer, QByteArray, QIODevice, Qt
from PyQt6.QtGui import QImage, QPainter

IMAGE_FORMAT = QImage.Format.Format_ARGB32_Premultiplied


def blank_image(width: int, height: int) -> QImage:
    """A fully transparent buffer"""
    image = QImage(width, height, IMAGE_FORMAT)
    image.fill(Qt.GlobalColor.transparent)
    return image


def encode_png(image: QImage) -> bytes:
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    image.save(buffer, "PNG")
    data = bytes(buffer.data())
    buffer.close()
    return data


def decode_png(data):
    """
    Decode PNG bytes into a QImage.

    Returns:
        QImage, or None if the data cannot be decoded
    """
    if not data or not isinstance(data, (bytes, bytearray, QByteArray)):
        return None
    raw = data if isinstance(data, QByteArray) else QByteArray(bytes(data))
    image = QImage()
    if not image.loadFromData(raw):
        return None
    return image.convertToFormat(IMAGE_FORMAT)


class Layer:
    """A single raster layer"""

    def __init__(self, layer_id: int, name: str, width: int, height: int):
        """
        Initialize a new, fully transparent layer

        Args:
            layer_id: Unique id, never reused
            name: Layer name (e.g., "Layer 1")
            width: Canvas width in pixels
            height: Canvas height in pixels
        """
        self.id = layer_id
        self.name = name

        # Image buffer - ARGB format
        self.image = blank_image(width, height)

    @property
    def width(self):
        return self.image.width()

    @property
    def height(self):
        return self.image.height()

    def clear(self):
        """Wipes the layer clean."""
        self.image.fill(Qt.GlobalColor.transparent)

    def is_empty(self) -> bool:
        return self.image == blank_image(self.width, self.height)

    def snapshot(self) -> QImage:
        return self.image.copy()  # Copy, never share the live buffer

    def restore(self, image: QImage):
        """
        Replace the pixel content with `image`, drawn at the origin.
        Pixels the source doesn't cover end up transparent.
        """
        self.clear()
        painter = QPainter(self.image)
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        painter.drawImage(0, 0, image)
        painter.end()

    def get_memory_size(self) -> float:
        """
        Calculate memory usage in MB

        Returns:
            float: Memory usage in megabytes
        """
        return self.image.sizeInBytes() / (1024 * 1024)

    def __repr__(self):
        return f"Layer({self.id}, '{self.name}', {self.width}x{self.height})"
