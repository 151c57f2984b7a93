import logging
import re
from enum import Enum

from PyQt6.QtGui import QColor

from .. import config

logger = logging.getLogger(__name__)

HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")


class ToolType(Enum):
    BRUSH = "brush"          # (B) Freehand paint
    RECTANGLE = "rectangle"  # (R) Outlined rectangle
    CIRCLE = "circle"        # (C) Outlined circle
    ERASER = "eraser"        # (E) Square eraser

    @classmethod
    def parse(cls, value):
        """Accepts a ToolType or its name ("brush", "Rectangle"...). Returns None if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return None


class DrawingSettings:
    """Active tool, colour and stroke width shared by every gesture"""

    def __init__(self, tool=ToolType.BRUSH, color="#000000", brush_size=5):
        self.tool = ToolType.parse(tool) or ToolType.BRUSH
        self.color = QColor(0, 0, 0)
        self.set_color(color)
        self.brush_size = self.clamp_size(brush_size)

    @staticmethod
    def clamp_size(size):
        return max(config.MIN_BRUSH_SIZE, min(int(size), config.MAX_BRUSH_SIZE))

    def set_tool(self, tool) -> bool:
        parsed = ToolType.parse(tool)
        if parsed is None:
            logger.warning("Unknown tool %r ignored", tool)
            return False
        self.tool = parsed
        return True

    def set_color(self, hex_color) -> bool:
        # Only #RRGGBB, no colour names or alpha
        if not isinstance(hex_color, str) or not HEX_COLOR.fullmatch(hex_color):
            logger.warning("Invalid colour %r ignored", hex_color)
            return False
        self.color = QColor(hex_color)
        return True

    def set_brush_size(self, size) -> bool:
        try:
            self.brush_size = self.clamp_size(size)
        except (TypeError, ValueError, OverflowError):
            logger.warning("Invalid brush size %r ignored", size)
            return False
        return True

    def __repr__(self):
        return f"DrawingSettings({self.tool.value}, {self.color.name()}, size={self.brush_size})"
