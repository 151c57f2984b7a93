from .base import BaseTool, Gesture
from .brush import BrushTool
from .eraser import EraserTool
from .shapes import CircleTool, RectangleTool

__all__ = ['BaseTool', 'Gesture', 'BrushTool', 'EraserTool', 'RectangleTool', 'CircleTool']
