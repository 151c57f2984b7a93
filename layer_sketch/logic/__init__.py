"""
Drawing engine for Layer Sketch

Contains data structures and business logic:
- DrawingEngine: Tool state machine and command surface
- Layer / LayerStore: Raster layers
- HistoryManager: Per-layer undo/redo system
- PointerEvent: Normalized mouse/touch input

"""

from .engine import DrawingEngine
from .exporter import ImageExporter
from .history import HistoryManager
from .layer import Layer
from .layer_store import LayerStore
from .pointer import PointerEvent, PointerKind, PointerSource, normalize
from .settings import DrawingSettings, ToolType

__all__ = ['DrawingEngine', 'ImageExporter', 'HistoryManager', 'Layer', 'LayerStore',
           'PointerEvent', 'PointerKind', 'PointerSource', 'normalize',
           'DrawingSettings', 'ToolType']
