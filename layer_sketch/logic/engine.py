"""
Drawing Engine

The single object the UI talks to. It owns:
- Drawing settings (tool, colour, brush size)
- The layer store and the per-layer history
- The tool state machine (Idle -> Dragging -> Idle)
- The surface renderer

Widgets forward pointer events and commands here and repaint when
`surface_changed` fires.
"""

import logging

from PyQt6.QtCore import QObject, QRectF, pyqtSignal
from PyQt6.QtGui import QColor, QImage

from ..config_manager import CONFIG
from .history import HistoryManager
from .layer import encode_png
from .layer_store import LayerStore
from .pointer import normalize
from .renderer import SurfaceRenderer
from .settings import DrawingSettings, ToolType
from .tools import BrushTool, CircleTool, EraserTool, Gesture, RectangleTool

logger = logging.getLogger(__name__)


class DrawingEngine(QObject):
    surface_changed = pyqtSignal()
    layers_changed = pyqtSignal()
    history_changed = pyqtSignal()
    settings_changed = pyqtSignal()

    def __init__(self, width=None, height=None, history_limit=None, record_clear=None):
        super().__init__()
        canvas_cfg = CONFIG['canvas']
        brush_cfg = CONFIG['brush']
        history_cfg = CONFIG['history']

        self.width = width or canvas_cfg['default_width']
        self.height = height or canvas_cfg['default_height']

        # === Data === #
        self.settings = DrawingSettings(brush_cfg['default_tool'], brush_cfg['default_color'], brush_cfg['default_size'])
        self.layers = LayerStore(self.width, self.height)
        self.history = HistoryManager(history_limit or history_cfg['max_states'])
        self.record_clear = history_cfg['record_clear'] if record_clear is None else record_clear
        self.renderer = SurfaceRenderer(self.width, self.height)

        # Screen-space rect of the visible surface; the canvas widget keeps it current
        self.surface_rect = QRectF(0, 0, self.width, self.height)

        # === TOOL MANAGER === #
        self.tools = {
            ToolType.BRUSH: BrushTool(self),
            ToolType.RECTANGLE: RectangleTool(self),
            ToolType.CIRCLE: CircleTool(self),
            ToolType.ERASER: EraserTool(self),
        }
        self._gesture = None

        self._refresh()

    # === STATE === #
    @property
    def gesture(self):
        return self._gesture

    @property
    def is_dragging(self) -> bool:
        return self._gesture is not None

    @property
    def active_layer(self):
        return self.layers.active_layer

    @property
    def surface(self) -> QImage:
        return self.renderer.surface

    def set_surface_rect(self, rect: QRectF):
        self.surface_rect = QRectF(rect)

    # === SETTINGS COMMANDS === #
    def set_tool(self, tool) -> bool:
        return self._settings_updated(self.settings.set_tool(tool))

    def set_color(self, hex_color) -> bool:
        return self._settings_updated(self.settings.set_color(hex_color))

    def set_brush_size(self, size) -> bool:
        return self._settings_updated(self.settings.set_brush_size(size))

    def _settings_updated(self, changed):
        if changed:
            self.settings_changed.emit()
        return changed

    # === POINTER INPUT === #
    def pointer_down(self, event) -> bool:
        if self._gesture is not None:
            logger.debug("Press ignored, gesture already in progress: %r", self._gesture)
            return False

        pos = normalize(event, self.surface_rect)
        self._gesture = Gesture(self.settings.tool, pos, QColor(self.settings.color), self.settings.brush_size)
        self.tools[self._gesture.tool].press(self._gesture)
        self._refresh()
        return True

    def pointer_move(self, event) -> bool:
        gesture = self._gesture
        if gesture is None:
            return False

        pos = normalize(event, self.surface_rect, fallback=gesture.anchor)
        self.tools[gesture.tool].move(gesture, pos)
        gesture.last_point = pos
        self._refresh()
        return True

    def pointer_up(self, event) -> bool:
        return self._finish_gesture(event)

    def pointer_leave(self, event) -> bool:
        # Leaving while pressed commits, exactly like a release
        return self._finish_gesture(event)

    def _finish_gesture(self, event) -> bool:
        gesture = self._gesture
        if gesture is None:
            return False

        pos = normalize(event, self.surface_rect, fallback=gesture.anchor)
        self.tools[gesture.tool].release(gesture, pos)
        gesture.last_point = pos
        gesture.active = False
        self._gesture = None

        layer = self.active_layer
        self.history.record(layer.id, layer.snapshot())
        self._refresh()
        self.history_changed.emit()
        return True

    # === HISTORY COMMANDS === #
    def undo(self) -> bool:
        if self._busy("undo"):
            return False
        if not self.history.undo(self.active_layer):
            return False
        self._refresh()
        self.history_changed.emit()
        return True

    def redo(self) -> bool:
        if self._busy("redo"):
            return False
        if not self.history.redo(self.active_layer):
            return False
        self._refresh()
        self.history_changed.emit()
        return True

    def can_undo(self) -> bool:
        return self.history.can_undo(self.active_layer.id)

    def can_redo(self) -> bool:
        return self.history.can_redo(self.active_layer.id)

    # === LAYER COMMANDS === #
    def add_layer(self):
        layer = self.layers.add_layer()
        logger.info("Added %s", layer.name)
        self.layers_changed.emit()
        return layer

    def select_layer(self, index) -> bool:
        if self._busy("select layer"):
            return False
        if not self.layers.select_layer(index):
            return False
        logger.info("Active layer: %s", self.active_layer.name)
        self._refresh()
        self.layers_changed.emit()
        self.history_changed.emit()
        return True

    def clear_active_layer(self) -> bool:
        if self._busy("clear"):
            return False
        self.layers.clear_active_layer()
        self.renderer.clear()
        if self.record_clear:
            layer = self.active_layer
            self.history.record(layer.id, layer.snapshot())
            self.history_changed.emit()
        self._refresh()
        return True

    def get_active_buffer(self) -> QImage:
        return self.layers.get_active_buffer()

    def set_active_buffer(self, data) -> bool:
        if not self.layers.set_active_buffer(data):
            return False
        self._refresh()
        return True

    # === EXPORT === #
    def export_active_surface_as_image(self) -> bytes:
        """PNG bytes of what is currently visible on the surface."""
        return encode_png(self.renderer.surface)

    # === INTERNALS === #
    def _busy(self, action) -> bool:
        if self._gesture is not None:
            logger.debug("Ignoring %s while a gesture is in progress", action)
            return True
        return False

    def _refresh(self):
        overlay = None
        gesture = self._gesture
        if gesture is not None:
            tool = self.tools[gesture.tool]
            if tool.has_preview:
                overlay = lambda painter: tool.preview(painter, gesture)
        self.renderer.show(self.active_layer.image, overlay)
        self.surface_changed.emit()
