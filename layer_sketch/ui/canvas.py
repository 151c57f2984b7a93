from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QEvent, QPoint, QPointF, QRectF, QSizeF
from PyQt6.QtGui import QPainter, QPen, QColor, QCursor

from .. import config
from ..config_manager import CONFIG
from ..logic.pointer import PointerKind, from_mouse_event, from_touch_event
from ..logic.settings import ToolType

TOUCH_KINDS = {
    QEvent.Type.TouchBegin: PointerKind.DOWN,
    QEvent.Type.TouchUpdate: PointerKind.MOVE,
    QEvent.Type.TouchEnd: PointerKind.UP,
    QEvent.Type.TouchCancel: PointerKind.LEAVE,
}

class Canvas(QWidget):
    """Visible drawing surface. Forwards input to the engine and paints its surface."""

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents)
        self.setFixedSize(engine.width, engine.height)

        # === Cursor State === #
        self.cursor_pos = QPointF(0, 0)
        self.show_cursor_ghost = False

        self.engine.surface_changed.connect(self.update)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(CONFIG['theme']['canvas_bg']))
        painter.drawImage(0, 0, self.engine.surface)

        # === Cursor Ghost === #
        tool = self.engine.settings.tool
        if self.show_cursor_ghost and tool in (ToolType.BRUSH, ToolType.ERASER):
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            size = self.engine.settings.brush_size
            painter.setPen(QPen(QColor(0, 0, 0, 150), 1))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            if tool == ToolType.ERASER:
                painter.drawRect(QRectF(self.cursor_pos.x() - size / 2, self.cursor_pos.y() - size / 2, size, size))
            else:
                painter.drawEllipse(self.cursor_pos, size / 2, size / 2)

    def sync_surface_rect(self):
        top_left = QPointF(self.mapToGlobal(QPoint(0, 0)))
        self.engine.set_surface_rect(QRectF(top_left, QSizeF(self.size())))

    # === DELEGATED INPUT EVENTS === #
    def mousePressEvent(self, event):
        self.setFocus()
        if event.button() != Qt.MouseButton.LeftButton: return
        self.sync_surface_rect()
        self.engine.pointer_down(from_mouse_event(PointerKind.DOWN, event.globalPosition()))

    def mouseMoveEvent(self, event):
        self.cursor_pos = event.position()
        self.show_cursor_ghost = True
        self.update()  # For cursor ghost

        if self.engine.is_dragging:
            self.engine.pointer_move(from_mouse_event(PointerKind.MOVE, event.globalPosition()))

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton: return
        self.engine.pointer_up(from_mouse_event(PointerKind.UP, event.globalPosition()))

    def leaveEvent(self, event):
        self.show_cursor_ghost = False
        if self.engine.is_dragging:
            self.engine.pointer_leave(from_mouse_event(PointerKind.LEAVE, QPointF(QCursor.pos())))
        self.update()
        super().leaveEvent(event)

    def event(self, event):
        kind = TOUCH_KINDS.get(event.type())
        if kind is None:
            return super().event(event)

        if kind is PointerKind.DOWN:
            self.sync_surface_rect()
            self.engine.pointer_down(from_touch_event(kind, event))
        elif kind is PointerKind.MOVE:
            self.engine.pointer_move(from_touch_event(kind, event))
        elif kind is PointerKind.UP:
            self.engine.pointer_up(from_touch_event(kind, event))
        else:
            self.engine.pointer_leave(from_touch_event(kind, event))
        event.accept()
        return True

    def keyPressEvent(self, event):
        key = event.key()
        modifiers = event.modifiers()

        # === Global Undo/Redo === #
        if modifiers & Qt.KeyboardModifier.ControlModifier:
            if key == Qt.Key.Key_Z and modifiers & Qt.KeyboardModifier.ShiftModifier:
                self.engine.redo(); return
            if key == Qt.Key.Key_Z:
                self.engine.undo(); return
            if key == Qt.Key.Key_Y:
                self.engine.redo(); return

        self.handle_shortcuts(event)

    def handle_shortcuts(self, event):
        tool = config.TOOL_SHORTCUTS.get(event.text().upper())
        if tool:
            self.engine.set_tool(tool)
        elif event.key() == Qt.Key.Key_BracketLeft:
            self.engine.set_brush_size(self.engine.settings.brush_size - 1)
        elif event.key() == Qt.Key.Key_BracketRight:
            self.engine.set_brush_size(self.engine.settings.brush_size + 1)
        else:
            super().keyPressEvent(event)
            return
        self.update()
