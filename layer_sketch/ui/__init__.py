from .canvas import Canvas
from .diagnostics import DiagnosticsPanel
from .layer_panel import LayerPanel
from .startup_dialog import StartupDialog
from .tool_station import ToolStation

__all__ = ['Canvas', 'DiagnosticsPanel', 'LayerPanel', 'StartupDialog', 'ToolStation']
