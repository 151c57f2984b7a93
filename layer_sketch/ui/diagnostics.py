from PyQt6.QtWidgets import QDockWidget, QFrame, QVBoxLayout, QLabel
from PyQt6.QtCore import QTimer, Qt
import psutil
import os

class DiagnosticsPanel(QDockWidget):
    """Process memory and history depth of the active layer, refreshed every second"""

    def __init__(self, engine, parent=None):
        super().__init__("System", parent)
        self.engine = engine
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)

        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)
        layout = QVBoxLayout(self.container)

        # --- DATA LABELS ---
        self.lbl_ram = QLabel("MEM: 0.0 MB")
        self.lbl_layer = QLabel("LAYER: 0.0 MB")
        self.lbl_undo = QLabel("STEPS: 0 / 0")
        layout.addWidget(self.lbl_ram)
        layout.addWidget(self.lbl_layer)
        layout.addWidget(self.lbl_undo)

        # Timer setup
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.refresh_diagnostics)
        self.timer.start(1000)

        self.engine.history_changed.connect(self.refresh_diagnostics)

    def refresh_diagnostics(self):
        process = psutil.Process(os.getpid())
        mem_mb = process.memory_info().rss / (1024 * 1024)
        self.lbl_ram.setText(f"MEM: {mem_mb:.1f} MB")

        layer = self.engine.active_layer
        self.lbl_layer.setText(f"LAYER: {layer.get_memory_size():.1f} MB")

        stats = self.engine.history.get_stats(layer.id)
        self.lbl_undo.setText(f"STEPS: {stats['undo_count']} / {stats['redo_count']}")
