import logging
import sys

from PyQt6.QtWidgets import QApplication, QMainWindow, QFileDialog, QScrollArea
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction

from . import styles
from .config_manager import CONFIG
from .logic import DrawingEngine, ImageExporter
from .ui import Canvas, DiagnosticsPanel, LayerPanel, StartupDialog, ToolStation
from .utils import setup_logging

logger = logging.getLogger(__name__)

class LayerSketch(QMainWindow):
    def __init__(self, width=None, height=None):
        super().__init__()

        # 1. Config & Window Setup
        app_settings = CONFIG['app_settings']
        self.setWindowTitle(app_settings['title'])
        self.resize(app_settings['initial_width'], app_settings['initial_height'])
        self.setStyleSheet(styles.get_stylesheet())

        # 2. The Engine & Canvas
        self.engine = DrawingEngine(width, height)
        self.canvas = Canvas(self.engine)
        scroll = QScrollArea()
        scroll.setWidget(self.canvas)
        scroll.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(scroll)

        # 3. The Docks
        self.station = ToolStation(self.engine, parent=self)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.station)

        self.layer_panel = LayerPanel(self.engine, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.layer_panel)

        self.diagnostics = DiagnosticsPanel(self.engine, self)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.diagnostics)
        self.diagnostics.hide()

        # 4. Menus & Actions
        self.setup_actions()
        self.setup_menubar()

        self.canvas.setFocus()

    def setup_actions(self):
        """Define logic for menus"""
        self.act_save = QAction("Save as Image…", self)
        self.act_save.triggered.connect(self.save_image)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        # Shortcuts are handled by the canvas, these are for the menu only
        self.act_undo = QAction("Undo\tCtrl+Z", self)
        self.act_undo.triggered.connect(self.engine.undo)
        self.act_redo = QAction("Redo\tCtrl+Y", self)
        self.act_redo.triggered.connect(self.engine.redo)
        self.act_clear = QAction("Clear Layer", self)
        self.act_clear.triggered.connect(self.engine.clear_active_layer)

        self.act_add_layer = QAction("Add Layer", self)
        self.act_add_layer.triggered.connect(self.engine.add_layer)

        self.engine.history_changed.connect(self.update_history_actions)
        self.update_history_actions()

    def setup_menubar(self):
        """Create the top text menu"""
        menu = self.menuBar()

        file_menu = menu.addMenu("&File")
        file_menu.addAction(self.act_save)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        edit_menu = menu.addMenu("&Edit")
        edit_menu.addAction(self.act_undo)
        edit_menu.addAction(self.act_redo)
        edit_menu.addAction(self.act_clear)

        layer_menu = menu.addMenu("&Layer")
        layer_menu.addAction(self.act_add_layer)

        # Window menu lets users bring back closed panels
        win_menu = menu.addMenu("&Window")
        win_menu.addAction(self.station.toggleViewAction())
        win_menu.addAction(self.layer_panel.toggleViewAction())
        win_menu.addAction(self.diagnostics.toggleViewAction())

    def update_history_actions(self):
        self.act_undo.setEnabled(self.engine.can_undo())
        self.act_redo.setEnabled(self.engine.can_redo())

    def save_image(self):
        filename, _ = QFileDialog.getSaveFileName(self, "Save as Image", CONFIG['canvas']['export_filename'],
                                                  "PNG Image (*.png)")
        if not filename: return
        ImageExporter.save_png(self.engine, filename)


def main():
    setup_logging(CONFIG['app_settings'].get('log_level', 'INFO'))
    app = QApplication(sys.argv)

    # === STARTUP === #
    dialog = StartupDialog()
    if not dialog.exec():
        logger.info("User cancelled startup.")
        sys.exit(0)

    w, h = dialog.get_dimensions()
    window = LayerSketch(width=w, height=h)
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
