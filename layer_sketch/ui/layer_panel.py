from PyQt6.QtWidgets import QDockWidget, QFrame, QVBoxLayout, QPushButton, QListWidget, QHBoxLayout
from PyQt6.QtCore import Qt

class LayerPanel(QDockWidget):
    def __init__(self, engine, parent=None):
        super().__init__("Layers", parent)
        self.engine = engine

        # 1. Dock Config
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)
        self.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)

        # 2. Container
        self.container = QFrame()
        self.container.setObjectName("PanelContent")
        self.setWidget(self.container)

        # 3. Layout
        self.layout = QVBoxLayout(self.container)
        self.layout.setContentsMargins(10, 10, 10, 10)

        # 4. Content
        self.layer_list = QListWidget()
        self.layer_list.currentRowChanged.connect(self.on_row_changed)
        self.layout.addWidget(self.layer_list)

        # Button Row (layers are append-only, so there is no delete)
        btn_layout = QHBoxLayout()
        self.btn_add = QPushButton("+ Layer")
        self.btn_add.clicked.connect(lambda: self.engine.add_layer())
        btn_layout.addWidget(self.btn_add)
        self.layout.addLayout(btn_layout)

        self.engine.layers_changed.connect(self.refresh)
        self.refresh()

    def refresh(self):
        self.layer_list.blockSignals(True)
        self.layer_list.clear()
        self.layer_list.addItems([layer.name for layer in self.engine.layers.layers])
        self.layer_list.setCurrentRow(self.engine.layers.active_index)
        self.layer_list.blockSignals(False)

    def on_row_changed(self, row):
        if not self.engine.select_layer(row):
            # Rejected (e.g. mid-gesture): put the highlight back
            self.refresh()
