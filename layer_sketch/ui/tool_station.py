from PyQt6.QtWidgets import (QDockWidget, QFrame, QVBoxLayout, QHBoxLayout, QGridLayout, QPushButton,
                             QLabel, QSlider, QButtonGroup, QColorDialog)
from PyQt6.QtCore import Qt

from .. import config
from ..logic.settings import ToolType

TOOL_LABELS = {
    ToolType.BRUSH: "🖌️",
    ToolType.RECTANGLE: "⬜",
    ToolType.CIRCLE: "⚪",
    ToolType.ERASER: "🧽",
}

class ToolStation(QDockWidget):
    def __init__(self, engine, parent=None):
        super().__init__("Tools", parent)
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
        self.layout.setSpacing(10)
        self.layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        # 4. Content
        title = QLabel("TOOLS")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-weight: bold; font-size: 10px;")
        self.layout.addWidget(title)

        # Tools
        self.tool_group = QButtonGroup(self)
        self.tool_group.setExclusive(True)
        self.tool_buttons = {}
        for tool, label in TOOL_LABELS.items():
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.setFixedSize(40, 40)
            btn.setToolTip(tool.value.capitalize())
            btn.clicked.connect(lambda _, t=tool: self.engine.set_tool(t))
            self.tool_group.addButton(btn)
            self.tool_buttons[tool] = btn
            self.layout.addWidget(btn, alignment=Qt.AlignmentFlag.AlignHCenter)

        # Palette
        palette_layout = QGridLayout()
        for i, hex_color in enumerate(config.PALETTE):
            swatch = QPushButton()
            swatch.setFixedSize(20, 20)
            swatch.setToolTip(hex_color)
            swatch.setStyleSheet(f"background-color: {hex_color}; border-radius: 10px;")
            swatch.clicked.connect(lambda _, c=hex_color: self.engine.set_color(c))
            palette_layout.addWidget(swatch, i // 2, i % 2)
        self.layout.addLayout(palette_layout)

        self.btn_custom_color = QPushButton("…")
        self.btn_custom_color.setToolTip("Custom colour")
        self.btn_custom_color.clicked.connect(self.pick_custom_color)
        self.layout.addWidget(self.btn_custom_color)

        # Brush size
        self.lbl_size = QLabel()
        self.lbl_size.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.lbl_size)

        self.slider_size = QSlider(Qt.Orientation.Vertical)
        self.slider_size.setRange(config.MIN_BRUSH_SIZE, config.MAX_BRUSH_SIZE)
        self.slider_size.valueChanged.connect(self.engine.set_brush_size)
        self.layout.addWidget(self.slider_size, alignment=Qt.AlignmentFlag.AlignHCenter)

        # History / clear
        action_layout = QHBoxLayout()
        for text, tip, slot in [("↩", "Undo", self.engine.undo),
                                ("↪", "Redo", self.engine.redo),
                                ("🗑", "Clear layer", self.engine.clear_active_layer)]:
            btn = QPushButton(text)
            btn.setToolTip(tip)
            btn.clicked.connect(lambda _, s=slot: s())
            action_layout.addWidget(btn)
        self.layout.addLayout(action_layout)

        self.layout.addStretch()

        self.engine.settings_changed.connect(self.sync_from_engine)
        self.sync_from_engine()

    def pick_custom_color(self):
        color = QColorDialog.getColor(self.engine.settings.color, self, "Brush Colour")
        if color.isValid():
            self.engine.set_color(color.name())

    def sync_from_engine(self):
        """Reflect the engine's settings (they can also change from keyboard shortcuts)"""
        settings = self.engine.settings
        self.tool_buttons[settings.tool].setChecked(True)

        self.slider_size.blockSignals(True)
        self.slider_size.setValue(settings.brush_size)
        self.slider_size.blockSignals(False)

        self.lbl_size.setText(f"{settings.brush_size}px")
        self.btn_custom_color.setStyleSheet(f"color: {settings.color.name()};")
