from PyQt6.QtWidgets import (QDialog, QVBoxLayout, QLabel, QSpinBox,
                            QPushButton, QHBoxLayout, QFormLayout)
from PyQt6.QtCore import Qt

from ..config_manager import CONFIG

class StartupDialog(QDialog):
    def __init__(self):
        super().__init__()
        canvas_cfg = CONFIG['canvas']
        self.setWindowTitle("New Drawing")
        self.setFixedSize(300, 200)

        layout = QVBoxLayout(self)

        # Title
        title = QLabel(CONFIG['app_settings']['title'])
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 18px; font-weight: bold; margin-bottom: 10px;")
        layout.addWidget(title)

        # Form
        form_layout = QFormLayout()

        self.spin_width = QSpinBox()
        self.spin_width.setRange(100, 4000)
        self.spin_width.setValue(canvas_cfg['default_width'])
        self.spin_width.setSuffix(" px")

        self.spin_height = QSpinBox()
        self.spin_height.setRange(100, 4000)
        self.spin_height.setValue(canvas_cfg['default_height'])
        self.spin_height.setSuffix(" px")

        form_layout.addRow("Width:", self.spin_width)
        form_layout.addRow("Height:", self.spin_height)
        layout.addLayout(form_layout)

        # Buttons
        btn_layout = QHBoxLayout()
        self.btn_create = QPushButton("Create Canvas")
        self.btn_create.clicked.connect(self.accept)

        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.clicked.connect(self.reject)

        btn_layout.addWidget(self.btn_cancel)
        btn_layout.addWidget(self.btn_create)
        layout.addLayout(btn_layout)

    def get_dimensions(self):
        return self.spin_width.value(), self.spin_height.value()
