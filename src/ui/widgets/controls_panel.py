from __future__ import annotations

import os

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QButtonGroup,
    QFileDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from core.styles import ART_STYLES, DEFAULT_STYLE_ID
from library.audio_file import AUDIO_FILE_FILTER


class ControlsPanel(QWidget):
    """
    Audio picker, song title, art style radios and the Generate button.
    Holds no state of its own beyond what the widgets show; the window decides
    when the button is enabled.
    """
    fileSelected = Signal(str)
    titleChanged = Signal(str)
    styleChanged = Signal(str)
    generateRequested = Signal()

    STYLE_COLUMNS = 3

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("ControlsPanel")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        root = QVBoxLayout(self)
        root.setContentsMargins(16, 14, 16, 14)
        root.setSpacing(12)

        heading = QLabel("Audio & Style Selection")
        heading.setObjectName("PanelHeading")
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(heading)

        # --- audio file ---
        file_row = QHBoxLayout()
        self.btn_browse = QPushButton("Choose audio file…")
        self.btn_browse.clicked.connect(self._browse)
        self.lbl_file = QLabel("No file selected")
        self.lbl_file.setObjectName("FileLabel")
        file_row.addWidget(self.btn_browse)
        file_row.addWidget(self.lbl_file, 1)
        root.addLayout(file_row)

        # --- title ---
        root.addWidget(QLabel("Song title (for image generation):"))
        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Enter song title (e.g., 'A whimsical forest journey')")
        self.title_edit.textChanged.connect(self.titleChanged.emit)
        root.addWidget(self.title_edit)

        # --- styles ---
        root.addWidget(QLabel("Choose an art style:"))
        grid = QGridLayout()
        grid.setHorizontalSpacing(12)
        self.style_group = QButtonGroup(self)
        self.style_group.setExclusive(True)
        self._style_buttons: dict[str, QRadioButton] = {}
        for i, style in enumerate(ART_STYLES):
            rb = QRadioButton(style.name)
            rb.setProperty("style_id", style.id)
            rb.setChecked(style.id == DEFAULT_STYLE_ID)
            self.style_group.addButton(rb, i)
            self._style_buttons[style.id] = rb
            grid.addWidget(rb, i // self.STYLE_COLUMNS, i % self.STYLE_COLUMNS)
        self.style_group.buttonToggled.connect(self._on_style_toggled)
        root.addLayout(grid)

        # --- generate ---
        self.btn_generate = QPushButton("Generate Slideshow Images")
        self.btn_generate.setObjectName("BtnGenerate")
        self.btn_generate.setEnabled(False)
        self.btn_generate.clicked.connect(self.generateRequested.emit)
        root.addWidget(self.btn_generate, 0, Qt.AlignmentFlag.AlignHCenter)

        self._apply_styles()

    # ------------------ accessors ------------------
    def song_title(self) -> str:
        return self.title_edit.text()

    def set_song_title(self, title: str) -> None:
        self.title_edit.setText(title)

    def selected_style_id(self) -> str | None:
        btn = self.style_group.checkedButton()
        return btn.property("style_id") if btn else None

    def set_file_name(self, path: str | None) -> None:
        self.lbl_file.setText(os.path.basename(path) if path else "No file selected")

    def set_generating(self, generating: bool, enabled: bool) -> None:
        self.btn_generate.setText("Generating…" if generating else "Generate Slideshow Images")
        self.btn_generate.setEnabled(enabled)
        self.btn_browse.setEnabled(not generating)

    # ------------------ handlers ------------------
    def _browse(self):
        path, _ = QFileDialog.getOpenFileName(self, "Choose audio file", "", AUDIO_FILE_FILTER)
        if path:
            self.fileSelected.emit(path)

    def _on_style_toggled(self, button, checked: bool):
        if checked:
            self.styleChanged.emit(button.property("style_id"))

    def _apply_styles(self):
        self.setStyleSheet("""
        QWidget#ControlsPanel {
            background: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 #2563eb, stop:1 #4338ca);
            border-radius: 12px;
        }
        QLabel { color: #dbeafe; font-size: 12px; }
        QLabel#PanelHeading { color: #ffffff; font-size: 18px; font-weight: 800; }
        QLabel#FileLabel { color: #e0e7ff; }
        QLineEdit {
            background: #4338ca;
            border: 1px solid #3b82f6;
            border-radius: 8px;
            padding: 6px 8px;
            color: #ffffff;
        }
        QRadioButton { color: #ffffff; padding: 4px; }
        QPushButton {
            background: #dbeafe;
            color: #1d4ed8;
            border: none;
            border-radius: 12px;
            padding: 6px 12px;
            font-weight: 600;
        }
        QPushButton#BtnGenerate {
            background: #60a5fa;
            color: #312e81;
            border-radius: 16px;
            padding: 8px 24px;
            font-size: 14px;
            font-weight: 700;
        }
        QPushButton#BtnGenerate:hover { background: #93c5fd; }
        QPushButton:disabled { background: #6b7280; color: #d1d5db; }
        """)
