from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QLabel, QSizePolicy

from core.utils import decode_data_url

logger = logging.getLogger(__name__)

MSG_NO_AUDIO = "Upload an audio file and generate images to start the slideshow."
MSG_NO_IMAGES = "No images generated yet. Click 'Generate Slideshow Images'!"


class SlideshowView(QLabel):
    """Shows the controller's current image, scaled to fit."""

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._pixmaps: list[QPixmap | None] = []
        self._has_audio = False

        self.setObjectName("SlideshowView")
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setMinimumSize(480, 270)
        self.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        self.setWordWrap(True)
        self.setStyleSheet("""
        QLabel#SlideshowView {
            background: #1f2937;
            color: #9ca3af;
            font-size: 14px;
            border-radius: 12px;
        }
        """)

        controller.imagesChanged.connect(self._on_images_changed)
        controller.indexChanged.connect(self._on_index_changed)
        self._render()

    def set_has_audio(self, has_audio: bool) -> None:
        self._has_audio = bool(has_audio)
        self._render()

    def _on_images_changed(self, images):
        # decode once per image set, not on every tick
        self._pixmaps = [self._to_pixmap(url) for url in images]
        self._render()

    def _on_index_changed(self, _index: int):
        self._render()

    @staticmethod
    def _to_pixmap(url: str) -> QPixmap | None:
        try:
            _mime, raw = decode_data_url(url)
        except ValueError as e:
            logger.warning("Skipping undisplayable image: %s", e)
            return None
        pm = QPixmap()
        if not pm.loadFromData(raw):
            logger.warning("Image data could not be decoded")
            return None
        return pm

    def _render(self):
        idx = self.controller.current_index
        pm = self._pixmaps[idx] if 0 <= idx < len(self._pixmaps) else None
        if pm is None:
            self.setPixmap(QPixmap())
            self.setText(MSG_NO_IMAGES if self._has_audio else MSG_NO_AUDIO)
            return
        self.setPixmap(pm.scaled(self.size(), Qt.AspectRatioMode.KeepAspectRatio,
                                 Qt.TransformationMode.SmoothTransformation))

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._render()
