from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QSlider, QWidget

from core.slideshow import SlideshowStatus


def format_ms(ms: int) -> str:
    minutes, seconds = divmod(max(0, int(ms)) // 1000, 60)
    return f"{minutes}:{seconds:02d}"


class TransportBar(QWidget):
    """
    Play/pause and seek for the loaded song, plus whether the slideshow is
    currently rotating. The button label follows the player's started /
    paused / ended events, the same ones that drive the slideshow.
    """

    def __init__(self, player, slideshow, parent=None):
        super().__init__(parent)
        self.player = player
        self._duration_ms = 0

        row = QHBoxLayout(self)
        row.setContentsMargins(10, 6, 10, 6)

        self.btn_play = QPushButton("Play")
        self.btn_play.setObjectName("BtnPlay")
        self.btn_play.setEnabled(False)

        self.position = QSlider(Qt.Orientation.Horizontal)
        self.position.setEnabled(False)

        self.lbl_time = QLabel(self._time_text(0))
        self.lbl_slideshow = QLabel()
        self.lbl_slideshow.setObjectName("SlideshowState")
        self._on_slideshow_status(slideshow.status)

        row.addWidget(self.btn_play)
        row.addWidget(self.position, 1)
        row.addWidget(self.lbl_time)
        row.addWidget(self.lbl_slideshow)

        slideshow.statusChanged.connect(self._on_slideshow_status)

        if player:
            self.btn_play.clicked.connect(player.toggle_play_pause)
            player.trackChanged.connect(self._on_track_changed)
            player.started.connect(lambda: self.btn_play.setText("Pause"))
            player.paused.connect(lambda: self.btn_play.setText("Play"))
            player.ended.connect(lambda: self.btn_play.setText("Play"))
            player.durationChanged.connect(self._on_duration)
            player.positionChanged.connect(self._on_position)
            # seek once the handle is let go, not on every pixel of the drag
            self.position.sliderReleased.connect(lambda: player.seek_ms(self.position.value()))

        self.setObjectName("TransportBar")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet("""
        QWidget#TransportBar { background: #111827; border-radius: 10px; }
        QPushButton#BtnPlay {
            background: #60a5fa; color: #1e1b4b; border: none;
            border-radius: 12px; padding: 4px 14px; font-weight: 700;
        }
        QPushButton#BtnPlay:disabled { background: #4b5563; color: #9ca3af; }
        QLabel { color: #d1d5db; font-size: 11px; }
        QLabel#SlideshowState { color: #a5b4fc; }
        """)

    def _time_text(self, position_ms: int) -> str:
        return f"{format_ms(position_ms)} / {format_ms(self._duration_ms)}"

    def _on_track_changed(self, now_playing):
        loaded = now_playing is not None
        self.btn_play.setText("Play")
        self.btn_play.setEnabled(loaded)
        self.position.setEnabled(loaded)
        self.position.setValue(0)
        self.lbl_time.setText(self._time_text(0))

    def _on_duration(self, ms: int):
        self._duration_ms = int(ms)
        self.position.setRange(0, max(0, self._duration_ms))

    def _on_position(self, ms: int):
        if not self.position.isSliderDown():
            self.position.setValue(int(ms))
        self.lbl_time.setText(self._time_text(ms))

    def _on_slideshow_status(self, status):
        running = status is SlideshowStatus.PLAYING
        self.lbl_slideshow.setText("Slideshow running" if running else "Slideshow paused")
