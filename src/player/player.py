# src/player/player.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from PySide6.QtCore import QObject, QUrl, Signal
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer

logger = logging.getLogger(__name__)

class PlayerStatus(Enum):
    STOPPED = auto()
    PLAYING = auto()
    PAUSED = auto()

@dataclass
class NowPlaying:
    title: str
    path: str

class Player(QObject):
    """
    Thin wrapper over QMediaPlayer.

    Besides the raw status it emits three edge events the slideshow listens to:
    `started` (entered PLAYING), `paused` (PLAYING -> PAUSED/STOPPED by the user)
    and `ended` (end of media reached).
    """
    statusChanged = Signal(object)      # PlayerStatus
    positionChanged = Signal(int)       # ms
    durationChanged = Signal(int)       # ms
    trackChanged = Signal(object)       # NowPlaying | None
    errorOccurred = Signal(str)

    started = Signal()
    paused = Signal()
    ended = Signal()

    def __init__(self):
        super().__init__()

        self.status = PlayerStatus.STOPPED
        self.track: NowPlaying | None = None

        self.audio = QAudioOutput()
        self.media = QMediaPlayer()
        self.media.setAudioOutput(self.audio)

        # Default volume (0.0 - 1.0)
        self._volume_0_to_1: float = 0.7
        self.audio.setVolume(self._volume_0_to_1)

        self.media.positionChanged.connect(self.positionChanged.emit)
        self.media.durationChanged.connect(self.durationChanged.emit)
        self.media.playbackStateChanged.connect(self._on_state_changed)
        self.media.mediaStatusChanged.connect(self._on_media_status)
        self.media.errorOccurred.connect(self._on_error)

        self._at_end = False

    # ----------------------------
    # QMediaPlayer handlers
    # ----------------------------

    def _on_state_changed(self, state: QMediaPlayer.PlaybackState) -> None:
        if state == QMediaPlayer.PlaybackState.PlayingState:
            self._at_end = False
            self._set_status(PlayerStatus.PLAYING)
        elif state == QMediaPlayer.PlaybackState.PausedState:
            self._set_status(PlayerStatus.PAUSED)
        else:
            self._set_status(PlayerStatus.STOPPED)

    def _on_media_status(self, status: QMediaPlayer.MediaStatus) -> None:
        if status == QMediaPlayer.MediaStatus.EndOfMedia:
            self._at_end = True
            self._set_status(PlayerStatus.STOPPED)
            self.ended.emit()

    def _on_error(self, error, error_string: str = "") -> None:
        msg = error_string or self.media.errorString() or str(error)
        logger.error("Audio playback error: %s", msg)
        self.errorOccurred.emit(msg)

    # ----------------------------
    # Shared helpers
    # ----------------------------

    def _set_status(self, new_status: PlayerStatus) -> None:
        if self.status == new_status:
            return
        old = self.status
        self.status = new_status
        self.statusChanged.emit(self.status)

        if new_status == PlayerStatus.PLAYING:
            self.started.emit()
        elif old == PlayerStatus.PLAYING and not self._at_end:
            # end of media is reported through `ended` only
            self.paused.emit()

    # ----------------------------
    # Public API
    # ----------------------------

    def load_file(self, path: str, meta: NowPlaying | None = None) -> None:
        """Load a file without starting playback."""
        self.stop()
        self.track = meta
        self.trackChanged.emit(self.track)
        self.media.setSource(QUrl.fromLocalFile(path))

    def play(self) -> None:
        if self.track is None:
            return
        self.media.play()

    def pause(self) -> None:
        self.media.pause()

    def stop(self) -> None:
        self.media.stop()

    def toggle_play_pause(self) -> None:
        if self.media.playbackState() == QMediaPlayer.PlaybackState.PlayingState:
            self.pause()
        else:
            self.play()

    def seek_ms(self, ms: int) -> None:
        self.media.setPosition(max(0, int(ms)))

    def set_volume(self, volume_0_to_1: float) -> None:
        v = min(1.0, max(0.0, float(volume_0_to_1)))
        self._volume_0_to_1 = v
        self.audio.setVolume(v)

    # convenient getters for UI
    def position_ms(self) -> int:
        return int(self.media.position())

    def duration_ms(self) -> int:
        return int(self.media.duration())

    def is_playing(self) -> bool:
        return self.status == PlayerStatus.PLAYING
