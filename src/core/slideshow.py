# core/slideshow.py
from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Iterable, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from core.config import SLIDESHOW_INTERVAL_MS

logger = logging.getLogger(__name__)


class SlideshowStatus(Enum):
    IDLE = auto()
    PLAYING = auto()


class SlideshowController(QObject):
    """
    Rotates through the generated images while the audio is playing.

    The controller is the only writer of the image list, the current index and
    the timer. Invariant: the timer is active iff audio is playing and there is
    at least one image.
    """

    indexChanged = Signal(int)
    imagesChanged = Signal(object)     # tuple[str, ...]
    statusChanged = Signal(object)     # SlideshowStatus

    def __init__(self, interval_ms: int = SLIDESHOW_INTERVAL_MS, parent: QObject | None = None):
        super().__init__(parent)
        self._interval_ms = int(interval_ms)
        self._images: tuple[str, ...] = ()
        self._index = 0
        self._audio_playing = False
        self._status = SlideshowStatus.IDLE

        self._timer: Optional[QTimer] = None

    # ----------------------------
    # Read-only state
    # ----------------------------

    @property
    def status(self) -> SlideshowStatus:
        return self._status

    @property
    def images(self) -> tuple[str, ...]:
        return self._images

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_image(self) -> Optional[str]:
        if not self._images:
            return None
        return self._images[self._index]

    @property
    def timer_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    # ----------------------------
    # Playback events
    # ----------------------------

    def on_playback_started(self) -> None:
        self._audio_playing = True
        if self._status is SlideshowStatus.PLAYING:
            return
        if self._images:
            self._start_timer()

    def on_playback_paused(self) -> None:
        self._audio_playing = False
        self._stop_timer()

    def on_playback_ended(self) -> None:
        self._audio_playing = False
        self._stop_timer()

    # ----------------------------
    # Image set
    # ----------------------------

    def on_images_replaced(self, images: Iterable[str]) -> None:
        self._images = tuple(images)
        self._index = 0
        self.imagesChanged.emit(self._images)
        self.indexChanged.emit(self._index)

        if not self._images:
            self._stop_timer()
        elif self._audio_playing and self._status is SlideshowStatus.IDLE:
            # images arrived while the song was already running
            self._start_timer()

    def clear(self) -> None:
        self.on_images_replaced(())

    # ----------------------------
    # Teardown
    # ----------------------------

    def dispose(self) -> None:
        self._audio_playing = False
        self._stop_timer()
        self._images = ()
        self._index = 0

    def __enter__(self) -> "SlideshowController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # ----------------------------
    # Timer
    # ----------------------------

    def _on_tick(self) -> None:
        # only the owned timer calls this; a tick queued before a pause is dropped
        if self._status is not SlideshowStatus.PLAYING:
            return
        if not self._images:
            self._stop_timer()
            return
        self._index = (self._index + 1) % len(self._images)
        self.indexChanged.emit(self._index)

    def _start_timer(self) -> None:
        # never two live timers: drop the old handle first
        self._stop_timer()

        timer = QTimer(self)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(self._on_tick)
        timer.start()
        self._timer = timer

        logger.debug("Slideshow timer started (%d ms, %d images)", self._interval_ms, len(self._images))
        self._set_status(SlideshowStatus.PLAYING)

    def _stop_timer(self) -> None:
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.stop()
            timer.timeout.disconnect(self._on_tick)
            timer.deleteLater()
            logger.debug("Slideshow timer stopped")
        self._set_status(SlideshowStatus.IDLE)

    def _set_status(self, new_status: SlideshowStatus) -> None:
        if self._status != new_status:
            self._status = new_status
            self.statusChanged.emit(self._status)
