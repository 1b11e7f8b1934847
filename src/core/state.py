from __future__ import annotations
from dataclasses import dataclass
from PySide6.QtCore import QObject, Signal, Slot

from core.styles import DEFAULT_STYLE_ID

@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warn/error

class AppState(QObject):
    notification = Signal(object)      # emits Notify
    error_changed = Signal(object)     # str | None
    generating_changed = Signal(bool)

    def __init__(self, config=None):
        super().__init__()
        self.config = config
        self.player = None

        self.audio_path: str | None = None
        self.song_title: str = ""
        self.style_id: str = DEFAULT_STYLE_ID

        self.error: str | None = None
        self.is_generating = False
        self.run_id = 0   # bumped per generation run; stale outcomes are dropped

        self.queued_notifications: list[Notify] = []

    @property
    def has_audio_file(self) -> bool:
        return bool(self.audio_path)

    def can_generate(self) -> bool:
        return self.has_audio_file and bool(self.song_title.strip()) and not self.is_generating

    def set_error(self, message: str | None) -> None:
        if message != self.error:
            self.error = message
            self.error_changed.emit(message)

    def set_generating(self, value: bool) -> None:
        if value != self.is_generating:
            self.is_generating = value
            self.generating_changed.emit(value)

    def begin_run(self) -> int:
        self.run_id += 1
        self.set_generating(True)
        return self.run_id

    def is_current_run(self, run_id: int) -> bool:
        return run_id == self.run_id

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.notification.emit(Notify(message=message, notify_type=notify_type))
