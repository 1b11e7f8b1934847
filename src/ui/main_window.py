from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt
from PySide6.QtGui import QShortcut, QKeySequence
import logging

from core.orchestrator import GenerationOrchestrator, ValidationError, OutcomeStatus, validate_request
from core.slideshow import SlideshowController
from library.audio_file import read_song_title
from player.player import NowPlaying
from ui.widgets.transport_bar import TransportBar
from ui.widgets.controls_panel import ControlsPanel
from ui.widgets.slideshow_view import SlideshowView
from ui.workers.generation_worker import GenerationWorker

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, app_state, orchestrator: GenerationOrchestrator):
        super().__init__()
        self.setWindowTitle("SongCanvas")
        self.resize(760, 820)
        self.app_state = app_state
        self.orchestrator = orchestrator
        self.config = app_state.config

        self._worker: GenerationWorker | None = None
        self.slideshow = SlideshowController(self.config.slideshow_interval_ms, parent=self)

        # --- Player -> slideshow ---
        player = self.app_state.player
        if player:
            player.started.connect(self.slideshow.on_playback_started)
            player.paused.connect(self.slideshow.on_playback_paused)
            player.ended.connect(self.slideshow.on_playback_ended)
            player.errorOccurred.connect(lambda msg: self.app_state.notify(f"Playback error: {msg}", "error"))

        # --- Shortcuts ---
        QShortcut(QKeySequence("Ctrl+Space"), self, activated=self._toggle_play)

        self.central_widget = QWidget()
        self.central_widget.setObjectName("Central")
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)
        self.layout.setContentsMargins(18, 14, 18, 10)
        self.layout.setSpacing(14)

        header = QLabel("Song Canvas")
        header.setObjectName("Header")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subheader = QLabel("Turn your favorite tunes into AI-generated visual art!")
        subheader.setObjectName("SubHeader")
        subheader.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(header)
        self.layout.addWidget(subheader)

        # --- Error region ---
        self.error_label = QLabel()
        self.error_label.setObjectName("ErrorBanner")
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        self.layout.addWidget(self.error_label)

        # --- Controls ---
        self.controls = ControlsPanel(self)
        self.controls.set_song_title(self.app_state.song_title)
        self.layout.addWidget(self.controls)

        # --- Slideshow + transport ---
        self.slideshow_view = SlideshowView(self.slideshow, self)
        self.layout.addWidget(self.slideshow_view, 1)

        self.transport = TransportBar(player, self.slideshow, self)
        self.layout.addWidget(self.transport)

        # --- Wiring ---
        self.controls.fileSelected.connect(self.on_file_selected)
        self.controls.titleChanged.connect(self._on_title_changed)
        self.controls.styleChanged.connect(self._on_style_changed)
        self.controls.generateRequested.connect(self.generate_images)

        self.app_state.error_changed.connect(self._on_error_changed)
        self.app_state.generating_changed.connect(lambda _v: self._refresh_generate_button())
        self.app_state.notification.connect(self._on_notify)

        self._refresh_generate_button()
        self.show_queued_notifications()

        self.setStyleSheet("""
            QWidget#Central {
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1, stop:0 #6b21a8, stop:1 #312e81);
            }
            QLabel#Header {
                color: #ffffff;
                font-size: 30px;
                font-weight: 800;
            }
            QLabel#SubHeader {
                color: #c7d2fe;
                font-size: 14px;
            }
            QLabel#ErrorBanner {
                background: #dc2626;
                color: #ffffff;
                font-weight: 600;
                font-size: 13px;
                border-radius: 10px;
                padding: 10px;
            }
            """)

    # ------------------ form ------------------
    def on_file_selected(self, path: str):
        # new audio: forget the previous images and guess a title
        self.slideshow.clear()
        self.app_state.set_error(None)

        title = read_song_title(path)
        self.app_state.audio_path = path
        self.controls.set_file_name(path)
        self.controls.set_song_title(title)   # -> _on_title_changed
        self.slideshow_view.set_has_audio(True)

        if self.app_state.player:
            self.app_state.player.load_file(path, NowPlaying(title=title, path=path))

        logger.info("Loaded audio file %s", path)
        self._refresh_generate_button()

    def _on_title_changed(self, title: str):
        self.app_state.song_title = title
        self._refresh_generate_button()

    def _on_style_changed(self, style_id: str):
        self.app_state.style_id = style_id

    def _refresh_generate_button(self):
        self.controls.set_generating(self.app_state.is_generating, self.app_state.can_generate())

    # ------------------ generation ------------------
    def generate_images(self):
        if self.app_state.is_generating:
            return
        self.app_state.set_error(None)

        try:
            request = validate_request(self.app_state.song_title, self.app_state.style_id)
        except ValidationError as e:
            self.app_state.set_error(str(e))
            return

        # Eager clear: the slideshow is blank while the new images are generated.
        self.slideshow.clear()

        run_id = self.app_state.begin_run()
        count = self.config.image_count
        self.statusBar().showMessage(f"Generating {count} images…")

        worker = GenerationWorker(self.orchestrator, request, count, run_id, parent=self)
        worker.progress.connect(self._on_generation_progress)
        worker.finished_outcome.connect(self._on_generation_finished)
        # forget the handle before Qt frees the finished thread
        worker.finished.connect(lambda: self._release_worker(worker))
        worker.finished.connect(worker.deleteLater)
        self._worker = worker
        worker.start()

    def _release_worker(self, worker: GenerationWorker):
        if self._worker is worker:
            self._worker = None

    def _on_generation_progress(self, index: int, total: int):
        self.statusBar().showMessage(f"Generating image {index} of {total}…")

    def _on_generation_finished(self, run_id: int, outcome):
        if not self.app_state.is_current_run(run_id):
            logger.info("Dropping outcome of stale generation run %d", run_id)
            return

        self.app_state.set_generating(False)

        if not outcome.ok:
            self.app_state.set_error(outcome.message)
            self.statusBar().showMessage("Image generation failed.", 4000)
            return

        self.slideshow.on_images_replaced(outcome.images)
        msg = f"Generated {len(outcome.images)} of {self.config.image_count} images."
        self.statusBar().showMessage(msg, 4000)
        if outcome.status is OutcomeStatus.PARTIAL:
            self.app_state.notify(msg, "warn")

    # ------------------ player + notifications ------------------
    def _toggle_play(self):
        if self.app_state.player:
            self.app_state.player.toggle_play_pause()

    def _on_error_changed(self, message):
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))

    def _on_notify(self, n):
        # n is core.state.Notify
        msg = getattr(n, "message", "") or ""
        if not msg:
            return
        kind = (getattr(n, "notify_type", "info") or "info").lower()
        if kind == "error":
            self.app_state.set_error(msg)
        self.statusBar().showMessage(msg, 5000)

    def show_queued_notifications(self):
        for n in self.app_state.queued_notifications:
            self._on_notify(n)
        self.app_state.queued_notifications.clear()

    def closeEvent(self, event):
        # the slideshow timer is released before the window goes away
        self.slideshow.dispose()
        if self.app_state.player:
            self.app_state.player.stop()
        if self._worker is not None and self._worker.isRunning():
            # no cancellation point inside a run; wait for the current request
            self._worker.wait()
        super().closeEvent(event)
