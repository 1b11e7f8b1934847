# ui/workers/generation_worker.py
from __future__ import annotations

import logging

from PySide6.QtCore import QThread, Signal

from core.orchestrator import GenerationOrchestrator, GenerationRequest, MSG_UNEXPECTED, Outcome

logger = logging.getLogger(__name__)

class GenerationWorker(QThread):
    progress = Signal(int, int)           # image index (1-based), total
    finished_outcome = Signal(int, object)  # run_id, Outcome

    def __init__(self, orchestrator: GenerationOrchestrator, request: GenerationRequest,
                 count: int, run_id: int, parent=None):
        super().__init__(parent)
        self.orchestrator = orchestrator
        self.request = request
        self.count = count
        self.run_id = run_id

    def run(self):
        # The orchestrator already turns generation failures into an Outcome;
        # this guard only catches bugs outside that boundary so the UI never hangs.
        try:
            outcome = self.orchestrator.run_request(
                self.request, self.count, progress=self.progress.emit
            )
        except Exception:
            logger.exception("Generation worker crashed")
            outcome = Outcome.failed(MSG_UNEXPECTED)
        self.finished_outcome.emit(self.run_id, outcome)
