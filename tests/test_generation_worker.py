"""
The worker's run() is called directly on the test thread; signals are delivered
synchronously to the connected Python callables.
"""
from __future__ import annotations

from core.orchestrator import MSG_UNEXPECTED, GenerationOrchestrator, OutcomeStatus, validate_request
from ui.workers.generation_worker import GenerationWorker


def test_worker_emits_progress_and_outcome(fake_client) -> None:
    request = validate_request("Sunset Drive", "cartoon")
    worker = GenerationWorker(GenerationOrchestrator(fake_client), request, count=3, run_id=7)

    progress, finished = [], []
    worker.progress.connect(lambda i, n: progress.append((i, n)))
    worker.finished_outcome.connect(lambda run_id, outcome: finished.append((run_id, outcome)))

    worker.run()

    assert progress == [(1, 3), (2, 3), (3, 3)]
    assert len(finished) == 1
    run_id, outcome = finished[0]
    assert run_id == 7
    assert outcome.status is OutcomeStatus.FULL
    assert len(outcome.images) == 3


def test_worker_never_leaves_ui_waiting() -> None:
    class BrokenOrchestrator:
        def run_request(self, *args, **kwargs):
            raise RuntimeError("bug")

    worker = GenerationWorker(BrokenOrchestrator(), validate_request("x", "cartoon"), count=1, run_id=1)
    finished = []
    worker.finished_outcome.connect(lambda run_id, outcome: finished.append(outcome))

    worker.run()

    assert finished[0].status is OutcomeStatus.FAILED
    assert finished[0].message == MSG_UNEXPECTED
