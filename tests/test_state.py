from __future__ import annotations

from core.state import AppState, Notify


def test_can_generate_requires_audio_title_and_idle() -> None:
    state = AppState()
    assert not state.can_generate()

    state.audio_path = "/music/song.mp3"
    assert not state.can_generate()

    state.song_title = "   "
    assert not state.can_generate()

    state.song_title = "Sunset Drive"
    assert state.can_generate()

    state.begin_run()
    assert not state.can_generate()


def test_run_ids_mark_older_runs_stale() -> None:
    state = AppState()
    first = state.begin_run()
    state.set_generating(False)
    second = state.begin_run()

    assert not state.is_current_run(first)
    assert state.is_current_run(second)


def test_signals() -> None:
    state = AppState()
    errors, generating, notes = [], [], []
    state.error_changed.connect(errors.append)
    state.generating_changed.connect(generating.append)
    state.notification.connect(notes.append)

    state.set_error("bad")
    state.set_error("bad")
    state.set_error(None)
    state.begin_run()
    state.set_generating(False)
    state.notify("hello", "warn")

    assert errors == ["bad", None]
    assert generating == [True, False]
    assert notes == [Notify(message="hello", notify_type="warn")]
