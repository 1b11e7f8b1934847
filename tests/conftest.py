"""Pytest configuration and fixtures."""
from __future__ import annotations

import gc
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One offscreen QApplication for the whole run; no event loop is ever entered."""
    app = QApplication.instance() or QApplication([])
    yield app
    # drop Python wrappers of Qt objects while the application still exists,
    # PySide6 aborts at interpreter exit otherwise
    app.processEvents()
    gc.collect()


class FakeImageClient:
    """Records prompts; answers from a scripted list (None = failed call)."""

    def __init__(self, answers=None, default="data:image/jpeg;base64,AAAA"):
        self.prompts: list[str] = []
        self._answers = list(answers) if answers is not None else None
        self._default = default

    def generate(self, prompt: str):
        self.prompts.append(prompt)
        if self._answers is None:
            return f"{self._default}#{len(self.prompts)}"
        answer = self._answers[len(self.prompts) - 1]
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def fake_client():
    return FakeImageClient()


@pytest.fixture
def make_client():
    return FakeImageClient
