from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture(autouse=True)
def _instant_console(monkeypatch):
    monkeypatch.setattr("tictactoe.ui.effects.AI_THINK_DELAY_SEC", 0)
    monkeypatch.setattr("tictactoe.ui.render.CLEAR_SCREEN", False)


@pytest.fixture
def scripted():
    """Build an input() replacement that replays answers in order."""
    def make(answers):
        it = iter(answers)

        def _input(prompt: str = "") -> str:
            return next(it)

        return _input

    return make
