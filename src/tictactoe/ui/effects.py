from __future__ import annotations
import itertools
import sys
import time
from contextlib import contextmanager
from typing import Iterator

from tictactoe.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


def _spin(label: str, seconds: float) -> None:
    deadline = time.perf_counter() + seconds
    for frame in itertools.cycle("|/-\\"):
        if time.perf_counter() >= deadline:
            break
        sys.stdout.write(f"\r{label} is thinking... {frame}")
        sys.stdout.flush()
        time.sleep(0.08)
    sys.stdout.write("\r\033[K")
    sys.stdout.flush()


@contextmanager
def thinking(label: str) -> Iterator[None]:
    """
    Wrap a computer move. The search runs inside the block; if it came back
    sooner than AI_THINK_DELAY_SEC, the rest of that time is shown as a pause.
    """
    start = time.perf_counter()
    yield
    remaining = AI_THINK_DELAY_SEC - (time.perf_counter() - start)
    if remaining <= 0:
        return
    if AI_THINKING_SPINNER:
        _spin(label, remaining)
    else:
        time.sleep(remaining)
