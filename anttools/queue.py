"""A delay queue built on a one-second timing wheel of 100 slots."""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

SLOT_COUNT = 100
TICK_SECONDS = 1.0


@dataclass
class _Task:
    run_time: float
    cycle: int
    index: int
    func: Callable[..., Any]
    params: tuple[Any, ...]


def _timestamp(when: datetime | float) -> float:
    if isinstance(when, datetime):
        return when.timestamp()
    return float(when)


class DelayQueue:
    """Runs callbacks once their scheduled second comes round on the wheel."""

    def __init__(self) -> None:
        self._start_time = datetime.now().timestamp()
        self._slots: list[dict[str, _Task]] = [{} for _ in range(SLOT_COUNT)]
        self._cycle = 0
        self._index = 0
        self._stopped = False
        self._cond = threading.Condition()

    def add_task(
        self,
        when: datetime | float,
        key: str,
        func: Callable[..., Any],
        params: Iterable[Any] = (),
    ) -> None:
        """Schedule ``func(*params)`` to run at ``when``."""
        run_time = _timestamp(when)
        if run_time < self._start_time:
            raise ValueError("Queue time error")
        seconds = math.floor(run_time) - math.floor(self._start_time)
        cycle, index = divmod(seconds, SLOT_COUNT)
        with self._cond:
            slot = self._slots[index]
            if key in slot:
                raise ValueError("Queue key name already exists")
            slot[key] = _Task(run_time, cycle, index, func, tuple(params))
            self._cond.notify_all()

    def start(self) -> None:
        """Run the wheel in the calling thread until :meth:`stop` is called."""
        next_tick = time.monotonic() + TICK_SECONDS
        with self._cond:
            while not self._stopped:
                self._run_due()
                remaining = next_tick - time.monotonic()
                if remaining <= 0:
                    self._index = (self._index + 1) % SLOT_COUNT
                    if self._index == 0:
                        self._cycle += 1
                    next_tick += TICK_SECONDS
                    continue
                self._cond.wait(remaining)

    def stop(self) -> None:
        """Make :meth:`start` return."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()

    def _run_due(self) -> None:
        slot = self._slots[self._index]
        for key, task in list(slot.items()):
            if task.cycle == self._cycle:
                del slot[key]
                threading.Thread(target=task.func, args=task.params, daemon=True).start()