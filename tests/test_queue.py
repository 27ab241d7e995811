import threading
from datetime import datetime, timedelta

import pytest

from anttools.queue import DelayQueue


def _run(queue):
    thread = threading.Thread(target=queue.start, daemon=True)
    thread.start()
    return thread


def test_task_runs_with_params_and_stops_queue():
    queue = DelayQueue()
    received = []

    def job(*args):
        received.append(args)
        queue.stop()

    queue.add_task(datetime.now(), "testJob", job, [1, 2, 3])
    thread = _run(queue)
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert received == [(1, 2, 3)]


def test_task_in_later_slot_runs_after_tick():
    queue = DelayQueue()
    done = threading.Event()
    queue.add_task(datetime.now() + timedelta(seconds=1), "later", done.set)
    thread = _run(queue)
    try:
        assert done.wait(timeout=5) is True
    finally:
        queue.stop()
        thread.join(timeout=5)
    assert not thread.is_alive()


def test_past_time_rejected():
    queue = DelayQueue()
    with pytest.raises(ValueError, match="Queue time error"):
        queue.add_task(datetime.now() - timedelta(seconds=5), "old", print)


def test_duplicate_key_in_same_slot_rejected():
    queue = DelayQueue()
    when = datetime.now() + timedelta(seconds=3)
    queue.add_task(when, "dup", print)
    with pytest.raises(ValueError, match="already exists"):
        queue.add_task(when, "dup", print)


def test_stop_ends_idle_queue():
    queue = DelayQueue()
    thread = _run(queue)
    queue.stop()
    thread.join(timeout=5)
    assert not thread.is_alive()