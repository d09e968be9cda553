import threading
import time

import pytest

from batchresize.pipeline.gate import CompletionGate


def test_zero_count_is_already_open():
    gate = CompletionGate(0)
    assert gate.wait(timeout=0) is True
    assert gate.remaining == 0


def test_single_worker():
    gate = CompletionGate(1)
    assert gate.wait(timeout=0.01) is False

    gate.done()

    assert gate.wait(timeout=0) is True


def test_releases_only_after_last_of_many():
    n = 25
    gate = CompletionGate(n)
    finished = []
    lock = threading.Lock()

    def worker(i):
        time.sleep(0.001 * (i % 5))
        with lock:
            finished.append(i)
        gate.done()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()

    assert gate.wait(timeout=10) is True
    assert len(finished) == n
    assert gate.remaining == 0

    for t in threads:
        t.join()


def test_partial_completion_does_not_release():
    gate = CompletionGate(3)
    gate.done()
    gate.done()

    assert gate.remaining == 1
    assert gate.wait(timeout=0.01) is False


def test_too_many_done_calls():
    gate = CompletionGate(1)
    gate.done()
    with pytest.raises(RuntimeError):
        gate.done()


def test_negative_count():
    with pytest.raises(ValueError):
        CompletionGate(-1)
