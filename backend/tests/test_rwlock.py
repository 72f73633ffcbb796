import threading
import time

import pytest

from app.rwlock import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=5)

    def reader():
        with lock.read():
            both_inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)
    assert not any(thread.is_alive() for thread in threads)


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []
    writer_inside = threading.Event()

    def writer():
        with lock.write():
            writer_inside.set()
            time.sleep(0.05)
            events.append("writer-done")

    def reader():
        writer_inside.wait(timeout=5)
        with lock.read():
            events.append("reader")

    w = threading.Thread(target=writer)
    r = threading.Thread(target=reader)
    w.start()
    r.start()
    w.join(timeout=5)
    r.join(timeout=5)
    assert events == ["writer-done", "reader"]


def test_writers_are_serialized():
    lock = ReadWriteLock()
    active = 0
    max_active = 0
    guard = threading.Lock()

    def writer():
        nonlocal active, max_active
        for _ in range(50):
            with lock.write():
                with guard:
                    active += 1
                    max_active = max(max_active, active)
                with guard:
                    active -= 1

    threads = [threading.Thread(target=writer) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)
    assert max_active == 1


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order = []
    lock.acquire_read()

    def writer():
        with lock.write():
            order.append("writer")

    def late_reader():
        with lock.read():
            order.append("reader")

    w = threading.Thread(target=writer)
    w.start()
    # Let the writer register as waiting before the second reader arrives.
    deadline = time.monotonic() + 5
    while not lock._writers_waiting and time.monotonic() < deadline:
        time.sleep(0.001)
    r = threading.Thread(target=late_reader)
    r.start()
    time.sleep(0.05)
    assert order == []

    lock.release_read()
    w.join(timeout=5)
    r.join(timeout=5)
    assert order == ["writer", "reader"]


def test_unbalanced_release_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_lock_released_after_exception():
    lock = ReadWriteLock()
    with pytest.raises(ValueError):
        with lock.write():
            raise ValueError("boom")
    with lock.read():
        pass
    with lock.write():
        pass


def test_interrupted_writer_wakes_queued_readers():
    lock = ReadWriteLock()
    real_wait = lock._cond.wait
    reader_queued = threading.Event()
    reader_done = threading.Event()
    writer_errors = []

    def wait(timeout=None):
        if threading.current_thread() is writer:
            while not reader_queued.is_set():
                real_wait(0.01)
            raise KeyboardInterrupt
        reader_queued.set()
        return real_wait(timeout)

    def write_then_fail():
        try:
            lock.acquire_write()
        except KeyboardInterrupt as exc:
            writer_errors.append(exc)

    def late_reader():
        with lock.read():
            reader_done.set()

    lock._cond.wait = wait
    lock.acquire_read()
    writer = threading.Thread(target=write_then_fail)
    writer.start()
    deadline = time.monotonic() + 5
    while not lock._writers_waiting and time.monotonic() < deadline:
        time.sleep(0.001)
    reader = threading.Thread(target=late_reader, daemon=True)
    reader.start()

    writer.join(timeout=5)
    assert len(writer_errors) == 1
    # The first reader still holds the lock, so only the writer's exit can wake this one.
    assert reader_done.wait(timeout=5)
    assert lock._writers_waiting == 0
    reader.join(timeout=5)
    lock.release_read()
