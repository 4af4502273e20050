# tests/test_rwlock.py

import threading
import time

import pytest

from prompt_registry.rwlock import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=2)
    errors = []

    def reader():
        with lock.read_locked():
            try:
                both_inside.wait()
            except threading.BrokenBarrierError as e:
                errors.append(e)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []


def test_writer_waits_for_reader():
    lock = ReadWriteLock()
    acquired = threading.Event()

    def writer():
        with lock.write_locked():
            acquired.set()

    lock.acquire_read()
    t = threading.Thread(target=writer)
    t.start()
    time.sleep(0.1)
    assert not acquired.is_set()

    lock.release_read()
    t.join(timeout=2)
    assert acquired.is_set()


def test_reader_waits_for_writer():
    lock = ReadWriteLock()
    acquired = threading.Event()

    def reader():
        with lock.read_locked():
            acquired.set()

    lock.acquire_write()
    t = threading.Thread(target=reader)
    t.start()
    time.sleep(0.1)
    assert not acquired.is_set()

    lock.release_write()
    t.join(timeout=2)
    assert acquired.is_set()


def test_lock_released_on_exception():
    lock = ReadWriteLock()

    with pytest.raises(ValueError):
        with lock.write_locked():
            raise ValueError("boom")

    # would deadlock if the write lock leaked
    with lock.read_locked():
        pass
    with lock.write_locked():
        pass


def test_unbalanced_release_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()
