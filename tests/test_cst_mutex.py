import string
import threading

import pytest

from cratekit.cst_mutex import CstMutex


def test_simple():
    mtx = CstMutex([])
    permit1 = mtx.acquire()
    permit2 = mtx.acquire()
    permit1.release()
    with permit2.wait() as guard:
        guard.value.append(1)
    with mtx.acquire().wait() as guard:
        assert guard.value == [1]


@pytest.mark.parametrize("n", range(1, 5))
@pytest.mark.parametrize("m", range(1, 7))
def test_multi(n, m):
    keys = [CstMutex([]) for _ in range(m)]
    threads = []
    letters = string.ascii_uppercase[:n]
    for c in letters:
        permits = [k.acquire() for k in keys]

        def run(permits=permits, c=c):
            for permit in permits:
                with permit.wait() as guard:
                    guard.value.append(c)

        threads.append(threading.Thread(target=run))

    for th in reversed(threads):
        th.start()
    for th in threads:
        th.join(timeout=10)
    assert [th.is_alive() for th in threads] == [False] * n

    for k in keys:
        with k.acquire().wait() as guard:
            assert guard.value == list(letters)


def test_wait_blocks_until_earlier_permit_released():
    mtx = CstMutex(0)
    first = mtx.acquire()
    second = mtx.acquire()
    entered = threading.Event()

    def run():
        with second.wait() as guard:
            guard.value += 1
        entered.set()

    th = threading.Thread(target=run)
    th.start()
    assert not entered.wait(0.1)

    guard = first.wait()
    guard.release()
    assert entered.wait(5)
    th.join(timeout=5)
    with mtx.acquire().wait() as guard:
        assert guard.value == 1


def test_releasing_waiting_permit_keeps_order():
    mtx = CstMutex("start")
    p1 = mtx.acquire()
    p2 = mtx.acquire()
    p3 = mtx.acquire()
    p2.release()
    with p1.wait() as guard:
        guard.value = "one"
    done = threading.Event()

    def run():
        with p3.wait() as g:
            g.value = "three"
        done.set()

    th = threading.Thread(target=run)
    th.start()
    assert done.wait(5)
    th.join(timeout=5)
    with mtx.acquire().wait() as guard:
        assert guard.value == "three"


def test_permit_cannot_be_used_twice():
    mtx = CstMutex(None)
    permit = mtx.acquire()
    guard = permit.wait()
    with pytest.raises(RuntimeError):
        permit.release()
    with pytest.raises(RuntimeError):
        permit.wait()
    guard.release()


def test_guard_release_twice_and_access_after_release():
    mtx = CstMutex([1])
    guard = mtx.acquire().wait()
    guard.release()
    with pytest.raises(RuntimeError):
        guard.release()
    with pytest.raises(RuntimeError):
        _ = guard.value


def test_reserve_and_shrink_keep_mutex_working():
    mtx = CstMutex([])
    mtx.reserve(4)
    for i in range(6):
        with mtx.acquire().wait() as guard:
            guard.value.append(i)
    mtx.shrink_to(1)
    mtx.shrink_to(0)
    with mtx.acquire().wait() as guard:
        assert guard.value == list(range(6))


def test_negative_counts_rejected():
    mtx = CstMutex(0)
    with pytest.raises(ValueError):
        mtx.reserve(-1)
    with pytest.raises(ValueError):
        mtx.shrink_to(-1)