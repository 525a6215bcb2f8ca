"""Tests for the keyed lock registry."""

import threading
import time

from ratings.vote.locks import KeyedLocks


class TestKeyedLocks:
    def test_lock_released_and_dropped_after_use(self):
        locks = KeyedLocks()
        with locks.hold("rev-1"):
            assert len(locks) == 1
        assert len(locks) == 0

    def test_lock_dropped_when_block_raises(self):
        locks = KeyedLocks()
        try:
            with locks.hold("rev-1"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert len(locks) == 0

    def test_same_review_is_serialised(self):
        locks = KeyedLocks()
        inside = []
        overlaps = []

        def worker():
            with locks.hold("rev-1"):
                inside.append(1)
                if len(inside) > 1:
                    overlaps.append(True)
                time.sleep(0.01)
                inside.pop()

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert overlaps == []
        assert len(locks) == 0

    def test_different_reviews_do_not_block_each_other(self):
        locks = KeyedLocks()
        entered = threading.Event()
        release = threading.Event()

        def holder():
            with locks.hold("rev-1"):
                entered.set()
                release.wait(timeout=2)

        t = threading.Thread(target=holder)
        t.start()
        entered.wait(timeout=2)

        with locks.hold("rev-2"):
            assert len(locks) == 2

        release.set()
        t.join()
        assert len(locks) == 0

    def test_composite_and_plain_keys_are_distinct(self):
        locks = KeyedLocks()
        with locks.hold("media-1:user-1"), locks.hold("media-1"):
            assert len(locks) == 2
        assert len(locks) == 0

    def test_non_string_keys_share_a_lock_with_their_text(self):
        locks = KeyedLocks()
        with locks.hold(42):
            acquired = threading.Event()

            def contender():
                with locks.hold("42"):
                    acquired.set()

            t = threading.Thread(target=contender)
            t.start()
            assert not acquired.wait(timeout=0.1)
        t.join(timeout=2)
        assert acquired.is_set()
        assert len(locks) == 0
