"""Row lock unit tests."""

import threading

import pytest

from stockview.engine.locking import RowLocks


class TestRowLocks:
    def test_hold_and_release(self):
        locks = RowLocks()
        with locks.hold(("P-1", "BLR-A")):
            assert locks.is_locked(("P-1", "BLR-A"))
            assert not locks.is_locked(("P-1", "DEL-B"))
        assert not locks.is_locked(("P-1", "BLR-A"))

    def test_released_on_exception(self):
        locks = RowLocks()
        with pytest.raises(RuntimeError):
            with locks.hold(("P-1", "BLR-A"), ("P-1", "DEL-B")):
                raise RuntimeError("boom")
        assert not locks.is_locked(("P-1", "BLR-A"))
        assert not locks.is_locked(("P-1", "DEL-B"))

    def test_duplicate_keys_do_not_self_deadlock(self):
        locks = RowLocks()
        with locks.hold(("P-1", "BLR-A"), ("P-1", "BLR-A")):
            assert locks.is_locked(("P-1", "BLR-A"))

    def test_blocks_other_holders(self):
        locks = RowLocks()
        entered = threading.Event()

        def other():
            with locks.hold(("P-1", "BLR-A")):
                entered.set()

        with locks.hold(("P-1", "BLR-A")):
            t = threading.Thread(target=other)
            t.start()
            assert not entered.wait(timeout=0.2)
        t.join(timeout=5)
        assert entered.is_set()
