"""Tests for the fixed-capacity ring buffer"""

import pytest

from ta_stream.indicators.window import RingBuffer


class TestRingBuffer:
    """Test circular FIFO storage"""

    def test_fills_then_evicts_oldest(self):
        buffer = RingBuffer(3)
        assert buffer.push(1.0) == 0.0
        assert buffer.push(2.0) == 0.0
        assert buffer.push(3.0) == 0.0
        assert buffer.is_full()
        assert buffer.push(4.0) == 1.0
        assert buffer.push(5.0) == 2.0
        assert list(buffer) == [3.0, 4.0, 5.0]

    def test_iterates_oldest_to_newest(self):
        buffer = RingBuffer(4)
        for value in (1.0, 2.0):
            buffer.push(value)
        assert list(buffer) == [1.0, 2.0]
        assert len(buffer) == 2
        assert not buffer.is_full()

    def test_oldest_and_newest(self):
        buffer = RingBuffer(2)
        buffer.push(7.0)
        assert buffer.oldest() == 7.0
        assert buffer.newest() == 7.0
        buffer.push(8.0)
        buffer.push(9.0)
        assert buffer.oldest() == 8.0
        assert buffer.newest() == 9.0

    def test_empty_access_raises(self):
        buffer = RingBuffer(2)
        with pytest.raises(IndexError):
            buffer.oldest()
        with pytest.raises(IndexError):
            buffer.newest()

    def test_memory_is_bounded(self):
        """Length never exceeds capacity however many values are pushed"""
        buffer = RingBuffer(5)
        for i in range(1000):
            buffer.push(float(i))
        assert len(buffer) == 5
        assert buffer.capacity == 5
        assert list(buffer) == [995.0, 996.0, 997.0, 998.0, 999.0]

    def test_clear(self):
        buffer = RingBuffer(2)
        buffer.push(1.0)
        buffer.push(2.0)
        buffer.clear()
        assert len(buffer) == 0
        assert list(buffer) == []
        assert buffer.push(3.0) == 0.0
