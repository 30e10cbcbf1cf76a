"""
Tests for Timer and timed().
"""

import pytest

from densela.core.compute.timing import Timer, timed


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('work'):
            sum(range(1000))
        with timer.section('work'):
            sum(range(1000))
        timer.stop()
        result = timer.result()
        assert 'total_seconds' in result
        assert result['work'] >= 0.0
        assert result['total_seconds'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context_manager(self):
        with timed() as timer:
            sum(range(100))
        assert timer.result()['total_seconds'] >= 0.0
