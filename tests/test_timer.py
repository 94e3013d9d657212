import time

from tinyengine.timer import Timer


def test_timer_basic():
    timer = Timer()
    assert timer.elapsed() > 0.0
    start = timer.elapsed()
    time.sleep(0.01)
    end = timer.elapsed()
    assert end > start


def test_timer_measures_sleep():
    timer = Timer()
    time.sleep(0.02)
    assert timer.elapsed() >= 0.015


def test_timer_reset():
    timer = Timer()
    time.sleep(0.01)
    before = timer.elapsed()
    assert before > 0.0
    timer.reset()
    after = timer.elapsed()
    assert after < before