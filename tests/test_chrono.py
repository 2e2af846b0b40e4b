import pytest

from vehicledemo.chrono import RaceClock, chrono_text


def test_chrono_text_formats_two_decimals():
    assert chrono_text(1.234) == "Time elapsed: 1.23s"
    assert chrono_text(0.0) == "Time elapsed: 0.00s"


def test_new_clock_shows_initial_text():
    clock = RaceClock()
    assert clock.text() == "Time elapsed: 0.0s"
    assert not clock.started


def test_countdown_lasts_three_seconds():
    clock = RaceClock()
    for _ in range(5):
        clock.tick(0.5)
        assert clock.started is False
    clock.tick(0.5)
    assert clock.started is True


def test_text_unchanged_during_countdown():
    clock = RaceClock()
    for _ in range(5):
        clock.tick(0.5)
    assert not clock.started
    assert clock.text() == "Time elapsed: 0.0s"
    assert clock.chrono.elapsed == 0.0


def test_chrono_runs_after_countdown():
    clock = RaceClock()
    while not clock.started:
        clock.tick(0.5)
    assert clock.text() == "Time elapsed: 0.0s"
    clock.tick(0.5)
    assert clock.text() == chrono_text(0.5)
    clock.tick(1.25)
    assert clock.chrono.elapsed == pytest.approx(1.75)
    assert clock.text() == chrono_text(1.75)


def test_chrono_never_completes():
    clock = RaceClock()
    clock.started = True
    for _ in range(10):
        clock.tick(1.0)
    assert clock.chrono.elapsed == pytest.approx(10.0)
    assert not clock.chrono.completed
    assert clock.text() == chrono_text(10.0)