import pytest

from hypewatch.utils.rate_limiter import RequestPacer


def test_pause_sleeps_configured_delay():
    slept = []
    pacer = RequestPacer(4500, sleep=slept.append)

    pacer.pause()
    pacer.pause()

    assert slept == [4.5, 4.5]
    assert pacer.pauses == 2


def test_zero_delay_never_sleeps():
    slept = []
    pacer = RequestPacer(0, sleep=slept.append)
    pacer.pause()
    assert slept == []


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        RequestPacer(-1)
