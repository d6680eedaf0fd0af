import pytest

from wizard_tester.core.errors import WaitTimeout
from wizard_tester.core.polling import poll_until


class _Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def sleep(self, ms):
        self.now += ms / 1000


def test_returns_first_accepted_value():
    values = iter([0, 0, 5, 7])
    clock = _Clock()
    got = poll_until(lambda: next(values), 1000, "never", sleep=clock.sleep, clock=clock)
    assert got == 5
    assert clock.now == pytest.approx(0.2)


def test_custom_accept():
    counter = {"n": 0}

    def probe():
        counter["n"] += 1
        return counter["n"]

    clock = _Clock()
    got = poll_until(probe, 1000, "never", accept=lambda n: n >= 3, sleep=clock.sleep, clock=clock)
    assert got == 3


def test_timeout_carries_last_observed():
    counter = {"n": 0}

    def probe():
        counter["n"] += 1
        return f"title {counter['n']}"

    clock = _Clock()
    with pytest.raises(WaitTimeout) as info:
        poll_until(probe, 450, "Could not find next step.", accept=lambda t: "ready" in t,
                   interval_ms=100, sleep=clock.sleep, clock=clock)
    assert info.value.message == "Could not find next step."
    assert info.value.last_observed == "title 6"
    assert isinstance(info.value, TimeoutError)


def test_zero_timeout_probes_once():
    calls = []
    with pytest.raises(WaitTimeout):
        poll_until(lambda: calls.append(1), 0, "nothing")
    assert len(calls) == 1
