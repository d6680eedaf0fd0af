import pytest

from quick_input_fakes import FakeQuickInput
from wizard_tester.core.config import KEY_BACK, KEY_CONFIRM, KEY_CURSOR_END
from wizard_tester.core.errors import NavigationTimeout, WaitTimeout
from wizard_tester.wizard.stepper import StepperController


def test_seven_step_walk():
    fake = FakeQuickInput(total=7)
    stepper = StepperController(fake, total=7)
    assert "1/7" in stepper.get_title()

    stepper.prev()
    assert stepper.current_step == 1
    assert fake.interactions == []

    for expected in range(2, 8):
        stepper.next()
        assert stepper.current_step == expected
        assert f"{expected}/7" in stepper.get_title()

    for expected in range(6, 0, -1):
        stepper.prev()
        assert stepper.current_step == expected
        assert f"{expected}/7" in stepper.get_title()

    stepper.prev()
    assert stepper.current_step == 1
    assert fake.keys().count(KEY_BACK) == 6


def test_bounds_hold_for_any_length():
    for total in range(1, 6):
        fake = FakeQuickInput(total=total)
        stepper = StepperController(fake, total=total)

        for _ in range(total - 1):
            stepper.next()
        assert stepper.current_step == total

        for _ in range(total - 1):
            stepper.prev()
        assert stepper.current_step == 1
        stepper.prev()
        assert stepper.current_step == 1

        for _ in range(total - 1):
            stepper.next()
        stepper.next()
        assert stepper.current_step == total, f"total={total}"


def test_next_past_last_step_confirms_without_waiting():
    fake = FakeQuickInput(total=2)
    stepper = StepperController(fake, total=2, timeout_ms=0)
    stepper.next()
    stepper.next()
    assert fake.closed
    assert stepper.current_step == 2
    assert fake.keys() == [KEY_CONFIRM, KEY_CONFIRM]


def test_each_transition_is_one_interaction():
    fake = FakeQuickInput(total=4)
    stepper = StepperController(fake, total=4)
    stepper.next()
    stepper.next()
    stepper.prev()
    assert fake.interactions == [(KEY_CONFIRM, 1), (KEY_CONFIRM, 1), (KEY_BACK, 1)]


def test_waits_for_slow_title():
    fake = FakeQuickInput(total=3, title_lag=4)
    stepper = StepperController(fake, total=3)
    stepper.next()
    assert "(2/3)" in fake.get_title_text()
    assert len(fake.sleeps) == 4


def test_missing_title_raises_navigation_timeout():
    fake = FakeQuickInput(total=7, stuck=True)
    stepper = StepperController(fake, total=7, timeout_ms=0)
    with pytest.raises(NavigationTimeout) as info:
        stepper.next()
    assert info.value.step == 2
    assert info.value.total == 7
    assert info.value.last_title == "Quarkus Tools (1/7)"
    assert isinstance(info.value.__cause__, WaitTimeout)


def test_title_name_must_match():
    fake = FakeQuickInput(total=3, name="Other Wizard")
    stepper = StepperController(fake, total=3, timeout_ms=0)
    with pytest.raises(NavigationTimeout):
        stepper.next()


def test_set_text_replaces_prefilled_value():
    fake = FakeQuickInput()
    fake.input_value = "org.acme"
    stepper = StepperController(fake)
    stepper.set_text("com.example")
    assert stepper.get_text() == "com.example"
    assert fake.interactions == [(KEY_CURSOR_END, 1)]


def test_rejects_empty_wizard():
    with pytest.raises(ValueError):
        StepperController(FakeQuickInput(), total=0)
