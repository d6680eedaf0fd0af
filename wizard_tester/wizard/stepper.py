from typing import Callable, Optional

from ..core.config import (
    KEY_BACK,
    KEY_CONFIRM,
    KEY_CURSOR_END,
    STEP_TIMEOUT_MS,
    TOTAL_STEPS,
    WIZARD_TITLE,
)
from ..core.errors import NavigationTimeout, WaitTimeout


class StepperController:
    """Walks a fixed number of titled wizard steps, one confirmed hop at a time.

    Titles look like ``"<Name> (<step>/<total>)"``. ``current_step`` always
    stays within ``[1, total]``.
    """

    def __init__(
        self,
        driver,
        total: int = TOTAL_STEPS,
        name: str = WIZARD_TITLE,
        timeout_ms: int = STEP_TIMEOUT_MS,
        on_transition: Optional[Callable[[int, int, str], None]] = None,
    ):
        if total < 1:
            raise ValueError(f"A wizard needs at least one step, got {total}")
        self.driver = driver
        self.total = total
        self.name = name
        self.timeout_ms = timeout_ms
        self.on_transition = on_transition
        self.current_step = 1

    def _marker(self, step: int) -> str:
        if self.name:
            return f"{self.name} ({step}/{self.total})"
        return f"({step}/{self.total})"

    def _await_step(self, step: int) -> str:
        marker = self._marker(step)
        try:
            title = self.driver.wait_until(
                self.driver.get_title_text,
                self.timeout_ms,
                f"Could not find step {step}/{self.total}.",
                accept=lambda t: marker in (t or ""),
            )
        except WaitTimeout as e:
            raise NavigationTimeout(step, self.total, e.last_observed) from e
        print(f"[Stepper] At step {step}/{self.total}: {title}")
        if self.on_transition:
            self.on_transition(step, self.total, title)
        return title

    def next(self) -> None:
        """Confirm the current step and wait for the following one."""
        self.driver.send_interaction(KEY_CONFIRM)
        if self.current_step + 1 > self.total:
            # Confirming the last step closes the wizard; there is no
            # (total+1)/total title to wait for.
            print(f"[Stepper] Confirmed final step {self.total}/{self.total}.")
            return
        self.current_step += 1
        self._await_step(self.current_step)

    def prev(self) -> None:
        if self.current_step == 1:
            return
        self.driver.send_interaction(KEY_BACK)
        self.current_step -= 1
        self._await_step(self.current_step)

    def set_text(self, value: str) -> None:
        # Some steps arrive pre-filled; move off the selection so the value
        # is replaced rather than appended to.
        self.driver.send_interaction(KEY_CURSOR_END)
        self.driver.set_input_text(value)

    def get_text(self) -> str:
        return self.driver.get_input_text()

    def get_title(self) -> str:
        return self.driver.get_title_text()
