from typing import Any, Optional


class WizardError(RuntimeError):
    """Base class for failures raised while driving the wizard."""


class WaitTimeout(WizardError, TimeoutError):
    def __init__(self, message: str, last_observed: Any = None):
        super().__init__(f"{message} (last observed: {last_observed!r})")
        self.message = message
        self.last_observed = last_observed


class NavigationTimeout(WizardError):
    def __init__(self, step: int, total: int, last_title: Optional[str] = None):
        super().__init__(
            f"Could not find step {step}/{total}; last title was {last_title!r}")
        self.step = step
        self.total = total
        self.last_title = last_title


class OutOfRangeIndex(WizardError, IndexError):
    def __init__(self, index: int, window_length: int):
        super().__init__(
            f"The index {index} is out of bounds. The number of quick picks found was {window_length}")
        self.index = index
        self.window_length = window_length


class EmptyList(WizardError):
    def __init__(self, message: str = "Quick pick list has no rendered items."):
        super().__init__(message)
