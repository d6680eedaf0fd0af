from typing import Callable, List, Optional

from ..core.config import (
    KEY_CANCEL,
    KEY_CONFIRM,
    OPEN_TIMEOUT_MS,
    STEP_TIMEOUT_MS,
    TOTAL_STEPS,
    WIZARD_COMMAND,
    WIZARD_TITLE,
)
from ..core.types import ListItem, ProjectOptions
from .crawler import VirtualizedListCrawler
from .stepper import StepperController

# Text input steps in wizard order; the extension picker follows them.
INPUT_FIELDS = (
    "build_tool",
    "group_id",
    "artifact_id",
    "project_version",
    "package_name",
    "resource_name",
)


class ProjectGenerationWizard:
    """The project generation wizard opened by the generate-project command.

    One stepper and one crawler share the same driver; the calling workflow
    uses both to exercise a single wizard session.
    """

    def __init__(
        self,
        driver,
        total: int = TOTAL_STEPS,
        name: str = WIZARD_TITLE,
        step_timeout_ms: int = STEP_TIMEOUT_MS,
        on_transition: Optional[Callable[[int, int, str], None]] = None,
    ):
        self.driver = driver
        self.stepper = StepperController(
            driver, total=total, name=name, timeout_ms=step_timeout_ms, on_transition=on_transition)
        self.crawler = VirtualizedListCrawler(driver)

    @classmethod
    def open(cls, driver, command: str = WIZARD_COMMAND, timeout_ms: int = OPEN_TIMEOUT_MS, **kwargs) -> "ProjectGenerationWizard":
        driver.run_command(command, timeout_ms)
        return cls(driver, **kwargs)

    @property
    def current_step(self) -> int:
        return self.stepper.current_step

    def next(self) -> None:
        self.stepper.next()

    def prev(self) -> None:
        self.stepper.prev()

    def set_text(self, value: str) -> None:
        self.stepper.set_text(value)

    def get_text(self) -> str:
        return self.stepper.get_text()

    def get_title(self) -> str:
        return self.stepper.get_title()

    def has_error(self) -> bool:
        return self.driver.has_error()

    def get_validation_message(self) -> Optional[str]:
        """The validation error shown for the current input, or None if it is valid."""
        if not self.driver.has_error():
            return None
        message = self.driver.get_message()
        print(f"[Wizard] Step {self.current_step} rejects input: {message}")
        return message

    def confirm(self) -> None:
        """Accept the current input without leaving the step (multi-select pickers)."""
        self.driver.send_interaction(KEY_CONFIRM)

    def cancel(self) -> None:
        self.driver.send_interaction(KEY_CANCEL)

    def get_all_info(self) -> List[ListItem]:
        return self.crawler.discover_all()

    def get_nth_info(self, n: int) -> ListItem:
        return self.crawler.get_nth(n)

    def get_nth_label(self, n: int) -> str:
        return self.get_nth_info(n)["label"]

    def fill_inputs(self, options: ProjectOptions) -> None:
        for field in INPUT_FIELDS:
            value = options.get(field)
            if value:
                self.set_text(value)
            self.next()

    def add_extensions(self, extensions: List[str]) -> None:
        for name in extensions:
            print(f"[Wizard] Adding extension: {name}")
            self.set_text(name)
            self.confirm()
