"""Scripted stand-in for the editor's quick input widget, used by the tests.

The list behaves like the real one: arrow keys move the focused row, the
window scrolls just enough to keep it visible, and moving past either end
wraps around to the other.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from wizard_tester.core.config import (
    DESCRIPTION_MARKER,
    DETAIL_MARKER,
    KEY_BACK,
    KEY_CANCEL,
    KEY_CONFIRM,
    KEY_CURSOR_END,
    KEY_DOWN,
    KEY_UP,
    WIZARD_TITLE,
)
from wizard_tester.dom.driver import QuickInputDriver


def make_items(count: int, prefix: str = "item") -> List[Dict[str, str]]:
    return [{"id": f"{prefix}-{i}", "label": f"Label {i}"} for i in range(count)]


class FakeQuickInput(QuickInputDriver):
    def __init__(
        self,
        items: Optional[List[Dict[str, str]]] = None,
        visible: int = 3,
        total: int = 7,
        name: str = WIZARD_TITLE,
        title_lag: int = 0,
        stuck: bool = False,
        validators: Optional[Dict[int, Callable[[str], Optional[str]]]] = None,
    ):
        self.items = items or []
        self.visible = visible
        self.focus = 0
        self.top = 0
        self.total = total
        self.name = name
        self.step = 1
        self.title_lag = title_lag
        self._pending = 0
        self._shown_step = 1
        self.stuck = stuck
        self.validators = validators or {}
        self.error_message: Optional[str] = None
        self.closed = False
        self.opened_with: Optional[str] = None
        self.input_value = ""
        self.confirmed_values: List[str] = []
        self.folder: Optional[str] = None
        self.interactions: List[Tuple[str, int]] = []
        self.sleeps: List[int] = []

    # -- list paging -------------------------------------------------------

    @property
    def width(self) -> int:
        return min(self.visible, len(self.items))

    def _down(self) -> None:
        n = len(self.items)
        if not n:
            return
        self.focus = (self.focus + 1) % n
        if self.focus == 0:
            self.top = 0
        elif self.focus >= self.top + self.width:
            self.top = self.focus - self.width + 1

    def _up(self) -> None:
        n = len(self.items)
        if not n:
            return
        self.focus = (self.focus - 1) % n
        if self.focus == n - 1:
            self.top = n - self.width
        elif self.focus < self.top:
            self.top = self.focus

    # -- wizard ------------------------------------------------------------

    def _move_step(self, step: int) -> None:
        if self.stuck:
            return
        self.step = step
        self._pending = self.title_lag
        self.error_message = None

    def run_command(self, command: str, timeout_ms: int = 0) -> None:
        self.opened_with = command
        self.closed = False
        self.step = 1
        self._shown_step = 1

    def send_interaction(self, key: str, repeat: int = 1) -> None:
        self.interactions.append((key, repeat))
        for _ in range(repeat):
            if key == KEY_DOWN:
                self._down()
            elif key == KEY_UP:
                self._up()
            elif key == KEY_CONFIRM:
                self.confirmed_values.append(self.input_value)
                if self.step < self.total:
                    self._move_step(self.step + 1)
                else:
                    self.closed = True
            elif key == KEY_BACK:
                if self.step > 1:
                    self._move_step(self.step - 1)
            elif key == KEY_CANCEL:
                self.closed = True
            elif key == KEY_CURSOR_END:
                pass

    def get_visible_items(self) -> List[Any]:
        return list(range(self.top, self.top + self.width))

    def read_attribute(self, handle: Any, name: str) -> Optional[str]:
        return self.items[handle].get(name)

    def read_text(self, handle: Any) -> str:
        return self.items[handle]["label"]

    def read_child_text(self, handle: Any, marker: str) -> Optional[str]:
        field = {DESCRIPTION_MARKER: "description", DETAIL_MARKER: "detail"}.get(marker)
        if field is None:
            return None
        return self.items[handle].get(field)

    def get_title_text(self) -> str:
        if self.closed:
            return ""
        if self._pending > 0:
            self._pending -= 1
        else:
            self._shown_step = self.step
        return f"{self.name} ({self._shown_step}/{self.total})"

    def get_input_text(self) -> str:
        return self.input_value

    def set_input_text(self, value: str) -> None:
        self.input_value = value
        validate = self.validators.get(self.step)
        self.error_message = validate(value) if validate else None

    def has_error(self) -> bool:
        return self.error_message is not None

    def get_message(self) -> str:
        return self.error_message or ""

    def select_folder(self, path: str) -> None:
        self.folder = path

    def sleep(self, ms: int) -> None:
        self.sleeps.append(ms)

    def keys(self) -> List[str]:
        return [key for key, _ in self.interactions]
