from typing import Any, List, Optional

from .accessibility import accessible_name
from .driver import QuickInputDriver
from ..core.config import (
    KEY_BACK,
    OPEN_TIMEOUT_MS,
    QUICK_INPUT_BACK,
    QUICK_INPUT_BOX,
    QUICK_INPUT_ERROR,
    QUICK_INPUT_MESSAGE,
    QUICK_INPUT_ROWS,
    QUICK_INPUT_TITLE,
    QUICK_INPUT_WIDGET,
    ROW_LABEL,
    WIZARD_TITLE,
)


class PlaywrightQuickInputDriver(QuickInputDriver):
    """Quick input driver over a live Playwright page (sync API)."""

    def __init__(self, page, action_timeout_ms: int = 5000):
        self.page = page
        self.action_timeout_ms = action_timeout_ms

    def _widget(self):
        return self.page.locator(QUICK_INPUT_WIDGET).first

    def _input(self):
        return self._widget().locator(QUICK_INPUT_BOX).first

    def wait_for_widget(self, timeout_ms: int = OPEN_TIMEOUT_MS) -> None:
        self._widget().wait_for(state="visible", timeout=timeout_ms)

    def run_command(self, command: str, timeout_ms: int = OPEN_TIMEOUT_MS) -> None:
        """Run an editor command through the command palette and wait for the wizard."""
        print(f"[Driver] Running command: {command}")
        self.page.keyboard.press("F1")
        self.wait_for_widget(timeout_ms)
        box = self._input()
        box.fill(f">{command}", timeout=self.action_timeout_ms)
        self.page.wait_for_timeout(300)
        box.press("Enter", timeout=self.action_timeout_ms)
        self.wait_until(
            self.get_title_text,
            timeout_ms,
            f"Wizard '{WIZARD_TITLE}' did not open.",
            accept=lambda title: WIZARD_TITLE in (title or ""),
        )

    def send_interaction(self, key: str, repeat: int = 1) -> None:
        if key == KEY_BACK:
            for _ in range(repeat):
                back = self._widget().locator(QUICK_INPUT_BACK).first
                back.wait_for(state="visible", timeout=self.action_timeout_ms)
                back.click(timeout=self.action_timeout_ms)
            return
        box = self._input()
        box.wait_for(state="visible", timeout=self.action_timeout_ms)
        for _ in range(repeat):
            box.press(key, timeout=self.action_timeout_ms)

    def get_visible_items(self) -> List[Any]:
        handles = self.page.query_selector_all(
            f"{QUICK_INPUT_WIDGET} {QUICK_INPUT_ROWS}")
        # The list recycles row elements, so DOM order is not display order.
        indexed = []
        for pos, handle in enumerate(handles):
            if not handle.is_visible():
                continue
            raw = handle.get_attribute("data-index")
            indexed.append((int(raw) if raw and raw.isdigit() else pos, handle))
        indexed.sort(key=lambda pair: pair[0])
        return [handle for _, handle in indexed]

    def read_attribute(self, handle: Any, name: str) -> Optional[str]:
        return handle.get_attribute(name)

    def read_text(self, handle: Any) -> str:
        label = handle.query_selector(ROW_LABEL)
        if label is not None:
            txt = label.inner_text().strip()
            if txt:
                return txt
        return accessible_name(_HandleView(self.page, handle))

    def read_child_text(self, handle: Any, marker: str) -> Optional[str]:
        children = handle.query_selector_all(f".{marker}")
        if not children:
            return None
        return children[0].inner_text().strip()

    def get_title_text(self) -> str:
        title = self._widget().locator(QUICK_INPUT_TITLE).first
        if not title.count():
            return ""
        return (title.inner_text() or "").strip()

    def get_input_text(self) -> str:
        return self._input().input_value(timeout=self.action_timeout_ms)

    def set_input_text(self, value: str) -> None:
        box = self._input()
        box.wait_for(state="visible", timeout=self.action_timeout_ms)
        box.fill(value, timeout=self.action_timeout_ms)

    def has_error(self) -> bool:
        if self._input().get_attribute("aria-invalid") == "true":
            return True
        return self._widget().locator(QUICK_INPUT_ERROR).count() > 0

    def get_message(self) -> str:
        message = self._widget().locator(QUICK_INPUT_MESSAGE).first
        if not message.count():
            return ""
        return (message.inner_text() or "").strip()

    def select_folder(self, path: str) -> None:
        """Answer the folder picker that follows the last wizard step."""
        print(f"[Driver] Selecting destination folder: {path}")
        self.wait_for_widget(self.action_timeout_ms * 2)
        self.set_input_text(path)
        self.page.wait_for_timeout(300)
        self._input().press("Enter", timeout=self.action_timeout_ms)

    def sleep(self, ms: int) -> None:
        self.page.wait_for_timeout(ms)

    def screenshot(self, path: str) -> str:
        self.page.screenshot(path=path, full_page=True)
        return path


class _HandleView:
    """Gives an ElementHandle the small locator surface accessible_name reads."""

    def __init__(self, page, handle):
        self.page = page
        self._handle = handle

    def get_attribute(self, name: str) -> Optional[str]:
        return self._handle.get_attribute(name)

    def inner_text(self) -> str:
        return self._handle.inner_text()
