from typing import List, Optional, Set

from ..core.config import KEY_DOWN, KEY_UP, QUICK_PICK_TIMEOUT_MS
from ..core.errors import EmptyList, OutOfRangeIndex
from ..core.types import ListItem
from ..dom.inspector import ItemInspector

DEBUG_CRAWL = False


def _debug(msg: str) -> None:
    if DEBUG_CRAWL:
        print(msg)


class VirtualizedListCrawler:
    """Enumerates a quick pick list that only ever renders a window of rows.

    Paging moves the focused row; the window scrolls to keep it visible and
    wraps back to the top after the last row. The total count is never
    exposed, so the wrap is detected when an already seen id shows up again.
    The list must not change while a crawl is running.
    """

    def __init__(self, driver, inspector: Optional[ItemInspector] = None, timeout_ms: int = QUICK_PICK_TIMEOUT_MS):
        self.driver = driver
        self.inspector = inspector or ItemInspector(driver)
        self.timeout_ms = timeout_ms

    def _read_window(self) -> List[ListItem]:
        return self.inspector.inspect_all(self.driver.get_visible_items())

    def _page(self, key: str, count: int) -> None:
        if count > 0:
            self.driver.send_interaction(key, count)

    def discover_all(self) -> List[ListItem]:
        """Return every item of the list once, in list order."""
        width = len(self.driver.get_visible_items())
        if width == 0:
            raise EmptyList()
        print(f"[Crawler] Window shows {width} rows; scanning forward.")

        found: List[ListItem] = []
        seen: Set[str] = set()

        # Park the focus on the last visible row so each later page of
        # `width` presses scrolls a whole fresh window into view.
        self._page(KEY_DOWN, width - 1)
        batch = self._read_window()
        while not any(item["id"] in seen for item in batch):
            found.extend(batch)
            seen.update(item["id"] for item in batch)
            _debug(f"[Crawler] Batch: {[item['id'] for item in batch]}")
            self._page(KEY_DOWN, width)
            batch = self._read_window()

        overlap = sum(1 for item in batch if item["id"] in seen)
        _debug(f"[Crawler] Wrapped; {overlap} rows already seen, backing up.")
        self._page(KEY_UP, overlap)

        for item in self._read_window():
            if item["id"] not in seen:
                found.append(item)
                seen.add(item["id"])

        print(f"[Crawler] Discovered {len(found)} items.")
        return found

    def get_nth(self, n: int) -> ListItem:
        """Inspect the n-th row of the currently visible window."""
        handles = self.driver.wait_until(
            self.driver.get_visible_items,
            self.timeout_ms,
            "Could not find quick picks",
        )
        if n < 0 or n >= len(handles):
            raise OutOfRangeIndex(n, len(handles))
        return self.inspector.inspect(handles[n])
