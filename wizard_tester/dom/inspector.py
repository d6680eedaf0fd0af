from typing import Any, List

from ..core.config import DESCRIPTION_MARKER, DETAIL_MARKER
from ..core.types import ListItem


class ItemInspector:
    """Reads id, label and optional description/detail off one rendered row."""

    def __init__(self, driver, description_marker: str = DESCRIPTION_MARKER, detail_marker: str = DETAIL_MARKER):
        self.driver = driver
        self.description_marker = description_marker
        self.detail_marker = detail_marker

    def inspect(self, handle: Any) -> ListItem:
        item: ListItem = {
            "id": self.driver.read_attribute(handle, "id") or "",
            "label": self.driver.read_text(handle),
        }
        # Rows without a description/detail simply lack the sub-element.
        description = self.driver.read_child_text(handle, self.description_marker)
        if description is not None:
            item["description"] = description
        detail = self.driver.read_child_text(handle, self.detail_marker)
        if detail is not None:
            item["detail"] = detail
        return item

    def inspect_all(self, handles: List[Any]) -> List[ListItem]:
        return [self.inspect(h) for h in handles]
