from typing import Any, Callable, List, Optional

from ..core.polling import poll_until


class QuickInputDriver:
    """Capabilities the wizard core needs from a UI automation backend.

    Every call completes before it returns; callers never issue two
    operations at once. Row handles are opaque to the core.
    """

    def run_command(self, command: str, timeout_ms: int) -> None:
        """Run an editor command and return once its wizard is showing."""
        raise NotImplementedError

    def send_interaction(self, key: str, repeat: int = 1) -> None:
        raise NotImplementedError

    def get_visible_items(self) -> List[Any]:
        raise NotImplementedError

    def read_attribute(self, handle: Any, name: str) -> Optional[str]:
        raise NotImplementedError

    def read_text(self, handle: Any) -> str:
        raise NotImplementedError

    def read_child_text(self, handle: Any, marker: str) -> Optional[str]:
        """Text of the first nested element carrying ``marker``, or None."""
        raise NotImplementedError

    def get_title_text(self) -> str:
        raise NotImplementedError

    def get_input_text(self) -> str:
        raise NotImplementedError

    def set_input_text(self, value: str) -> None:
        raise NotImplementedError

    def has_error(self) -> bool:
        """True while the input box shows a validation error."""
        raise NotImplementedError

    def get_message(self) -> str:
        raise NotImplementedError

    def select_folder(self, path: str) -> None:
        raise NotImplementedError

    def sleep(self, ms: int) -> None:
        raise NotImplementedError

    def wait_until(
        self,
        probe: Callable[[], Any],
        timeout_ms: int,
        message: str,
        accept: Callable[[Any], bool] = bool,
    ) -> Any:
        return poll_until(probe, timeout_ms, message, accept=accept, sleep=self.sleep)
