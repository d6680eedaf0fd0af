from typing import List

from .dataset import log_run
from .types import WizardRunState

MAX_HISTORY = 10


def record_transition(history: List[str], titles: List[str], step: int, total: int, title: str) -> None:
    """Append a confirmed step transition, keeping a rolling window of history."""
    titles.append(title)
    history.append(f"Step {step}/{total}: {title}")
    if len(history) > MAX_HISTORY:
        del history[:-MAX_HISTORY]


def finalize_run(state: WizardRunState) -> WizardRunState:
    """Close out the run: completion flags, summary, artifacts."""
    error = state.get("error")
    state["ok"] = not error
    state["done"] = True

    wizard = state.get("wizard")
    if wizard is not None:
        state["step"] = wizard.current_step

    discovered = state.get("discovered") or []
    state["summary"] = {
        "ok": state["ok"],
        "last_step": state.get("step", 0),
        "transitions": len(state.get("titles") or []),
        "discovered": len(discovered),
        "error": error,
    }
    if error:
        print(f"[Graph] Run failed at step {state.get('step', 0)}: {error}")
    else:
        print(f"[Graph] Run completed at step {state.get('step', 0)}.")

    log_run(state)
    return state
