from .config import GENERATION_SETTLE_MS, STEP_TIMEOUT_MS
from .history import record_transition
from .types import WizardRunState
from ..wizard.project_wizard import ProjectGenerationWizard


def _fail(state: WizardRunState, node: str, exc: Exception) -> WizardRunState:
    print(f"[Graph] {node} failed: {exc}")
    state["error"] = f"{type(exc).__name__}: {exc}"
    return state


def open_wizard(state: WizardRunState) -> WizardRunState:
    """Run the generate-project command and wrap the wizard it opens."""
    history = state.setdefault("history", [])
    titles = state.setdefault("titles", [])

    def on_transition(step: int, total: int, title: str) -> None:
        record_transition(history, titles, step, total, title)

    timeout_ms = state.get("step_timeout_ms")
    if timeout_ms is None:
        timeout_ms = STEP_TIMEOUT_MS

    try:
        wizard = ProjectGenerationWizard.open(
            state["driver"],
            step_timeout_ms=timeout_ms,
            on_transition=on_transition,
        )
        title = wizard.get_title()
    except Exception as e:
        return _fail(state, "open_wizard", e)

    record_transition(history, titles, 1, wizard.stepper.total, title)
    state["wizard"] = wizard
    state["step"] = wizard.current_step
    return state


def fill_inputs(state: WizardRunState) -> WizardRunState:
    wizard = state["wizard"]
    try:
        wizard.fill_inputs(state.get("options") or {})
    except Exception as e:
        return _fail(state, "fill_inputs", e)
    state["step"] = wizard.current_step
    return state


def choose_extensions(state: WizardRunState) -> WizardRunState:
    """Optionally enumerate the extension picker, pick extensions, finish the wizard."""
    wizard = state["wizard"]
    options = state.get("options") or {}
    try:
        if state.get("audit_extensions"):
            state["discovered"] = wizard.get_all_info()
        wizard.add_extensions(options.get("extensions") or [])
        wizard.next()
    except Exception as e:
        return _fail(state, "choose_extensions", e)
    state["step"] = wizard.current_step
    return state


def choose_destination(state: WizardRunState) -> WizardRunState:
    dest = (state.get("options") or {}).get("dest")
    if not dest:
        print("[Graph] No destination given; leaving folder dialog untouched.")
        return state
    driver = state["driver"]
    try:
        driver.select_folder(dest)
    except Exception as e:
        return _fail(state, "choose_destination", e)
    # wait until project finishes downloading
    driver.sleep(GENERATION_SETTLE_MS)
    return state
