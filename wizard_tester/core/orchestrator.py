from pathlib import Path
from typing import Optional
from uuid import uuid4

from playwright.sync_api import sync_playwright

from .config import HEADLESS, IDE_URL, PROFILE_DIR, SLOW_MO, STEP_TIMEOUT_MS
from .dataset import init_run_dir
from .graph import build_graph
from .types import ProjectOptions, WizardRunState
from ..dom.quick_input import PlaywrightQuickInputDriver
from ..utils.imaging import annotate_failure


def new_state(
    driver,
    options: ProjectOptions,
    run_dir: str,
    audit_extensions: bool = False,
    step_timeout_ms: int = STEP_TIMEOUT_MS,
) -> WizardRunState:
    return {
        "run_id": str(uuid4()),
        "run_dir": run_dir,
        "options": options,
        "history": [],
        "driver": driver,
        "wizard": None,
        "step": 0,
        "titles": [],
        "audit_extensions": audit_extensions,
        "step_timeout_ms": step_timeout_ms,
        "discovered": None,
        "error": None,
        "ok": False,
        "done": False,
        "failure_screenshot": None,
        "summary": None,
    }


def run_session(
    driver,
    options: ProjectOptions,
    run_dir: str = "",
    audit_extensions: bool = False,
    step_timeout_ms: int = STEP_TIMEOUT_MS,
) -> WizardRunState:
    """Drive one wizard session over an already connected driver."""
    app = build_graph()
    state = new_state(driver, options, run_dir, audit_extensions, step_timeout_ms)
    return app.invoke(state, config={"run_name": "wizard_session", "recursion_limit": 20})


def _capture_failure(driver: PlaywrightQuickInputDriver, state: WizardRunState) -> Optional[str]:
    run_dir = Path(state["run_dir"])
    shot = run_dir / "failure.png"
    try:
        driver.screenshot(str(shot))
        annotated = annotate_failure(
            shot,
            [f"Step {state.get('step', 0)}", state.get("error") or "unknown error"],
        )
    except Exception as e:
        print(f"[Run] Failure screenshot skipped: {e}")
        return None
    print(f"[Run] Failure screenshot: {annotated}")
    return str(annotated)


def run(options: Optional[ProjectOptions] = None, audit_extensions: bool = False) -> WizardRunState:
    options = options or {}
    run_name = f"run_{options.get('artifact_id') or 'default'}_{uuid4().hex[:8]}"
    run_dir = init_run_dir(run_name)

    print("[Run] Launching Playwright and loading the editor...")
    p = sync_playwright().start()
    context = p.chromium.launch_persistent_context(
        PROFILE_DIR,
        headless=HEADLESS,
        slow_mo=SLOW_MO,
    )
    try:
        page = context.new_page()
        page.goto(IDE_URL)
        page.wait_for_timeout(4000)  # allow the workbench to settle

        driver = PlaywrightQuickInputDriver(page)
        final_state = run_session(driver, options, run_dir, audit_extensions)
        if not final_state.get("ok"):
            final_state["failure_screenshot"] = _capture_failure(driver, final_state)
    finally:
        context.close()
        p.stop()
    print("[Run] Run completed")
    return final_state


def print_summary(options: ProjectOptions, final_state: WizardRunState) -> None:
    print("\n=== Wizard run result ===")
    print("Options:", options)
    print("Run dir:", final_state.get("run_dir"))
    print("OK:", final_state.get("ok"))
    print("Last step:", final_state.get("step"))
    history = final_state.get("history") or []
    if history:
        print("History:")
        for entry in history:
            print(f"  - {entry}")
    discovered = final_state.get("discovered")
    if discovered is not None:
        print(f"Discovered {len(discovered)} items (id | label | description):")
        for item in discovered:
            print(f"  - {item.get('id')} | {item.get('label')} | {item.get('description', '')}")
    if final_state.get("error"):
        print("Error:", final_state.get("error"))
    if final_state.get("failure_screenshot"):
        print("Failure screenshot:", final_state.get("failure_screenshot"))
