import json
import re
import time
from pathlib import Path

from .config import OUT_DIR
from .types import WizardRunState


def sanitize_filename(name: str) -> str:
    # Keep only alphanumerics, spaces, dashes, underscores
    s = re.sub(r"[^a-zA-Z0-9 \-_]", "", name)
    s = s.strip().replace(" ", "_")
    return s[:64]  # limit length


def init_run_dir(name: str, root: Path = OUT_DIR) -> str:
    run_dir = Path(root) / sanitize_filename(name)
    run_dir.mkdir(parents=True, exist_ok=True)

    meta = {
        "run_name": run_dir.name,
        "app_name": "wizard_tester",
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S"),
    }
    (run_dir / "meta.json").write_text(json.dumps(meta, indent=2))
    (run_dir / "steps").mkdir(exist_ok=True)

    print(f"[Dataset] Initialized run dir at {run_dir}")
    return str(run_dir)


def log_run(state: WizardRunState) -> None:
    """Write observed step titles, discovered items and the run summary."""
    run_dir = state.get("run_dir")
    if not run_dir:
        return
    run_path = Path(run_dir)

    # 1. One folder per confirmed transition
    for idx, title in enumerate(state.get("titles") or [], start=1):
        step_dir = run_path / "steps" / f"step_{idx:02d}"
        step_dir.mkdir(parents=True, exist_ok=True)
        (step_dir / "title.txt").write_text(title + "\n")

    # 2. Full list contents, when a crawl ran
    discovered = state.get("discovered")
    if discovered is not None:
        (run_path / "items.json").write_text(json.dumps(discovered, indent=2))

    # 3. Summary + history
    result = {
        "summary": state.get("summary") or {},
        "history": state.get("history") or [],
    }
    (run_path / "result.json").write_text(json.dumps(result, indent=2))
