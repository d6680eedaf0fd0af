import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Core destinations
IDE_URL = os.getenv("WIZARD_IDE_URL", "http://localhost:3000")
PROFILE_DIR = os.getenv("WIZARD_PROFILE_DIR", "playwright_profile")
HEADLESS = os.getenv("WIZARD_HEADLESS", "0").lower() in ("1", "true", "yes")
SLOW_MO = int(os.getenv("WIZARD_SLOW_MO", "100"))

# Output paths
OUT_DIR = Path(os.getenv("WIZARD_OUT_DIR", "artifacts/wizard_runs/"))

# Wizard shape
WIZARD_COMMAND = "Quarkus: Generate a Quarkus project"
WIZARD_TITLE = "Quarkus Tools"
TOTAL_STEPS = 7

# Timeouts (ms)
OPEN_TIMEOUT_MS = 60000
STEP_TIMEOUT_MS = 15000
QUICK_PICK_TIMEOUT_MS = 10000
POLL_INTERVAL_MS = 100

# Interactions understood by every driver
KEY_CONFIRM = "Enter"
KEY_DOWN = "ArrowDown"
KEY_UP = "ArrowUp"
KEY_CURSOR_END = "End"
KEY_CANCEL = "Escape"
KEY_BACK = "Back"  # not a real key; drivers click the back action instead

# Quick input widget markers
QUICK_INPUT_WIDGET = ".quick-input-widget"
QUICK_INPUT_TITLE = ".quick-input-title"
QUICK_INPUT_BOX = ".quick-input-box input"
QUICK_INPUT_ROWS = ".quick-input-list .monaco-list-row"
QUICK_INPUT_BACK = ".quick-input-left-action-bar .codicon-quick-input-back"
QUICK_INPUT_MESSAGE = ".quick-input-message"
QUICK_INPUT_ERROR = ".quick-input-box .monaco-inputbox.error"
ROW_LABEL = ".label-name"
DESCRIPTION_MARKER = "label-description"
DETAIL_MARKER = "quick-input-list-label-meta"

# Project download settles after the destination is chosen
GENERATION_SETTLE_MS = 4000
