from typing import Any, Dict, List, Optional, TypedDict


class _ListItemBase(TypedDict):
    id: str
    label: str


class ListItem(_ListItemBase, total=False):
    """One entry of a quick pick list. Optional keys are omitted when absent."""
    description: str
    detail: str


class ProjectOptions(TypedDict, total=False):
    build_tool: str
    group_id: str
    artifact_id: str
    project_version: str
    package_name: str
    resource_name: str
    extensions: List[str]
    dest: str


class WizardRunState(TypedDict):
    run_id: str
    run_dir: str
    options: ProjectOptions
    history: Optional[List[str]]
    # Live handles (kept in-memory for single-run)
    driver: Any
    wizard: Any
    step: int
    titles: List[str]
    audit_extensions: bool
    step_timeout_ms: int
    discovered: Optional[List[ListItem]]
    error: Optional[str]
    ok: bool
    done: bool
    failure_screenshot: Optional[str]
    summary: Optional[Dict[str, Any]]
