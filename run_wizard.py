"""
Entry point: opens the editor, runs the project generation wizard with
OPTIONS, enumerates the extension picker and prints what was observed.

The implementation is split into modular components under wizard_tester/.
"""

from __future__ import annotations
from wizard_tester.core.orchestrator import print_summary, run

OPTIONS = {
    "build_tool": "Maven",
    "group_id": "org.acme",
    "artifact_id": "quarkus-getting-started",
    "project_version": "1.0.0-SNAPSHOT",
    "package_name": "org.acme",
    "resource_name": "GreetingResource",
    "extensions": ["Camel Core", "Eclipse Vert.x"],
    "dest": "/tmp/wizard-projects",
}


def main():
    final_state = run(OPTIONS, audit_extensions=True)
    print_summary(OPTIONS, final_state)


if __name__ == "__main__":
    main()
