"""
Project generation wizard UI tester.

This package contains modular pieces for driving a multi-step quick input
wizard inside a browser-hosted editor, enumerating its virtualized
selection lists, and recording what each run observed.
"""
