#!/usr/bin/env python3
"""Thin loader delegating CLI/TUI logic to the interface layer."""

import sys

from ratatodo.interface import todo_app as _todo_app

if __name__ != "__main__":
    # When imported, expose the full interface implementation directly.
    sys.modules[__name__] = _todo_app
else:
    sys.exit(_todo_app.main())
