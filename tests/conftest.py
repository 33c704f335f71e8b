"""
Pytest configuration for the daylog test suite.

- Puts the repository root on sys.path so `import daylog` works without an
  installed package.
- Provides `app_root`, which redirects the per-user application-data root to
  a temporary directory so no test writes into the real home directory.
"""

import os
import sys

import pytest

# Insert the repository root (one directory up from tests/) at the
# beginning of sys.path to prioritize local modules over site-packages.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture
def app_root(tmp_path, monkeypatch):
    from daylog import paths

    root = tmp_path / "appdata"
    monkeypatch.setattr(paths, "app_data_root", lambda: root)
    return root


@pytest.fixture
def fixed_now(monkeypatch):
    """Freeze the logger clock; returns a setter to move it."""
    from datetime import datetime

    from daylog import logger as logger_mod

    state = {"now": datetime(2024, 3, 9, 14, 5, 7, 42000)}
    monkeypatch.setattr(logger_mod, "_now", lambda: state["now"])

    def _set(value):
        state["now"] = value

    return _set
