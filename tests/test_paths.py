from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

from daylog import paths


def test_app_data_root_linux_prefers_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(paths.platform, "system", lambda: "Linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    assert paths.app_data_root() == tmp_path / "xdg"


def test_app_data_root_linux_falls_back_to_dot_config(monkeypatch, tmp_path):
    monkeypatch.setattr(paths.platform, "system", lambda: "Linux")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr(paths.Path, "home", classmethod(lambda cls: tmp_path))
    assert paths.app_data_root() == tmp_path / ".config"


def test_app_data_root_windows_uses_appdata(monkeypatch, tmp_path):
    monkeypatch.setattr(paths.platform, "system", lambda: "Windows")
    monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))
    assert paths.app_data_root() == tmp_path / "Roaming"


def test_app_data_root_macos(monkeypatch, tmp_path):
    monkeypatch.setattr(paths.platform, "system", lambda: "Darwin")
    monkeypatch.setattr(paths.Path, "home", classmethod(lambda cls: tmp_path))
    assert paths.app_data_root() == tmp_path / "Library" / "Application Support"


def test_program_name_from_script(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/opt/tools/nightly_job.py", "--flag"])
    assert paths.program_name() == "nightly_job"


def test_program_name_fallback(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["-c"])
    assert paths.program_name() == "python"
    monkeypatch.setattr(sys, "argv", [])
    assert paths.program_name() == "python"


def test_default_log_file_layout(app_root):
    target = paths.default_log_file("MyApp", datetime(2024, 12, 31, 23, 59))
    assert target == app_root / "MyApp" / "Log" / "2024-12-31.log"
    assert target.parent.is_dir()
    # Directory creation is idempotent
    assert paths.default_log_file("MyApp", datetime(2025, 1, 1)) == app_root / "MyApp" / "Log" / "2025-01-01.log"


def test_default_log_dir_uses_program_name(app_root, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["worker.py"])
    assert paths.default_log_dir(None) == app_root / "worker" / "Log"
    assert paths.default_log_dir("") == app_root / "worker" / "Log"
    assert isinstance(paths.default_log_dir(None), Path)
