#!/usr/bin/env python3
"""
Lint harness for daylog.

Checks the package and the tests with whichever of flake8, black and mypy
are on PATH (all three come with the `dev` extra). Missing tools are
skipped. Pass paths to narrow the run, e.g. `python make_lint.py daylog`.
"""
from __future__ import annotations

import shutil
import subprocess
import sys

DEFAULT_TARGETS = ["daylog", "tests"]

CHECKS = [
    ("flake8", ["--max-line-length", "120"]),
    ("black", ["--check", "--line-length", "120"]),
    ("mypy", ["--ignore-missing-imports"]),
]


def main(argv: list[str]) -> int:
    targets = argv or DEFAULT_TARGETS
    failed = []
    for tool, flags in CHECKS:
        if shutil.which(tool) is None:
            print(f"skip {tool}: not installed")
            continue
        # mypy only needs the package; the tests are plain pytest modules
        paths = [t for t in targets if t != "tests"] if tool == "mypy" else targets
        if not paths:
            continue
        if subprocess.run([tool, *flags, *paths], check=False).returncode != 0:
            failed.append(tool)
    if failed:
        print("failed: " + ", ".join(failed))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
