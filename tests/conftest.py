"""Make the repository root importable when the project is not installed."""

from __future__ import annotations

import sys
from pathlib import Path


def pytest_sessionstart(session):
    repo_root = str(Path(__file__).resolve().parents[1])
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)
