from __future__ import annotations

import sys
from pathlib import Path

import pytest

# pytest may run without installing the project; ensure repo root is importable.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from tests.unit._fakes import RecordingEngine  # noqa: E402


@pytest.fixture()
def engine() -> RecordingEngine:
    return RecordingEngine()
