# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

MINIMAL_INSTANCE = """\
SECTION_HORIZON
7
SECTION_SHIFTS
D,480,
SECTION_STAFF
S1,D=7,2400,0,7,1,2,1
SECTION_DAYS_OFF
SECTION_SHIFT_ON_REQUESTS
SECTION_SHIFT_OFF_REQUESTS
SECTION_COVER
0,D,2,10,5
"""


# -----------------------------
# Path helpers
# -----------------------------
@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (where pyproject.toml lives)."""
    return Path(__file__).resolve().parents[1]


@pytest.fixture(scope="session")
def data_dir() -> Path:
    """Sample instance files shipped with the tests."""
    return Path(__file__).resolve().parent / "data"


@pytest.fixture
def write_instance(tmp_path: Path) -> Callable[[str], Path]:
    """Write instance text to a fresh file under tmp_path and return its path."""
    counter = {"n": 0}

    def _write(text: str, name: str | None = None) -> Path:
        counter["n"] += 1
        path = tmp_path / (name or f"instance_{counter['n']}.txt")
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def minimal_text() -> str:
    return MINIMAL_INSTANCE
