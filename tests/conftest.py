from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """
    Ensure `src/` is on sys.path so tests can import `filter_studio`
    without requiring an editable install.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"
    sys.path.insert(0, str(src_root))


@pytest.fixture
def builtin_filters():
    """Catalog holding the built-in filters."""
    from filter_studio.core.filter_types import FilterCatalog
    from filter_studio.filters import register_builtin_filters

    register_builtin_filters()
    return FilterCatalog.instance()
