from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from portfolio_cms.data.db import init_db, reset_engine

# Test modules whose file name contains one of these use a temporary database
_DB_MODULE_MARKERS = ("api", "service")


@pytest.fixture(autouse=True)
def api_db(
    request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[None]:
    """Use a temporary SQLite DB for API and service tests."""
    stem = request.node.path.stem.lower()
    if not any(marker in stem for marker in _DB_MODULE_MARKERS):
        yield
        return

    db_path = tmp_path / "portfolio.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    reset_engine()
    init_db()
    yield
    # Dispose engine to release connections
    reset_engine()
