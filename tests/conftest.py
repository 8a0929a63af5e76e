from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the api package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.app import create_app  # noqa: E402
from api.core import config as core_config  # noqa: E402
from api.db import models  # noqa: E402
from api.db import session as db_session  # noqa: E402

UPLOAD_BASE = "https://files.test/uploads"


@pytest.fixture()
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture()
def settings(data_dir):
    return dataclasses.replace(
        core_config.get_settings(),
        app_env="test",
        data_dir=data_dir,
        upload_max_bytes=64,
        upload_base_url=UPLOAD_BASE,
    )


@pytest.fixture()
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


def _reset_caches() -> None:
    db_session.reset_engine()


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite profile store; caches are reset so DATABASE_URL is re-read."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _reset_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    finally:
        _reset_caches()


@pytest.fixture()
def no_db(monkeypatch):
    """Profile store not configured at all."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    _reset_caches()
    yield
    _reset_caches()
