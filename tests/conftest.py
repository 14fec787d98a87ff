import pytest
from fastapi.testclient import TestClient

from social_media_api.app.core import db
from social_media_api.app.core.config import settings
from social_media_api.app.main import app


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file and apply migrations."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "social_media.db"))
    db.init_db()
    return db.get_database_path()


@pytest.fixture
def client(database):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def bob(client):
    resp = client.post("/register", json={"username": "bob", "password": "pass"})
    assert resp.status_code == 200
    return resp.json()


def count_rows(table, where="1 = 1", params=()):
    with db.get_cursor() as cursor:
        row = cursor.execute(f"SELECT COUNT(*) AS n FROM {table} WHERE {where}", params).fetchone()
    return row["n"]
