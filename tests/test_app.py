"""Arranque de la app, pool de conexiones y script init_db."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from app.core.config import Settings
from app.core.database import build_engine
from app.main import create_app
from init_db import init_db


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "online"


def test_pool_is_bounded(settings):
    engine = build_engine(settings)
    assert engine.pool.size() == settings.DB_POOL_SIZE
    assert engine.pool.timeout() == settings.DB_POOL_TIMEOUT


def test_memory_sqlite_engine_builds():
    settings = Settings(DATABASE_URL="sqlite+aiosqlite:///:memory:")
    assert build_engine(settings) is not None


def test_database_down_returns_server_error(tmp_path, caplog):
    settings = Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'no-existe' / 'db.sqlite'}",
        UPLOAD_DIR=str(tmp_path / "img"),
    )
    with TestClient(create_app(settings)) as client:
        resp = client.get("/api/games")
        assert resp.status_code == 500
        assert resp.json()["error"]
        assert client.get("/api/friends").status_code == 500
    assert "Error al conectar con la base de datos" in caplog.text


def test_startup_creates_upload_dir(settings, tmp_path):
    with TestClient(create_app(settings)):
        assert (tmp_path / "img").is_dir()


@pytest.mark.anyio
async def test_init_db_creates_tables(settings):
    await init_db(settings)
    await init_db(settings, reset=True)

    engine = build_engine(settings)
    async with engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    await engine.dispose()
    assert {"juegos", "amigos"} <= set(tables)


def test_unexpected_error_is_json(settings):
    app = create_app(settings)

    @app.get("/api/roto")
    async def roto():
        raise RuntimeError("algo se rompió")

    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/api/roto")
    assert resp.status_code == 500
    assert resp.json() == {"error": "algo se rompió"}
