from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings(tmp_path):
    """Base de datos SQLite en un archivo temporal y carpeta de imágenes propia."""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'libreria.db'}",
        UPLOAD_DIR=str(tmp_path / "img"),
        DB_POOL_SIZE=5,
        CREATE_TABLES_ON_STARTUP=True,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def upload_dir(settings):
    return Path(settings.UPLOAD_DIR)


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def upload_image(client):
    """Sube una portada por /api/upload y devuelve su imageUrl."""
    def _upload(filename="portada.png", content=PNG_BYTES):
        resp = client.post("/api/upload", files={"image": (filename, content, "image/png")})
        assert resp.status_code == 200, resp.text
        return resp.json()["imageUrl"]
    return _upload


@pytest.fixture
def create_game(client, upload_image):
    """Alta completa en dos pasos: subir la imagen y crear el juego."""
    def _create(nombre="Chess", filename="portada.png"):
        imagen_url = upload_image(filename)
        resp = client.post("/api/games", json={"nombre": nombre, "imagen_url": imagen_url})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create
