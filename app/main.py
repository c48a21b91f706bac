import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1.endpoints import friends, games
from app.core.config import Settings, settings as default_settings
from app.core.database import build_engine, build_sessionmaker, create_tables, ping
from app.core.errors import register_exception_handlers
from app.core.logging_config import setup_logging
from app.services.media_store import MediaStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    media_store = MediaStore(settings.UPLOAD_DIR, settings.UPLOAD_URL_PREFIX)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # El pool de conexiones vive lo mismo que la app
        engine = build_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = build_sessionmaker(engine)
        app.state.media_store = media_store
        # La carpeta de imágenes tiene que existir antes de servir /img
        media_store.ensure_dir()
        try:
            if settings.CREATE_TABLES_ON_STARTUP:
                await create_tables(engine)
            await ping(engine)
            logger.info("Conexión con la base de datos establecida.")
        except (SQLAlchemyError, OSError) as e:
            # Sin base de datos arrancamos igual: cada petición devolverá su error 500
            logger.error(f"Error al conectar con la base de datos: {e}")
        yield
        await engine.dispose()

    app = FastAPI(
        title="Librería de Juegos API",
        description="Catálogo personal de juegos y amigos",
        version="1.0.0",
        lifespan=lifespan,
    )

    # --- 1. CONFIGURACIÓN DE CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- 2. ERRORES -> {"error": "..."} ---
    register_exception_handlers(app)

    # --- 3. REGISTRAR RUTAS ---
    # Se mantienen las rutas /api/... que ya usa el frontend
    app.include_router(games.router, prefix="/api", tags=["Juegos"])
    app.include_router(friends.router, prefix="/api", tags=["Amigos"])

    # --- 4. PORTADAS SUBIDAS (solo lectura) ---
    app.mount(
        f"/{media_store.url_prefix}",
        StaticFiles(directory=media_store.base_dir, check_dir=False),
        name="imagenes",
    )

    @app.get("/")
    async def read_root():
        return {
            "status": "online",
            "project": "Librería de Juegos",
            "docs": "Go to /docs to see the API"
        }

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
