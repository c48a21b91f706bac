"""Clase base de los repositorios (tabla de juegos y de amigos)."""
import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StoreFault, ValidationError


class BaseRepository:
    """Ejecuta sentencias sobre la sesión de la petición.

    Cada operación es una sola sentencia SQL (más el commit si modifica);
    cualquier fallo del driver se convierte en :class:`StoreFault` con el
    mensaje original.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self._log = logging.getLogger(f"app.repository.{type(self).__name__}")

    async def _execute(self, stmt: Any, commit: bool = False):
        try:
            result = await self.db.execute(stmt)
            if commit:
                await self.db.commit()
            return result
        except Exception as exc:
            # Cualquier fallo del driver (también los que SQLAlchemy no envuelve,
            # como un OverflowError) deja la sesión limpia y sale como StoreFault
            await self.db.rollback()
            self._log.error(f"Fallo en la base de datos: {exc}")
            raise StoreFault(_describe(exc)) from exc

    async def _insert(self, obj: Any) -> Any:
        """Guarda una entidad nueva y devuelve la misma con el id generado."""
        try:
            self.db.add(obj)
            await self.db.commit()
            return obj
        except Exception as exc:
            await self.db.rollback()
            self._log.error(f"Fallo al insertar {type(obj).__name__}: {exc}")
            raise StoreFault(_describe(exc)) from exc


def require_text(value: Any, message: str) -> str:
    """Devuelve el texto limpio o lanza ValidationError si viene vacío."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def _describe(exc: Exception) -> str:
    # El mensaje del driver (sin el SQL ni los parámetros que añade SQLAlchemy)
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)
