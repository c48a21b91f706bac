from typing import List

from sqlalchemy import delete, select, update

from app.core.errors import NotFoundError
from app.models.game import Game
from app.repositories.base import BaseRepository, require_text

NOMBRE_E_IMAGEN_REQUERIDOS = "El nombre y la URL de la imagen son requeridos."
NOMBRE_REQUERIDO = "El nombre no puede estar vacío."
JUEGO_NO_ENCONTRADO = "Juego no encontrado."


class GameRepository(BaseRepository):

    async def list_games(self) -> List[Game]:
        result = await self._execute(select(Game).order_by(Game.nombre))
        return list(result.scalars().all())

    async def list_favorite_games(self) -> List[Game]:
        stmt = select(Game).where(Game.favorito.is_(True)).order_by(Game.nombre)
        result = await self._execute(stmt)
        return list(result.scalars().all())

    async def get_game(self, game_id: int) -> Game:
        result = await self._execute(select(Game).where(Game.id == game_id))
        game = result.scalar_one_or_none()
        if game is None:
            raise NotFoundError(JUEGO_NO_ENCONTRADO)
        return game

    async def create_game(self, nombre: str, imagen_url: str) -> Game:
        """Inserta un juego nuevo (siempre empieza como no favorito)."""
        nombre = require_text(nombre, NOMBRE_E_IMAGEN_REQUERIDOS)
        imagen_url = require_text(imagen_url, NOMBRE_E_IMAGEN_REQUERIDOS)
        return await self._insert(Game(nombre=nombre, imagen_url=imagen_url, favorito=False))

    async def update_game_name(self, game_id: int, nombre: str) -> int:
        nombre = require_text(nombre, NOMBRE_REQUERIDO)
        stmt = update(Game).where(Game.id == game_id).values(nombre=nombre)
        result = await self._execute(stmt, commit=True)
        if result.rowcount == 0:
            raise NotFoundError(JUEGO_NO_ENCONTRADO)
        return result.rowcount

    async def set_game_favorite(self, game_id: int, favorito: bool) -> int:
        # Se escribe el valor final, nunca se invierte el que haya
        stmt = update(Game).where(Game.id == game_id).values(favorito=bool(favorito))
        result = await self._execute(stmt, commit=True)
        if result.rowcount == 0:
            raise NotFoundError(JUEGO_NO_ENCONTRADO)
        return result.rowcount

    async def delete_game(self, game_id: int) -> str:
        """
        Borra la fila y devuelve su imagen_url. El borrado del archivo
        lo hace quien llama (la capa API).
        """
        game = await self.get_game(game_id)
        result = await self._execute(delete(Game).where(Game.id == game_id), commit=True)
        if result.rowcount == 0:
            # Otra petición lo borró entre la lectura y el DELETE
            raise NotFoundError(JUEGO_NO_ENCONTRADO)
        return game.imagen_url
