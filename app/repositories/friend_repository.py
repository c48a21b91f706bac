from typing import List

from sqlalchemy import delete, select, update

from app.core.errors import NotFoundError
from app.models.friend import Friend
from app.repositories.base import BaseRepository, require_text

NOMBRE_REQUERIDO = "El nombre no puede estar vacío."
AMIGO_NO_ENCONTRADO = "Amigo no encontrado."


class FriendRepository(BaseRepository):
    """Mismas operaciones que los juegos, sin favorito ni imagen."""

    async def list_friends(self) -> List[Friend]:
        result = await self._execute(select(Friend).order_by(Friend.nombre))
        return list(result.scalars().all())

    async def get_friend(self, friend_id: int) -> Friend:
        result = await self._execute(select(Friend).where(Friend.id == friend_id))
        friend = result.scalar_one_or_none()
        if friend is None:
            raise NotFoundError(AMIGO_NO_ENCONTRADO)
        return friend

    async def create_friend(self, nombre: str) -> Friend:
        nombre = require_text(nombre, NOMBRE_REQUERIDO)
        return await self._insert(Friend(nombre=nombre))

    async def update_friend_name(self, friend_id: int, nombre: str) -> int:
        nombre = require_text(nombre, NOMBRE_REQUERIDO)
        stmt = update(Friend).where(Friend.id == friend_id).values(nombre=nombre)
        result = await self._execute(stmt, commit=True)
        if result.rowcount == 0:
            raise NotFoundError(AMIGO_NO_ENCONTRADO)
        return result.rowcount

    async def delete_friend(self, friend_id: int) -> int:
        result = await self._execute(delete(Friend).where(Friend.id == friend_id), commit=True)
        if result.rowcount == 0:
            raise NotFoundError(AMIGO_NO_ENCONTRADO)
        return result.rowcount
