from typing import Annotated

from fastapi import Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.repositories.friend_repository import FriendRepository
from app.repositories.game_repository import GameRepository
from app.services.media_store import MediaStore

# Los ids son enteros positivos que caben en un BIGINT
MAX_RECORD_ID = 2**63 - 1
RecordId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]


def get_media_store(request: Request) -> MediaStore:
    return request.app.state.media_store


def get_game_repository(db: AsyncSession = Depends(get_db)) -> GameRepository:
    return GameRepository(db)


def get_friend_repository(db: AsyncSession = Depends(get_db)) -> FriendRepository:
    return FriendRepository(db)
