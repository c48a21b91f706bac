from fastapi import APIRouter, Depends

from app.api.deps import RecordId, get_friend_repository
from app.repositories.friend_repository import FriendRepository
from app.schemas.common import MessageResponse
from app.schemas.friend import FriendCreated, FriendIn, FriendListResponse

router = APIRouter()

@router.get("/friends", response_model=FriendListResponse)
async def list_friends(repo: FriendRepository = Depends(get_friend_repository)):
    friends = await repo.list_friends()
    return {"message": "success", "data": friends}

@router.post("/friends", response_model=FriendCreated, status_code=201)
async def create_friend(payload: FriendIn, repo: FriendRepository = Depends(get_friend_repository)):
    friend = await repo.create_friend(payload.nombre)
    return {"message": "Amigo creado", "id": friend.id, "nombre": friend.nombre}

@router.put("/friends/{friend_id}", response_model=MessageResponse)
async def update_friend_name(
    friend_id: RecordId,
    payload: FriendIn,
    repo: FriendRepository = Depends(get_friend_repository),
):
    changes = await repo.update_friend_name(friend_id, payload.nombre)
    return {"message": "Amigo actualizado", "changes": changes}

@router.delete("/friends/{friend_id}", response_model=MessageResponse, response_model_exclude_none=True)
async def delete_friend(friend_id: RecordId, repo: FriendRepository = Depends(get_friend_repository)):
    await repo.delete_friend(friend_id)
    return {"message": "Amigo eliminado"}
