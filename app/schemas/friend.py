from pydantic import BaseModel, ConfigDict
from typing import List, Optional

class FriendIn(BaseModel):
    nombre: Optional[str] = None

class FriendResponse(BaseModel):
    id: int
    nombre: str

    model_config = ConfigDict(from_attributes=True)

class FriendListResponse(BaseModel):
    message: str
    data: List[FriendResponse]

class FriendCreated(BaseModel):
    message: str
    id: int
    nombre: str
