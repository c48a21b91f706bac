from pydantic import BaseModel, ConfigDict
from typing import List, Optional

# 1. INPUT: los campos son opcionales aquí para poder responder 400
# con un mensaje propio cuando faltan (en lugar del 422 de FastAPI).
class GameCreate(BaseModel):
    nombre: Optional[str] = None
    imagen_url: Optional[str] = None

class GameRename(BaseModel):
    nombre: Optional[str] = None

class GameFavorite(BaseModel):
    # Acepta true/false y también 1/0 (así lo manda el frontend)
    favorito: bool = False

# 2. OUTPUT
class GameResponse(BaseModel):
    id: int
    nombre: str
    imagen_url: str
    favorito: bool

    model_config = ConfigDict(from_attributes=True)

class GameListResponse(BaseModel):
    message: str
    data: List[GameResponse]

class GameCreated(BaseModel):
    message: str
    id: int
    nombre: str
    imagen_url: str

class UploadResponse(BaseModel):
    imageUrl: str
