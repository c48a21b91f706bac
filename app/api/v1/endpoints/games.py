import logging

from fastapi import APIRouter, Depends, File, UploadFile

from app.api.deps import RecordId, get_game_repository, get_media_store
from app.core.errors import ValidationError
from app.repositories.game_repository import NOMBRE_E_IMAGEN_REQUERIDOS, GameRepository
from app.schemas.common import MessageResponse
from app.schemas.game import (
    GameCreate, GameCreated, GameFavorite, GameListResponse, GameRename, UploadResponse,
)
from app.services.media_store import MediaStore

logger = logging.getLogger(__name__)

router = APIRouter()

# --- LISTADOS ---

@router.get("/games", response_model=GameListResponse)
async def list_games(repo: GameRepository = Depends(get_game_repository)):
    """Todos los juegos, ordenados por nombre."""
    games = await repo.list_games()
    return {"message": "success", "data": games}

# Tiene que ir antes de cualquier ruta /games/{game_id}
@router.get("/games/favorites", response_model=GameListResponse)
async def list_favorite_games(repo: GameRepository = Depends(get_game_repository)):
    games = await repo.list_favorite_games()
    return {"message": "success", "data": games}

# --- ALTA EN DOS PASOS: 1) subir imagen, 2) crear juego ---

@router.post("/upload", response_model=UploadResponse)
async def upload_image(
    image: UploadFile | None = File(None),
    media: MediaStore = Depends(get_media_store),
):
    """
    Guarda la portada y devuelve solo su ruta relativa. No toca la base de datos:
    si el cliente nunca crea el juego, el archivo se queda huérfano.
    """
    if image is None or not image.filename:
        raise ValidationError("No se subió ningún archivo.")
    contents = await image.read()
    if not contents:
        raise ValidationError("El archivo subido está vacío.")
    image_url = await media.store(contents, image.filename, fieldname="image")
    return {"imageUrl": image_url}

@router.post("/games", response_model=GameCreated, status_code=201)
async def create_game(
    payload: GameCreate,
    repo: GameRepository = Depends(get_game_repository),
    media: MediaStore = Depends(get_media_store),
):
    if not (payload.nombre or "").strip() or not (payload.imagen_url or "").strip():
        raise ValidationError(NOMBRE_E_IMAGEN_REQUERIDOS)
    # La imagen tiene que haberse subido antes con /api/upload
    if not await media.exists(payload.imagen_url):
        raise ValidationError(f"La imagen '{payload.imagen_url}' no existe. Súbela primero.")

    game = await repo.create_game(payload.nombre, payload.imagen_url)
    return {"message": "Juego creado", "id": game.id, "nombre": game.nombre, "imagen_url": game.imagen_url}

# --- EDICIÓN ---

@router.put("/games/{game_id}", response_model=MessageResponse)
async def update_game_name(
    game_id: RecordId,
    payload: GameRename,
    repo: GameRepository = Depends(get_game_repository),
):
    changes = await repo.update_game_name(game_id, payload.nombre)
    return {"message": "Juego actualizado", "changes": changes}

@router.put("/games/{game_id}/favorite", response_model=MessageResponse)
async def set_game_favorite(
    game_id: RecordId,
    payload: GameFavorite,
    repo: GameRepository = Depends(get_game_repository),
):
    changes = await repo.set_game_favorite(game_id, payload.favorito)
    return {"message": "success", "changes": changes}

# --- BORRADO (fila + archivo) ---

@router.delete("/games/{game_id}", response_model=MessageResponse, response_model_exclude_none=True)
async def delete_game(
    game_id: RecordId,
    repo: GameRepository = Depends(get_game_repository),
    media: MediaStore = Depends(get_media_store),
):
    # Si no existe, delete_game lanza NotFoundError y no se toca el disco
    imagen_url = await repo.delete_game(game_id)

    # Best-effort: si el archivo ya no está, el juego queda borrado igualmente
    if not await media.delete(imagen_url):
        logger.warning(f"Juego {game_id} borrado, pero su imagen '{imagen_url}' no se pudo eliminar")
    return {"message": "Juego eliminado"}
