"""Tests de los repositorios directamente contra SQLite (aiosqlite)."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.database import build_engine, build_sessionmaker, create_tables
from app.core.errors import NotFoundError, StoreFault, ValidationError
from app.repositories.friend_repository import FriendRepository
from app.repositories.game_repository import GameRepository

pytestmark = pytest.mark.anyio


@pytest.fixture
async def db(settings):
    engine = build_engine(settings)
    await create_tables(engine)
    async with build_sessionmaker(engine)() as session:
        yield session
    await engine.dispose()


async def test_create_game_then_list(db):
    repo = GameRepository(db)
    game = await repo.create_game("Chess", "img/a.png")

    games = await repo.list_games()
    assert [(g.id, g.nombre, g.imagen_url, g.favorito) for g in games] == [
        (game.id, "Chess", "img/a.png", False)
    ]


async def test_create_game_requires_both_fields(db):
    repo = GameRepository(db)
    with pytest.raises(ValidationError):
        await repo.create_game("", "img/a.png")
    with pytest.raises(ValidationError):
        await repo.create_game("Chess", "  ")
    assert await repo.list_games() == []


async def test_favorites_filter(db):
    repo = GameRepository(db)
    go = await repo.create_game("Go", "img/go.png")
    chess = await repo.create_game("Chess", "img/chess.png")

    assert await repo.set_game_favorite(go.id, True) == 1
    assert [g.id for g in await repo.list_favorite_games()] == [go.id]

    await repo.set_game_favorite(chess.id, True)
    assert [g.nombre for g in await repo.list_favorite_games()] == ["Chess", "Go"]

    await repo.set_game_favorite(go.id, False)
    assert [g.id for g in await repo.list_favorite_games()] == [chess.id]


async def test_set_favorite_is_idempotent(db):
    repo = GameRepository(db)
    game = await repo.create_game("Chess", "img/a.png")
    await repo.set_game_favorite(game.id, True)
    await repo.set_game_favorite(game.id, True)
    assert [g.id for g in await repo.list_favorite_games()] == [game.id]


async def test_missing_game_raises_not_found(db):
    repo = GameRepository(db)
    with pytest.raises(NotFoundError):
        await repo.get_game(99)
    with pytest.raises(NotFoundError):
        await repo.update_game_name(99, "X")
    with pytest.raises(NotFoundError):
        await repo.set_game_favorite(99, True)
    with pytest.raises(NotFoundError):
        await repo.delete_game(99)


async def test_delete_game_returns_image_url(db):
    repo = GameRepository(db)
    game = await repo.create_game("Chess", "img/a.png")
    assert await repo.delete_game(game.id) == "img/a.png"
    assert await repo.list_games() == []


async def test_update_game_name_strips_whitespace(db):
    repo = GameRepository(db)
    game = await repo.create_game("Chess", "img/a.png")
    await repo.update_game_name(game.id, "  Ajedrez ")
    assert (await repo.get_game(game.id)).nombre == "Ajedrez"


async def test_blank_name_rejected_before_touching_the_store():
    session = MagicMock()
    repo = GameRepository(session)
    with pytest.raises(ValidationError):
        await repo.update_game_name(1, "")
    session.execute.assert_not_called()
    session.commit.assert_not_called()


async def test_friend_crud(db):
    repo = FriendRepository(db)
    luis = await repo.create_friend("Luis")
    ana = await repo.create_friend("Ana")
    assert [f.nombre for f in await repo.list_friends()] == ["Ana", "Luis"]

    assert await repo.update_friend_name(luis.id, "Luisa") == 1
    assert (await repo.get_friend(luis.id)).nombre == "Luisa"

    assert await repo.delete_friend(ana.id) == 1
    assert [f.id for f in await repo.list_friends()] == [luis.id]
    with pytest.raises(NotFoundError):
        await repo.delete_friend(ana.id)


async def test_friend_requires_name(db):
    with pytest.raises(ValidationError):
        await FriendRepository(db).create_friend(None)


async def test_query_failure_becomes_store_fault(settings):
    # Sin crear las tablas: la consulta falla en SQLite ("no such table")
    engine = build_engine(settings)
    async with build_sessionmaker(engine)() as session:
        with pytest.raises(StoreFault) as exc_info:
            await GameRepository(session).list_games()
    await engine.dispose()
    assert "juegos" in exc_info.value.message


async def test_unwrapped_driver_error_becomes_store_fault():
    session = MagicMock()
    session.execute = AsyncMock(side_effect=OverflowError("Python int too large to convert to SQLite INTEGER"))
    session.rollback = AsyncMock()

    with pytest.raises(StoreFault) as exc_info:
        await GameRepository(session).set_game_favorite(10**20, True)
    assert "too large" in exc_info.value.message
    session.rollback.assert_awaited_once()
