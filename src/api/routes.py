"""HTTP routes for games. Request/response marshalling only, all decisions are made by the GameService."""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_app_settings, get_game_service
from src.api.models import CreateGameRequest, ErrorResponse, GameResponse
from src.core.config import Settings
from src.services.game_service import GameService

router = APIRouter(prefix="/games", tags=["games"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=GameResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def create_game(
    request: CreateGameRequest,
    service: GameService = Depends(get_game_service),
    settings: Settings = Depends(get_app_settings),
) -> GameResponse:
    size = request.size if request.size is not None else settings.DEFAULT_GAME_SIZE
    bombs = request.bombs
    if bombs is None:
        # Scale the default down so it always fits the requested board
        bombs = min(settings.DEFAULT_BOMB_COUNT, max(size * size - 1, 0))
    game = service.create_game(name=request.name, size=size, bomb_count=bombs)
    return GameResponse.from_model(game)


@router.get(
    "/{game_id}",
    response_model=GameResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def get_game(
    game_id: str, service: GameService = Depends(get_game_service)
) -> GameResponse:
    return GameResponse.from_model(service.get_game(game_id))
