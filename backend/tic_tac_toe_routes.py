from fastapi import APIRouter, Depends, Request
import logging

from models import ErrorResponse, GameResponse, MoveGameResponse, MoveRequest
from services.game_repository import InMemoryGameRepository
from services.game_service import GameService

# Set up logging
logger = logging.getLogger(__name__)

# Create a router for Tic-Tac-Toe game endpoints
tic_tac_toe_router = APIRouter(prefix="/api/games", tags=["tic-tac-toe"])


def get_game_repository(request: Request) -> InMemoryGameRepository:
    """Dependency function to get the game repository owned by the running app"""
    return request.app.state.game_repository


def get_game_service(repository: InMemoryGameRepository = Depends(get_game_repository)) -> GameService:
    return GameService(repository)


@tic_tac_toe_router.post("", response_model=GameResponse)
def create_game(game_service: GameService = Depends(get_game_service)):
    """Create a new game and return the initial state"""
    game = game_service.create_game()
    logger.info(f"🎮 TIC-TAC-TOE GAME CREATED - {game.game_id}")
    return game


@tic_tac_toe_router.get(
    "/{game_id}",
    response_model=GameResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_game(game_id: str, game_service: GameService = Depends(get_game_service)):
    """Get the current state of a game"""
    return game_service.get_game(game_id)


@tic_tac_toe_router.post(
    "/{game_id}/moves",
    response_model=MoveGameResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def make_move(game_id: str, move_data: MoveRequest, game_service: GameService = Depends(get_game_service)):
    """Make a move for the current player"""
    result = game_service.make_move(game_id, move_data.position)
    logger.info(
        f"🎮 TIC-TAC-TOE MOVE - {game_id} | Player: {result.last_move.player} "
        f"| Position: {result.last_move.position} | Status: {result.status}"
    )
    return result
