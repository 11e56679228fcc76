"""
Game Service Module
Handles the game API use cases: creating games, reading them and making moves
"""
import logging
from typing import Union
from uuid import UUID

from models import GameResponse, MoveGameResponse, MoveResponse
from services.game_exceptions import GameFinishedError, GameNotFoundError, InvalidMoveError
from services.game_repository import InMemoryGameRepository
from services import mapping_service
from services.tic_tac_toe_service import GameState, Move

logger = logging.getLogger(__name__)

GameId = Union[UUID, str]


def _to_game_response(game_id: UUID, game_state: GameState) -> GameResponse:
    return GameResponse(
        game_id=game_id,
        board=mapping_service.board_to_string_list(game_state.get_board()),
        current_player=mapping_service.player_to_string(game_state.current_player),
        status=mapping_service.status_to_string(game_state.status),
    )


def _to_move_game_response(game_id: UUID, game_state: GameState, last_move: Move) -> MoveGameResponse:
    game_response = _to_game_response(game_id, game_state)
    return MoveGameResponse(
        **game_response.model_dump(),
        last_move=MoveResponse(
            player=mapping_service.player_to_string(last_move.player),
            position=mapping_service.coordinates_to_position(last_move.row, last_move.col),
        ),
    )


class GameService:
    def __init__(self, repository: InMemoryGameRepository):
        self.repository = repository

    def create_game(self) -> GameResponse:
        """Create a new game with X to move"""
        game_id, game = self.repository.create_game()
        return _to_game_response(game_id, game.get_game_state())

    def get_game(self, game_id: GameId) -> GameResponse:
        """Get the current state of a game"""
        lock = self.repository.game_lock(game_id)
        if lock is None:
            raise GameNotFoundError(game_id)

        with lock:
            game = self.repository.get_game(game_id)
            if game is None:
                raise GameNotFoundError(game_id)
            return _to_game_response(UUID(str(game_id)), game.get_game_state())

    def make_move(self, game_id: GameId, position: int) -> MoveGameResponse:
        """
        Place the current player's mark at a board position.

        Args:
            game_id: ID of the game to play in
            position (int): Board position (0-8), row-major

        Returns:
            MoveGameResponse: Updated game state and the move just made

        Raises:
            GameNotFoundError: If no game has this ID
            GameFinishedError: If the game has already been won or drawn
            InvalidMoveError: If the position is out of range or occupied
        """
        lock = self.repository.game_lock(game_id)
        if lock is None:
            raise GameNotFoundError(game_id)

        with lock:
            game = self.repository.get_game(game_id)
            if game is None:
                raise GameNotFoundError(game_id)

            game_state = game.get_game_state()
            if game_state.is_finished:
                raise GameFinishedError()

            if not (0 <= position <= 8):
                raise InvalidMoveError("Position must be between 0 and 8.")

            row, col = mapping_service.position_to_coordinates(position)
            if game_state.get_cell(row, col) is not None:
                raise InvalidMoveError("Invalid move: position already occupied")

            if not game.make_move(row, col):
                raise InvalidMoveError("Invalid move: position already occupied")

            self.repository.update_game(game_id, game)

            updated_state = game.get_game_state()
            last_move = updated_state.move_history[-1]
            return _to_move_game_response(UUID(str(game_id)), updated_state, last_move)
