"""
Translation between engine values and their API representations
"""
from typing import List, Tuple

from services.tic_tac_toe_service import Board, GameStatus, Player

STATUS_NAMES = {
    GameStatus.IN_PROGRESS: "InProgress",
    GameStatus.X_WON: "XWins",
    GameStatus.O_WON: "OWins",
    GameStatus.DRAW: "Draw",
}

STATUS_BY_NAME = {name: status for status, name in STATUS_NAMES.items()}


def position_to_coordinates(position: int) -> Tuple[int, int]:
    """Convert a board position (0-8) into (row, col)"""
    return position // 3, position % 3


def coordinates_to_position(row: int, col: int) -> int:
    return row * 3 + col


def board_to_string_list(board: Board) -> List[str]:
    """Flatten a 3x3 board row by row, empty cells as ''"""
    return [cell.value if cell is not None else "" for row in board for cell in row]


def player_to_string(player: Player) -> str:
    return player.value


def status_to_string(status: GameStatus) -> str:
    try:
        return STATUS_NAMES[status]
    except KeyError:
        raise ValueError(f"Unknown game status: {status!r}") from None


def string_to_status(name: str) -> GameStatus:
    try:
        return STATUS_BY_NAME[name]
    except KeyError:
        raise ValueError(f"Unknown game status: {name!r}") from None
