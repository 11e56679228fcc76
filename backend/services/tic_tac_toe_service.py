"""
Tic-Tac-Toe Game Service

This module provides the two-player Tic-Tac-Toe game engine shared by the web API
and the console client. It validates moves, alternates turns, detects wins and
draws, and keeps an ordered history of every move made.

Usage:
    game = TicTacToeGame()  # X always moves first

    # X plays the center cell
    placed = game.make_move(1, 1)

    # Inspect the current state
    state = game.get_game_state()
    print(state.current_player, state.status, len(state.move_history))
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

BOARD_SIZE = 3

# Winning lines as (row, col) triples
WIN_LINES = (
    ((0, 0), (0, 1), (0, 2)), ((1, 0), (1, 1), (1, 2)), ((2, 0), (2, 1), (2, 2)),  # Rows
    ((0, 0), (1, 0), (2, 0)), ((0, 1), (1, 1), (2, 1)), ((0, 2), (1, 2), (2, 2)),  # Columns
    ((0, 0), (1, 1), (2, 2)), ((0, 2), (1, 1), (2, 0)),                            # Diagonals
)


class Player(str, Enum):
    """A player and the mark it puts on the board. X always moves first."""
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class Move:
    """A single placed mark. `sequence_number` is 1-based."""
    row: int
    col: int
    player: Player
    sequence_number: int


Board = List[List[Optional[Player]]]


def _in_range(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < BOARD_SIZE


class GameState:
    """
    The complete state of one Tic-Tac-Toe game: board, current player, status and
    move history. The board is only ever changed through `try_make_move`.
    """

    def __init__(self):
        self._board: Board = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._move_history: List[Move] = []
        self._current_player = Player.X
        self._status = GameStatus.IN_PROGRESS

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def move_history(self) -> Tuple[Move, ...]:
        return tuple(self._move_history)

    @property
    def is_finished(self) -> bool:
        return self._status.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        if self._status is GameStatus.X_WON:
            return Player.X
        if self._status is GameStatus.O_WON:
            return Player.O
        return None

    def get_cell(self, row: int, col: int) -> Optional[Player]:
        """
        Read a single cell.

        Args:
            row (int): Row index (0-2)
            col (int): Column index (0-2)

        Returns:
            Player or None: The mark in the cell, None when empty

        Raises:
            IndexError: If row or col is outside 0-2
        """
        if not _in_range(row):
            raise IndexError("Row must be between 0 and 2.")
        if not _in_range(col):
            raise IndexError("Column must be between 0 and 2.")
        return self._board[row][col]

    def get_board(self) -> Board:
        """
        Get a copy of the board. Changing the copy never affects the game.

        Returns:
            list: 3x3 list of rows, each cell a Player or None
        """
        return [row[:] for row in self._board]

    def try_make_move(self, row: int, col: int) -> bool:
        """
        Place the current player's mark at (row, col).

        Args:
            row (int): Row index (0-2)
            col (int): Column index (0-2)

        Returns:
            bool: True if the mark was placed, False if the game is over, the
                coordinates are out of range or the cell is occupied. A failed
                attempt leaves the state untouched.
        """
        if self._status is not GameStatus.IN_PROGRESS:
            return False

        if not (_in_range(row) and _in_range(col)):
            return False

        if self._board[row][col] is not None:
            return False

        player = self._current_player
        self._board[row][col] = player
        self._move_history.append(Move(row, col, player, len(self._move_history) + 1))

        self._update_status(player)

        if self._status is GameStatus.IN_PROGRESS:
            self._current_player = player.opponent

        return True

    def _update_status(self, player: Player):
        if self._has_winning_line(player):
            self._status = GameStatus.X_WON if player is Player.X else GameStatus.O_WON
        elif self._is_board_full():
            self._status = GameStatus.DRAW

    def _has_winning_line(self, player: Player) -> bool:
        for line in WIN_LINES:
            if all(self._board[r][c] is player for r, c in line):
                return True
        return False

    def _is_board_full(self) -> bool:
        return all(cell is not None for row in self._board for cell in row)

    def __repr__(self):
        return (f"GameState(current_player={self._current_player.value}, "
                f"status={self._status.name}, moves={len(self._move_history)})")


class TicTacToeGame:
    """
    A single Tic-Tac-Toe table. Holds the state of the game being played and can
    start over with a fresh board.
    """

    def __init__(self):
        self._game_state = GameState()

    @property
    def game_state(self) -> GameState:
        return self._game_state

    def start_new_game(self):
        """Discard the current game and start a fresh one with X to move."""
        self._game_state = GameState()

    def make_move(self, row: int, col: int) -> bool:
        """Attempt a move for the current player. See `GameState.try_make_move`."""
        return self._game_state.try_make_move(row, col)

    def get_game_state(self) -> GameState:
        return self._game_state
