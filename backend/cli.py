#!/usr/bin/env python3
"""
Console Tic-Tac-Toe for two players sharing one terminal.

Moves are typed as 'row,col' with coordinates from 0,0 (top-left) to 2,2
(bottom-right).
"""

import re
from typing import Callable, Optional, Tuple

from services.tic_tac_toe_service import BOARD_SIZE, GameStatus, Player, TicTacToeGame

# ASCII digits with an optional sign
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

RESULT_MESSAGES = {
    GameStatus.X_WON: "🎉 Player X Wins! 🎉",
    GameStatus.O_WON: "🎉 Player O Wins! 🎉",
    GameStatus.DRAW: "🤝 It's a Draw! 🤝",
}

STATUS_TEXT = {
    GameStatus.IN_PROGRESS: "In Progress",
    GameStatus.X_WON: "X Won",
    GameStatus.O_WON: "O Won",
    GameStatus.DRAW: "Draw",
}


def parse_coordinates(text: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Parse 'row,col' input.

    Args:
        text (str): Raw input line, may be None

    Returns:
        tuple: (row, col) if both are integers between 0 and 2, otherwise None
    """
    if text is None or not text.strip():
        return None

    parts = text.strip().split(",")
    if len(parts) != 2:
        return None

    tokens = [part.strip() for part in parts]
    if not all(INTEGER_PATTERN.fullmatch(token) for token in tokens):
        return None

    row, col = int(tokens[0]), int(tokens[1])

    if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
        return row, col
    return None


class GameConsole:
    """Reads moves from and renders a game to a text console."""

    def __init__(self, game: TicTacToeGame, input_func: Callable[[str], str] = input,
                 output: Callable[..., None] = print):
        if game is None:
            raise ValueError("game is required")
        self.game = game
        self._input = input_func
        self._print = output

    def show_welcome(self):
        self._print("🎮 Welcome to Tic Tac Toe! 🎮")
        self._print()
        self._print("How to play:")
        self._print("• Enter coordinates as 'row,col' (e.g., '1,2')")
        self._print("• Coordinates range from 0,0 (top-left) to 2,2 (bottom-right)")
        self._print("• X goes first, then players alternate")
        self._print("• Get 3 in a row (horizontal, vertical, or diagonal) to win!")
        self._print()

    def render_board(self) -> str:
        board = self.game.get_game_state().get_board()
        lines = ["   0   1   2"]
        for row_index, row in enumerate(board):
            cells = " | ".join(cell.value if cell is not None else "·" for cell in row)
            lines.append(f"{row_index}  {cells}")
            if row_index < BOARD_SIZE - 1:
                lines.append("   ---------")
        return "\n".join(lines)

    def display_board(self):
        self._print("Current Board:")
        self._print(self.render_board())
        self._print()

    def display_game_status(self):
        state = self.game.get_game_state()
        self._print(f"Game Status: {STATUS_TEXT[state.status]}")
        if state.status is GameStatus.IN_PROGRESS:
            self._print(f"Current Player: {state.current_player.value}")
        self._print(f"Moves Made: {len(state.move_history)}")
        self._print()

    def get_move_input(self) -> Optional[str]:
        """Prompt the current player, None when input is exhausted"""
        player = self.game.get_game_state().current_player
        try:
            return self._input(f"Player {player.value}, enter your move (row,col): ")
        except EOFError:
            return None

    def show_error(self, message: str):
        self._print(f"❌ {message}")
        self._print()

    def show_move_success(self, row: int, col: int, player: Player):
        self._print(f"✅ Player {player.value} placed at ({row},{col})")
        self._print()

    def show_game_result(self):
        status = self.game.get_game_state().status
        self._print(RESULT_MESSAGES.get(status, "Game in progress..."))
        self._print()

    def prompt_play_again(self) -> bool:
        try:
            answer = self._input("Would you like to play again? (y/n): ")
        except EOFError:
            return False
        return answer.strip().lower() in ("y", "yes")


def play_game(game: TicTacToeGame, console: GameConsole) -> bool:
    """
    Play one game to the end.

    Returns:
        bool: True if the game reached a result, False if input ran out first
    """
    while game.get_game_state().status is GameStatus.IN_PROGRESS:
        console.display_board()
        console.display_game_status()

        text = console.get_move_input()
        if text is None:
            return False

        coordinates = parse_coordinates(text)
        if coordinates is None:
            console.show_error("Invalid input format. Please enter coordinates as 'row,col' (e.g., '1,2').")
            continue

        row, col = coordinates
        player = game.get_game_state().current_player
        if game.make_move(row, col):
            console.show_move_success(row, col, player)
        else:
            console.show_error("Invalid move. Position may be occupied or out of bounds.")

    console.display_board()
    console.show_game_result()
    return True


def main(input_func: Callable[[str], str] = input, output: Callable[..., None] = print):
    game = TicTacToeGame()
    console = GameConsole(game, input_func, output)

    console.show_welcome()
    while play_game(game, console) and console.prompt_play_again():
        game.start_new_game()
        console.show_welcome()

    output("Thanks for playing! 👋")


if __name__ == "__main__":
    main()
