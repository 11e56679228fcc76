"""
Game API errors. Each error carries the HTTP status it is reported with and the
message shown to the client.
"""
from uuid import UUID
from typing import Union


class GameError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        return self.message


class GameNotFoundError(GameError):
    status_code = 404

    def __init__(self, game_id: Union[UUID, str]):
        super().__init__(f"Game with ID '{game_id}' not found.")
        self.game_id = game_id

    @property
    def public_message(self) -> str:
        return "Game not found"


class InvalidMoveError(GameError):
    status_code = 400


class GameFinishedError(GameError):
    status_code = 422

    def __init__(self):
        super().__init__("Game already finished.")
