from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API models: snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MoveRequest(CamelModel):
    position: int


class MoveResponse(CamelModel):
    player: str
    position: int


class GameResponse(CamelModel):
    game_id: UUID
    board: List[str]  # 9 cells, row-major, "" for empty
    current_player: str
    status: str  # InProgress, XWins, OWins or Draw


class MoveGameResponse(GameResponse):
    last_move: MoveResponse


class ErrorResponse(CamelModel):
    error: str
