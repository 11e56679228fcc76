"""
Game Repository Module
Keeps every game created by the API in process memory, keyed by game ID
"""
import logging
import threading
import uuid
from typing import Dict, Optional, Tuple, Union

from services.tic_tac_toe_service import TicTacToeGame

logger = logging.getLogger(__name__)


def _as_uuid(game_id: Union[uuid.UUID, str]) -> Optional[uuid.UUID]:
    if isinstance(game_id, uuid.UUID):
        return game_id
    try:
        return uuid.UUID(str(game_id))
    except ValueError:
        return None


class InMemoryGameRepository:
    """
    In-memory store of games. Games live for the lifetime of the repository;
    nothing is evicted.

    The dictionaries are guarded by one lock. Each game also gets its own lock,
    which callers hold while reading and changing that game.
    """

    def __init__(self):
        self._games: Dict[uuid.UUID, TicTacToeGame] = {}
        self._game_locks: Dict[uuid.UUID, threading.Lock] = {}
        self._lock = threading.Lock()

    def create_game(self) -> Tuple[uuid.UUID, TicTacToeGame]:
        """Create a new game under a fresh ID"""
        game = TicTacToeGame()
        with self._lock:
            game_id = uuid.uuid4()
            while game_id in self._games:
                game_id = uuid.uuid4()
            self._games[game_id] = game
            self._game_locks[game_id] = threading.Lock()
            total = len(self._games)
        logger.debug(f"Stored game {game_id} | Total games: {total}")
        return game_id, game

    def get_game(self, game_id: Union[uuid.UUID, str]) -> Optional[TicTacToeGame]:
        """Get a game by ID, None if unknown or the ID is malformed"""
        key = _as_uuid(game_id)
        if key is None:
            return None
        with self._lock:
            return self._games.get(key)

    def update_game(self, game_id: Union[uuid.UUID, str], game: TicTacToeGame) -> None:
        """Store `game` under `game_id`, replacing whatever was there"""
        key = _as_uuid(game_id)
        if key is None:
            raise ValueError(f"Invalid game ID: {game_id!r}")
        with self._lock:
            self._games[key] = game
            self._game_locks.setdefault(key, threading.Lock())

    def game_lock(self, game_id: Union[uuid.UUID, str]) -> Optional[threading.Lock]:
        """Get the lock serializing moves on one game, None if the game is unknown"""
        key = _as_uuid(game_id)
        if key is None:
            return None
        with self._lock:
            return self._game_locks.get(key)

    def __len__(self):
        with self._lock:
            return len(self._games)

    def __contains__(self, game_id):
        return self.get_game(game_id) is not None
