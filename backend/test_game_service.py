import threading
import uuid

import pytest

from services.game_exceptions import GameFinishedError, GameNotFoundError, InvalidMoveError


def test_create_game_returns_initial_state(game_service):
    result = game_service.create_game()

    assert isinstance(result.game_id, uuid.UUID)
    assert result.board == [""] * 9
    assert result.current_player == "X"
    assert result.status == "InProgress"


def test_get_game_returns_same_state_as_created(game_service):
    created = game_service.create_game()

    result = game_service.get_game(created.game_id)

    assert result == created


def test_get_game_unknown_id_raises(game_service):
    missing = uuid.uuid4()

    with pytest.raises(GameNotFoundError) as exc_info:
        game_service.get_game(missing)

    assert exc_info.value.game_id == missing
    assert exc_info.value.status_code == 404
    assert exc_info.value.public_message == "Game not found"


def test_make_move_places_mark_and_reports_last_move(game_service):
    created = game_service.create_game()

    result = game_service.make_move(created.game_id, 4)

    assert result.game_id == created.game_id
    assert result.board[4] == "X"
    assert result.current_player == "O"
    assert result.status == "InProgress"
    assert result.last_move.player == "X"
    assert result.last_move.position == 4


def test_make_move_unknown_game_raises(game_service):
    with pytest.raises(GameNotFoundError):
        game_service.make_move(uuid.uuid4(), 0)
    with pytest.raises(GameNotFoundError):
        game_service.make_move("nonsense", 0)


@pytest.mark.parametrize("position", [-1, 9, 10])
def test_make_move_position_out_of_range_raises(game_service, position):
    created = game_service.create_game()

    with pytest.raises(InvalidMoveError, match="Position must be between 0 and 8."):
        game_service.make_move(created.game_id, position)

    assert game_service.get_game(created.game_id).board == [""] * 9


def test_make_move_occupied_position_raises(game_service):
    created = game_service.create_game()
    game_service.make_move(created.game_id, 4)

    with pytest.raises(InvalidMoveError) as exc_info:
        game_service.make_move(created.game_id, 4)

    assert exc_info.value.message == "Invalid move: position already occupied"
    assert exc_info.value.status_code == 400
    assert game_service.get_game(created.game_id).current_player == "O"


def test_winning_move_and_move_after_finish(game_service):
    created = game_service.create_game()
    for position in (0, 3, 4, 6):
        game_service.make_move(created.game_id, position)

    result = game_service.make_move(created.game_id, 8)

    assert result.status == "XWins"
    assert result.current_player == "X"
    assert result.last_move.player == "X"
    assert result.last_move.position == 8

    with pytest.raises(GameFinishedError) as exc_info:
        game_service.make_move(created.game_id, 1)
    assert exc_info.value.status_code == 422
    assert exc_info.value.message == "Game already finished."


def test_draw_game(game_service):
    created = game_service.create_game()
    # (0,0)(0,1)(0,2)(1,0)(1,1)(2,0)(1,2)(2,2)(2,1)
    positions = [0, 1, 2, 3, 4, 6, 5, 8, 7]

    for position in positions:
        result = game_service.make_move(created.game_id, position)

    assert result.status == "Draw"
    assert result.board == ["X", "O", "X", "O", "X", "X", "O", "X", "O"]


def test_concurrent_moves_on_one_game_place_each_mark_once(game_service):
    created = game_service.create_game()
    outcomes = []

    def attempt():
        try:
            game_service.make_move(created.game_id, 4)
            outcomes.append("ok")
        except InvalidMoveError:
            outcomes.append("rejected")

    threads = [threading.Thread(target=attempt) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("rejected") == 7
    assert game_service.get_game(created.game_id).current_player == "O"


def test_get_game_waits_for_a_move_in_progress(game_service, repository):
    created = game_service.create_game()
    game = repository.get_game(created.game_id)
    results = []

    lock = repository.game_lock(created.game_id)
    with lock:
        reader = threading.Thread(target=lambda: results.append(game_service.get_game(created.game_id)))
        reader.start()
        reader.join(timeout=0.2)
        assert reader.is_alive()

        # Change the game the way make_move does while it holds the lock
        game.make_move(1, 1)

    reader.join(timeout=5)
    assert not reader.is_alive()
    result = results[0]
    assert result.board[4] == "X"
    assert result.current_player == "O"
