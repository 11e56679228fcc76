import pytest

from services import mapping_service
from services.tic_tac_toe_service import GameState, GameStatus, Player


def test_position_and_coordinates_agree_on_every_cell():
    for position in range(9):
        row, col = mapping_service.position_to_coordinates(position)
        assert (row, col) == (position // 3, position % 3)
        assert mapping_service.coordinates_to_position(row, col) == position


def test_board_is_flattened_row_major():
    state = GameState()
    state.try_make_move(0, 0)  # X -> 0
    state.try_make_move(1, 2)  # O -> 5
    state.try_make_move(2, 1)  # X -> 7

    assert mapping_service.board_to_string_list(state.get_board()) == ["X", "", "", "", "", "O", "", "X", ""]


def test_player_to_string():
    assert mapping_service.player_to_string(Player.X) == "X"
    assert mapping_service.player_to_string(Player.O) == "O"


@pytest.mark.parametrize("status, name", [
    (GameStatus.IN_PROGRESS, "InProgress"),
    (GameStatus.X_WON, "XWins"),
    (GameStatus.O_WON, "OWins"),
    (GameStatus.DRAW, "Draw"),
])
def test_status_names(status, name):
    assert mapping_service.status_to_string(status) == name
    assert mapping_service.string_to_status(name) is status


def test_every_status_has_a_name():
    assert set(mapping_service.STATUS_NAMES) == set(GameStatus)


@pytest.mark.parametrize("name", ["XWon", "inprogress", "", "Finished"])
def test_unknown_status_name_is_rejected(name):
    with pytest.raises(ValueError):
        mapping_service.string_to_status(name)


def test_unknown_status_value_is_rejected():
    with pytest.raises(ValueError):
        mapping_service.status_to_string("XWins")
