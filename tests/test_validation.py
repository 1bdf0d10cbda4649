import pytest

from solong.mapfile import MapError, Position
from solong.validation import (
    COIN_PASSABLE,
    EXIT_PASSABLE,
    check_all_lines,
    check_paths,
    check_player_and_exit,
    check_valid_chars,
    check_walls,
    count_collectibles,
    flood_fill,
    has_collectible,
    validate_map,
)

VALID = ["111111", "1PC0E1", "111111"]


def write_map(tmp_path, rows, trailing=True):
    path = tmp_path / "level.ber"
    text = "\n".join(rows) + ("\n" if trailing else "")
    path.write_text(text)
    return path


def test_all_lines_equal_width():
    assert check_all_lines(VALID, len(VALID[0]))


def test_ragged_lines_rejected():
    assert not check_all_lines(["1111", "111", "1111"], 4)


def test_walls_closed():
    assert check_walls(VALID, len(VALID[0]), len(VALID))


@pytest.mark.parametrize(
    "grid",
    [
        ["111011", "1PC0E1", "111111"],
        ["111111", "0PC0E1", "111111"],
        ["111111", "1PC0E0", "111111"],
        ["111111", "1PC0E1", "110111"],
    ],
)
def test_walls_with_hole_rejected(grid):
    assert not check_walls(grid, len(grid[0]), len(grid))


def test_walls_trivial_area_passes():
    assert check_walls(["P0C"], 3, 1)


@pytest.mark.parametrize("k", [1, 2, 5])
def test_count_collectibles(k):
    grid = ["1" * (k + 4), "1P" + "C" * k + "E1", "1" * (k + 4)]
    assert count_collectibles(grid) == k


def test_valid_chars():
    assert check_valid_chars(VALID, len(VALID[0]))


def test_invalid_char_rejected():
    assert not check_valid_chars(["11111", "1PXE1", "11111"], 5)


def test_short_row_fails_char_check():
    assert not check_valid_chars(["11111", "1PC"], 5)


def test_has_collectible():
    assert has_collectible(VALID)
    assert not has_collectible(["1111", "1PE1", "1111"])


@pytest.mark.parametrize(
    "grid, expected",
    [
        (VALID, True),
        (["11111", "1PPE1", "11111"], False),
        (["11111", "1PEE1", "11111"], False),
        (["11111", "1P0C1", "11111"], False),
        (["11111", "10CE1", "11111"], False),
    ],
)
def test_player_and_exit(grid, expected):
    assert check_player_and_exit(grid) is expected


def test_flood_fill_stops_at_walls():
    grid = ["11111", "1P101", "11111"]
    reached = flood_fill(grid, Position(1, 1), COIN_PASSABLE)
    assert reached == {Position(1, 1)}


def test_flood_fill_coin_pass_does_not_cross_exit():
    grid = ["111111", "1PEC01", "111111"]
    coins = flood_fill(grid, Position(1, 1), COIN_PASSABLE)
    exits = flood_fill(grid, Position(1, 1), EXIT_PASSABLE)
    assert Position(3, 1) not in coins
    assert Position(3, 1) in exits
    assert coins < exits


def test_check_paths_ok():
    assert check_paths(VALID)


def test_check_paths_blocked_coin():
    grid = ["1111111", "1P0E1C1", "1111111"]
    assert not check_paths(grid)


def test_check_paths_coin_behind_exit():
    grid = ["111111", "1PEC01", "111111"]
    assert not check_paths(grid)


def test_check_paths_unreachable_exit():
    grid = ["1111111", "1PC01E1", "1111111"]
    assert not check_paths(grid)


def test_validate_map_returns_rows(tmp_path):
    assert validate_map(write_map(tmp_path, VALID)) == VALID


@pytest.mark.parametrize(
    "rows",
    [
        ["111111", "1PCXE1", "111111"],
        ["111111", "1PC0E1", "11111"],
        ["111111", "1PC0E0", "111111"],
        ["111111", "1PP0E1", "111111"],
        ["111111", "1P00E1", "111111"],
    ],
)
def test_validate_map_rejects(tmp_path, rows):
    with pytest.raises(MapError):
        validate_map(write_map(tmp_path, rows))


def test_validate_map_needs_trailing_newline(tmp_path):
    with pytest.raises(MapError):
        validate_map(write_map(tmp_path, VALID, trailing=False))


def test_validate_map_empty_line(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("111111\n\n1PC0E1\n111111\n")
    with pytest.raises(MapError):
        validate_map(path)


def test_validate_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        validate_map(tmp_path / "absent.ber")