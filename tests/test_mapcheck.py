import pytest

from sollong.mapcheck import (
    BONUS,
    STANDARD,
    GameMap,
    MapError,
    Rules,
    all_reachable,
    check_filename,
    flood_fill,
    is_closed,
    load_map,
    measure,
    parse_map,
    scan_tiles,
    to_grid,
)

VALID = "1111111\n1P0C0E1\n1111111\n"
VALID_ROWS = ("1111111", "1P0C0E1", "1111111")


def _lines(text):
    return text.splitlines(keepends=True)


def test_check_filename_accepts_ber():
    assert check_filename("maps/level.ber") == "maps/level.ber"


@pytest.mark.parametrize("name", [".ber", "map.txt", "map.ber.txt", "ber"])
def test_check_filename_rejects(name):
    with pytest.raises(MapError):
        check_filename(name)


def test_measure_valid_map():
    assert measure(_lines(VALID)) == (len(VALID_ROWS[0]), len(VALID_ROWS))


def test_measure_last_line_without_newline():
    text = VALID.rstrip("\n")
    assert measure(_lines(text)) == (len(VALID_ROWS[0]), len(VALID_ROWS))


def test_measure_too_few_rows():
    with pytest.raises(MapError):
        measure(_lines("1111111\n1111111\n"))


def test_measure_small_square_rejected():
    with pytest.raises(MapError):
        measure(_lines("111\n1P1\n111\n"))


def test_measure_narrow_rejected():
    with pytest.raises(MapError):
        measure(_lines("11\n11\n11\n11\n"))


def test_measure_width_limits_depend_on_rules():
    row = "1" * (STANDARD.max_width + 1) + "\n"
    text = row * 3
    with pytest.raises(MapError):
        measure(_lines(text), STANDARD)
    assert measure(_lines(text), BONUS) == (STANDARD.max_width + 1, 3)


def test_measure_height_limits_depend_on_rules():
    text = "11111\n" * (STANDARD.max_height + 1)
    with pytest.raises(MapError):
        measure(_lines(text), STANDARD)
    assert measure(_lines(text), BONUS)[1] == STANDARD.max_height + 1


def test_measure_empty():
    with pytest.raises(MapError):
        measure([])


def test_to_grid_round_trip():
    grid = to_grid(VALID, 7, 3)
    assert grid == VALID_ROWS
    assert "\n".join(grid) + "\n" == VALID


def test_to_grid_empty_data():
    with pytest.raises(MapError):
        to_grid("", 5, 3)


def test_is_closed():
    assert is_closed(VALID_ROWS)
    assert not is_closed(("1111111", "0P0C0E1", "1111111"))
    assert not is_closed(("1111111", "1P0C0E1", "1110111"))


def test_scan_tiles_counts_coins_and_finds_player():
    coins, player = scan_tiles(("1111111", "1PC0CE1", "1111111"))
    assert coins == 2
    assert player == (1, 1)


def test_scan_tiles_rejects_unknown_tile():
    with pytest.raises(MapError):
        scan_tiles(("1111111", "1P0Z0E1", "1111111"))


def test_scan_tiles_enemy_allowed_only_in_bonus():
    grid = ("1111111", "1PXC0E1", "1111111")
    with pytest.raises(MapError):
        scan_tiles(grid, STANDARD)
    assert scan_tiles(grid, BONUS) == (1, (1, 1))


@pytest.mark.parametrize(
    "middle",
    ["1P000E1", "1PPC0E1", "1P0C001", "1P0CEE1"],
)
def test_scan_tiles_rejects_bad_counts(middle):
    with pytest.raises(MapError):
        scan_tiles(("1111111", middle, "1111111"))


def test_custom_rules():
    rules = Rules(max_width=10, max_height=10, tiles="01CEP")
    assert measure(_lines(VALID), rules) == (7, 3)


def test_flood_fill_marks_reachable_tiles():
    grid = ("1111111", "1P01CE1", "1111111")
    filled = flood_fill(grid, (1, 1))
    assert filled[1][:3] == "1XX"
    assert filled[1][4:6] == "CE"
    assert filled[0] == grid[0]
    assert grid[1] == "1P01CE1"


def test_flood_fill_enemy_blocks():
    filled = flood_fill(("1111111", "1PXC0E1", "1111111"), (1, 1))
    assert "C" in filled[1]


def test_all_reachable():
    assert all_reachable(VALID_ROWS, (1, 1))
    assert not all_reachable(("1111111", "1P01CE1", "1111111"), (1, 1))


def test_parse_map():
    game_map = parse_map(VALID)
    assert isinstance(game_map, GameMap)
    assert game_map.grid == VALID_ROWS
    assert game_map.coins == 1
    assert game_map.player == (1, 1)
    assert (game_map.width, game_map.height) == (7, 3)


def test_parse_map_not_closed():
    with pytest.raises(MapError):
        parse_map("1111111\n1P0C0E0\n1111111\n")


def test_parse_map_unreachable_exit():
    with pytest.raises(MapError):
        parse_map("1111111\n1PC01E1\n1111111\n")


def test_load_map(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    assert load_map(path).grid == VALID_ROWS


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "absent.ber")


def test_load_map_bad_name(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text(VALID)
    with pytest.raises(MapError):
        load_map(path)