import pytest

from solong.mapfile import (
    GameMap,
    MapError,
    check_dimensions,
    check_reachable,
    check_walls,
    count_items,
    load_map,
    parse_map,
)

VALID = "1111111\n1P0C0E1\n1111111"


def _message(text):
    with pytest.raises(MapError) as info:
        parse_map(text)
    return info.value.message


def test_parse_valid_map():
    game_map = parse_map(VALID)
    assert game_map.rows == ("1111111", "1P0C0E1", "1111111")
    assert game_map.player == (1, 1)
    assert game_map.collectables == 1
    assert (game_map.width, game_map.height) == (len("1111111"), 3)


def test_empty_text():
    with pytest.raises(MapError) as info:
        parse_map("")
    assert info.value.message == "Empty map file!!!"
    assert info.value.report() == "Empty map file!!!\n"


def test_trailing_newline_breaks_dimensions():
    assert _message(VALID + "\n") == "Invalid map dimensions!!!"


def test_ragged_rows():
    assert _message("1111111\n1P0C0E11\n1111111") == "Invalid map dimensions!!!"


def test_too_small():
    assert _message("11\n11\n11") == "Invalid map size!!!"
    assert _message("1111111\n1111111") == "Invalid map size!!!"


def test_walls():
    assert _message("1101111\n1P0C0E1\n1111111") == "Invalid map walls!!!"
    assert _message("1111111\n1P0C0E1\n1111101") == "Invalid map walls!!"
    assert _message("1111111\n0P0C0E1\n1111111") == "Invalid map walls!!!"
    assert _message("1111111\n1P0C0E0\n1111111") == "Invalid map walls!!!"


def test_invalid_character():
    assert _message("1111111\n1PXC0E1\n1111111") == "Invalid character in map!!!"


def test_item_counts():
    assert _message("1111111\n1PPC0E1\n1111111") == "Invalid map,check player count!!!"
    assert _message("1111111\n10EC0E1\n1111111") == "Invalid map,check player count!!!"
    assert _message("1111111\n1PEC0E1\n1111111") == "Invalid map, check exit count!!!"
    assert _message("1111111\n1P000E1\n1111111") == "Invalid map,check collectable count!!!"


def test_collectable_behind_exit_is_unreachable():
    assert _message("1111111\n1PEC001\n1111111") == "Exit or Collectables arent reachable!!!"


def test_walled_off_collectable():
    assert _message("1111111\n1P0E1C1\n1111111") == "Exit or Collectables arent reachable!!!"


def test_error_report_has_header():
    with pytest.raises(MapError) as info:
        parse_map("1111111\n1PXC0E1\n1111111")
    assert info.value.report() == "Error\nInvalid character in map!!!\n"


def test_check_dimensions_strips_newlines():
    assert check_dimensions(["1111\n", "1P1\n", "111"]) == ["111", "1P1", "111"]


def test_check_walls_direct():
    with pytest.raises(MapError, match="walls"):
        check_walls(["111", "1P0", "111"])


def test_count_items_direct():
    rows = ["11111", "1PCE1", "11111"]
    assert count_items(rows) == ((1, 1), 1)


def test_check_reachable_direct():
    with pytest.raises(MapError, match="reachable"):
        check_reachable(["111111", "1P1CE1", "111111"], (1, 1))


def test_load_map_matches_parse(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    assert load_map(path) == parse_map(VALID)
    assert isinstance(load_map(str(path)), GameMap)


def test_load_missing_file(tmp_path):
    with pytest.raises(MapError) as info:
        load_map(tmp_path / "missing.ber")
    assert info.value.message == "No such a file!!!"
    assert info.value.error_header is False


@pytest.mark.parametrize(
    ("name", "message"),
    [
        ("level.txt", "Invalid file extension!!"),
        (".ber", "Invalid file name!!"),
        ("maps/.ber", "Invalid file name!!"),
    ],
)
def test_bad_file_names(name, message):
    with pytest.raises(MapError) as info:
        load_map(name)
    assert info.value.message == message