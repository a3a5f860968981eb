import io

import pytest

from solong.maploader import (
    MapError,
    MapNameError,
    check_map_name,
    iter_lines,
    load_map,
    measure_map,
)

SAMPLE = "1111\n1PCE\n1111"


@pytest.mark.parametrize("name", ["maps/level.ber", "a.ber", "x.ber.txt"])
def test_check_map_name_accepts(name):
    assert check_map_name(name) is None


@pytest.mark.parametrize("name", ["map.txt", "map.be", "", "ber"])
def test_check_map_name_rejects(name):
    with pytest.raises(MapNameError):
        check_map_name(name)


def test_map_name_error_is_map_error_with_message():
    with pytest.raises(MapError, match="Name map invalid !!!"):
        check_map_name("level.txt")


@pytest.mark.parametrize("size", [1, 2, 3, 10, 100])
def test_iter_lines_round_trip(size):
    lines = list(iter_lines(io.StringIO(SAMPLE), size))
    assert "".join(lines) == SAMPLE
    assert lines == ["1111\n", "1PCE\n", "1111"]


def test_iter_lines_trailing_newline():
    lines = list(iter_lines(io.StringIO("ab\ncd\n"), 4))
    assert lines == ["ab\n", "cd\n"]


def test_iter_lines_empty_stream():
    assert list(iter_lines(io.StringIO(""), 10)) == []


def test_iter_lines_blank_lines_kept():
    lines = list(iter_lines(io.StringIO("\n\nx"), 1))
    assert lines == ["\n", "\n", "x"]


def test_iter_lines_rejects_bad_buffer():
    with pytest.raises(ValueError):
        list(iter_lines(io.StringIO(SAMPLE), 0))


def test_measure_map_basic():
    assert measure_map(SAMPLE) == (4, 3)


def test_measure_map_trailing_newline_adds_row():
    assert measure_map(SAMPLE + "\n") == (4, 4)


def test_measure_map_empty():
    assert measure_map("") == (0, 0)


def test_measure_map_single_line():
    assert measure_map("11111") == (5, 1)


def test_load_map_reads_lines(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(SAMPLE, encoding="utf-8")
    lines, width, height = load_map(path)
    assert lines == ["1111\n", "1PCE\n", "1111"]
    assert (width, height) == (4, 3)


def test_load_map_trailing_newline_has_fewer_lines(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(SAMPLE + "\n", encoding="utf-8")
    lines, width, height = load_map(path)
    assert height == len(lines) + 1
    assert lines[-1].endswith("\n")


def test_load_map_bad_name(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    with pytest.raises(MapNameError):
        load_map(path)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="Check your .ber file"):
        load_map(tmp_path / "missing.ber")