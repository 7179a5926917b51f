import io

import pytest

from specmath.csvio import (
    CsvError,
    load_as_vector,
    load_as_vector_m,
    parse_line,
    parse_line_m,
    read_line,
    read_line_m,
)


def test_parse_line_typed_columns():
    assert parse_line("1,2.5,abc", (int, float, str)) == (1, 2.5, "abc")


def test_parse_line_comment_is_none():
    assert parse_line("# comment", (int,)) is None


def test_parse_line_empty_is_none():
    assert parse_line("", (int,)) is None


def test_parse_line_comment_kept_when_not_ignored():
    assert parse_line("#1", (str,), ignore_comments=False) == ("#1",)


def test_parse_line_unfinished_raises():
    with pytest.raises(CsvError):
        parse_line("1", (int, int))


def test_parse_line_skip_column():
    assert parse_line("x,5", (None, int)) == (None, 5)


def test_parse_line_start_position():
    assert parse_line("9,8,7", (int,), pos=2) == (8,)


def test_parse_line_custom_delimiter():
    assert parse_line("1;2", (int, int), delim=";") == (1, 2)


def test_parse_line_extra_fields_ignored():
    assert parse_line("1,2,3", (int, int)) == (1, 2)


def test_parse_line_bad_value_raises():
    with pytest.raises(ValueError):
        parse_line("a,b", (int, int))


def test_read_line_advances():
    stream = io.StringIO("1,2\n3,4\n")
    assert read_line(stream, (int, int)) == (1, 2)
    assert read_line(stream, (int, int)) == (3, 4)


def test_load_as_vector_skips_header_and_comments():
    stream = io.StringIO("r,g,b\n1,2,3\n#c\n4,5,6\n")
    assert load_as_vector(stream, (int, int, int), skip=1) == [(1, 2, 3), (4, 5, 6)]


def test_parse_line_m_all_fields():
    assert parse_line_m("1,2,3", float) == ([1.0, 2.0, 3.0],)


def test_parse_line_m_leading_column_last_in_result():
    assert parse_line_m("7,1,2", float, (int,)) == ([1.0, 2.0], 7)


def test_parse_line_m_missing_leading_raises():
    with pytest.raises(CsvError):
        parse_line_m("#x", float, (int,))


def test_parse_line_m_empty_is_none():
    assert parse_line_m("", float) is None


def test_read_line_m_first_line():
    stream = io.StringIO("360,361,362\n0.5,0.25,0.125\n")
    assert read_line_m(stream, float) == ([360.0, 361.0, 362.0],)
    assert read_line_m(stream, float) == ([0.5, 0.25, 0.125],)


def test_load_as_vector_m_round_trip():
    rows = [[0.5, 1.25, 3.0], [2.0, 4.5, 8.0]]
    text = "".join(",".join(repr(v) for v in row) + "\n" for row in rows)
    loaded = load_as_vector_m(io.StringIO(text), float)
    assert [row[0] for row in loaded] == rows


def test_load_as_vector_m_with_skip():
    stream = io.StringIO("header\n1,2\n")
    assert load_as_vector_m(stream, int, skip=1) == [([1, 2],)]