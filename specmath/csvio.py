"""Reading typed rows from delimiter-separated text.

A column kind is a callable accepted by :func:`specmath.text.parse`; the kind
``None`` skips a column and yields ``None`` in its place.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Sequence, TextIO

from specmath.text import parse

COMMENT_SYM = "#"

Kind = Optional[Callable[[str], Any]]


class CsvError(ValueError):
    """Raised when a line does not hold the columns it should."""


def _parse_field(kind: Kind, word: str) -> Any:
    if kind is None:
        return None
    return parse(kind, word)


def _next_field(text: str, delim: str, pos: int) -> tuple[str, Optional[int]]:
    end = text.find(delim, pos)
    if end == -1:
        return text[pos:], None
    return text[pos:end], end + len(delim)


def _at_stop(text: str, pos: Optional[int], ignore_comments: bool) -> bool:
    return pos is None or (ignore_comments and text[pos:pos + 1] == COMMENT_SYM)


def _parse_fields(
    text: str,
    columns: Sequence[Kind],
    delim: str,
    pos: Optional[int],
    ignore_comments: bool,
) -> tuple[Optional[tuple], Optional[int]]:
    values = []
    for kind in columns:
        if _at_stop(text, pos, ignore_comments):
            if values:
                raise CsvError("Unfinished csv line")
            return None, pos
        word, pos = _next_field(text, delim, pos)
        values.append(_parse_field(kind, word))
    return tuple(values), pos


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def parse_line(
    text: str,
    columns: Sequence[Kind],
    delim: str = ",",
    pos: int = 0,
    ignore_comments: bool = True,
) -> Optional[tuple]:
    """Parse one value per column from ``text`` starting at ``pos``.

    Returns ``None`` for an empty line or a comment. Raises :class:`CsvError`
    when the line ends before every column has a value.
    """
    columns = tuple(columns)
    if not columns:
        raise ValueError("at least one column is required")
    if not text:
        return None
    values, _ = _parse_fields(text, columns, delim, pos, ignore_comments)
    return values


def read_line(
    stream: TextIO,
    columns: Sequence[Kind],
    delim: str = ",",
    ignore_comments: bool = True,
) -> Optional[tuple]:
    """Read the next line of ``stream`` and parse it with :func:`parse_line`."""
    return parse_line(_strip_newline(stream.readline()), columns, delim, 0, ignore_comments)


def _skip_lines(stream: TextIO, skip: int) -> None:
    for _ in range(skip):
        stream.readline()


def load_as_vector(
    stream: TextIO,
    columns: Sequence[Kind],
    delim: str = ",",
    skip: int = 0,
    ignore_comments: bool = True,
) -> list[tuple]:
    """Parse every remaining line of ``stream`` after skipping ``skip`` lines."""
    _skip_lines(stream, skip)
    rows = []
    for line in stream:
        row = parse_line(_strip_newline(line), columns, delim, 0, ignore_comments)
        if row is not None:
            rows.append(row)
    return rows


def parse_line_m(
    text: str,
    kind: Callable[[str], Any],
    columns: Iterable[Kind] = (),
    delim: str = ",",
    pos: int = 0,
    ignore_comments: bool = True,
) -> Optional[tuple]:
    """Parse leading ``columns``, then every remaining field as ``kind``.

    Returns ``(values, *leading)`` where ``values`` is a list, or ``None`` for
    an empty line. Raises :class:`CsvError` when the leading columns are missing.
    """
    if not text:
        return None
    columns = tuple(columns)
    leading: tuple = ()
    current: Optional[int] = pos
    if columns:
        found, current = _parse_fields(text, columns, delim, current, ignore_comments)
        if found is None:
            raise CsvError("No data found")
        leading = found
    values = []
    while not _at_stop(text, current, ignore_comments):
        word, current = _next_field(text, delim, current)
        values.append(parse(kind, word))
    return (values, *leading)


def read_line_m(
    stream: TextIO,
    kind: Callable[[str], Any],
    columns: Iterable[Kind] = (),
    delim: str = ",",
    ignore_comments: bool = True,
) -> Optional[tuple]:
    """Read the next line of ``stream`` and parse it with :func:`parse_line_m`."""
    return parse_line_m(
        _strip_newline(stream.readline()), kind, columns, delim, 0, ignore_comments
    )


def load_as_vector_m(
    stream: TextIO,
    kind: Callable[[str], Any],
    columns: Iterable[Kind] = (),
    delim: str = ",",
    skip: int = 0,
    ignore_comments: bool = True,
) -> list[tuple]:
    """Parse every remaining line of ``stream`` with :func:`parse_line_m`."""
    columns = tuple(columns)
    _skip_lines(stream, skip)
    rows = []
    for line in stream:
        row = parse_line_m(_strip_newline(line), kind, columns, delim, 0, ignore_comments)
        if row is not None:
            rows.append(row)
    return rows