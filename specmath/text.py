"""Parsing scalar values from text and printf-style formatting."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

_BOOL_WORDS = {"1": True, "0": False}


def parse(kind: Callable[[str], T], text: str) -> T:
    """Convert ``text`` to a value of ``kind``.

    Strings are returned untouched. Numbers tolerate surrounding whitespace.
    Booleans accept ``0`` and ``1``. Raises ``ValueError`` when the text does
    not hold a value of the requested kind.
    """
    if kind is str:
        return text  # type: ignore[return-value]
    stripped = text.strip()
    name = getattr(kind, "__name__", repr(kind))
    if kind is bool:
        try:
            return _BOOL_WORDS[stripped]  # type: ignore[return-value]
        except KeyError:
            raise ValueError(f"cannot parse {text!r} as {name}") from None
    try:
        return kind(stripped)
    except (TypeError, ValueError, ArithmeticError) as exc:
        raise ValueError(f"cannot parse {text!r} as {name}") from exc


def c_format(fmt: str, *args: Any) -> str:
    """Format ``args`` with a printf-style format string.

    Raises ``TypeError`` when the arguments do not match the conversions.
    """
    return fmt % args