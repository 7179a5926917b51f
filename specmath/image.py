"""A plain two-dimensional grid of pixels."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

P = TypeVar("P")


class BaseImage(Generic[P]):
    """A ``width`` x ``height`` image stored row by row."""

    __slots__ = ("_width", "_height", "_pixels")

    def __init__(self, width: int = 0, height: int = 0, fill: Optional[P] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image size must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels: List[Optional[P]] = [fill] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> List[Optional[P]]:
        """The row-major pixel storage."""
        return self._pixels

    def _position(self, i: int, j: int) -> int:
        pos = i + j * self._width
        if pos < 0 or pos >= self._width * self._height:
            raise IndexError("Requested pixel is out of range")
        return pos

    def at(self, i: int, j: int) -> Optional[P]:
        """Pixel in column ``i`` of row ``j``."""
        return self._pixels[self._position(i, j)]

    def put(self, i: int, j: int, value: P) -> None:
        """Set the pixel in column ``i`` of row ``j``."""
        self._pixels[self._position(i, j)] = value

    def copy(self) -> "BaseImage[P]":
        """An independent image with the same size and pixels."""
        other: BaseImage[P] = BaseImage(self._width, self._height)
        other._pixels = list(self._pixels)
        return other