"""Color handling shared by pens and canvases.

Colors are stored as plain ``(r, g, b)`` tuples so they can be handed to Pillow
unchanged.  User facing APIs accept CSS names and hex strings as well; those
are resolved with :func:`PIL.ImageColor.getrgb`.
"""
from __future__ import annotations

from typing import Sequence, Tuple, Union

from PIL import ImageColor

from .errors import InvalidArgument

RGB = Tuple[int, int, int]
ColorLike = Union[str, Sequence[int]]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)


def to_rgb(color: ColorLike) -> RGB:
    """Normalise ``color`` to an ``(r, g, b)`` tuple of ints in ``0..255``."""

    if isinstance(color, str):
        try:
            rgb = ImageColor.getrgb(color)
        except ValueError as exc:
            raise InvalidArgument(f"Unknown color: {color!r}") from exc
        return rgb[0], rgb[1], rgb[2]

    try:
        channels = tuple(color)
    except TypeError as exc:
        raise InvalidArgument(f"Unsupported color: {color!r}") from exc
    if len(channels) != 3:
        raise InvalidArgument(f"Expected 3 color channels, got {len(channels)}")
    for value in channels:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            raise InvalidArgument(f"Color channels must be ints in 0..255: {color!r}")
    return channels[0], channels[1], channels[2]


def to_hex(color: ColorLike) -> str:
    r, g, b = to_rgb(color)
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = ["RGB", "ColorLike", "BLACK", "WHITE", "to_rgb", "to_hex"]
