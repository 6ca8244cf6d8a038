from __future__ import annotations
from collections.abc import Mapping
from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, RgbaInput, Scalar
from ..types.css_syntax import CHANNEL_MAX
from ..utils.default import alpha_from_mapping
from .color_base import ColorBase


class RgbSpace(ColorBase):
    """Color stored as red, green and blue, conventionally in [0, 1]."""
    __slots__ = ()

    mode: ClassVar[ColorSpace] = "rgb"
    channels: ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]


def rgb(r: Scalar, g: Scalar, b: Scalar) -> RgbSpace:
    """Opaque RGB color; alpha defaults to 1 and is left out of CSS output."""
    return RgbSpace(r, g, b, 1.0, explicit_alpha=False)

def rgba(r: Scalar, g: Scalar, b: Scalar, a: Scalar) -> RgbSpace:
    return RgbSpace(r, g, b, a)

def rgb255(r: Scalar, g: Scalar, b: Scalar) -> RgbSpace:
    """Opaque RGB color from channels on the 0-255 scale."""
    return rgb(r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)

def from_rgba(record: RgbaInput) -> RgbSpace:
    """
    Build an RGB color from an ``RgbaRecord`` or a mapping.

    A mapping needs ``red``, ``green`` and ``blue`` keys; a missing or None
    ``alpha`` defaults to 1 and counts as not given.
    """
    if isinstance(record, Mapping):
        alpha, explicit = alpha_from_mapping(record)
        return RgbSpace(record["red"], record["green"], record["blue"], alpha, explicit_alpha=explicit)
    return RgbSpace(record.red, record.green, record.blue, record.alpha)
