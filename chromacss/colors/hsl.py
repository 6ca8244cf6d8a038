from __future__ import annotations
from collections.abc import Mapping
from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, HslaInput, Scalar
from ..utils.default import alpha_from_mapping
from .color_base import ColorBase


class HslSpace(ColorBase):
    """Color stored as hue (degrees), saturation and lightness.

    Hue is not wrapped on construction; 400 stays 400 until it goes
    through the RGB conversion.
    """
    __slots__ = ()

    mode: ClassVar[ColorSpace] = "hsl"
    channels: ClassVar[Tuple[str, str, str]] = ("hue", "saturation", "lightness")

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def lightness(self) -> float:
        return self._value[2]


def hsl(h: Scalar, s: Scalar, l: Scalar) -> HslSpace:
    return HslSpace(h, s, l, 1.0, explicit_alpha=False)

def hsla(h: Scalar, s: Scalar, l: Scalar, a: Scalar) -> HslSpace:
    return HslSpace(h, s, l, a)

def from_hsla(record: HslaInput) -> HslSpace:
    if isinstance(record, Mapping):
        alpha, explicit = alpha_from_mapping(record)
        return HslSpace(record["hue"], record["saturation"], record["lightness"], alpha, explicit_alpha=explicit)
    return HslSpace(record.hue, record.saturation, record.lightness, record.alpha)
