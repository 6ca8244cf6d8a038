from __future__ import annotations
from typing import Literal, Mapping, NamedTuple, Tuple, Union

Scalar = Union[int, float]
Triple = Tuple[float, float, float]
ColorSpace = Literal["rgb", "hsl"]
COLOR_SPACES = ("rgb", "hsl")
HUE_SPACES = {"hsl"}


class RgbaRecord(NamedTuple):
    """RGB channels normalized to [0, 1] plus alpha."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0


class HslaRecord(NamedTuple):
    """Hue in degrees, saturation and lightness in [0, 1], plus alpha."""
    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0


RgbaInput = Union[RgbaRecord, Mapping[str, Scalar]]
HslaInput = Union[HslaRecord, Mapping[str, Scalar]]


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space is hue-based.

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
