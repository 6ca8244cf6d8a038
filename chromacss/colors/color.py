from __future__ import annotations
from .color_base import ColorBase
from .rgb import RgbSpace
from .hsl import HslSpace
from ..conversions import rgb_to_hsl, hsl_to_rgb
from ..types.color_types import ColorSpace, COLOR_SPACES, RgbaRecord, HslaRecord

space_to_class: dict[str, type[ColorBase]] = {
    "rgb": RgbSpace,
    "hsl": HslSpace,
}


def to_rgba(color: ColorBase) -> RgbaRecord:
    """
    Return the color as normalized RGB plus alpha.

    RGB colors give back their stored fields untouched. HSL colors are
    converted on every call; nothing is cached.
    """
    c0, c1, c2, alpha = color.value
    if isinstance(color, RgbSpace):
        return RgbaRecord(c0, c1, c2, alpha)
    if isinstance(color, HslSpace):
        return RgbaRecord(*hsl_to_rgb(c0, c1, c2), alpha)
    raise TypeError(f"Unsupported color type: {type(color).__name__}")

def to_hsla(color: ColorBase) -> HslaRecord:
    """Return the color as hue (degrees), saturation, lightness plus alpha."""
    c0, c1, c2, alpha = color.value
    if isinstance(color, HslSpace):
        return HslaRecord(c0, c1, c2, alpha)
    if isinstance(color, RgbSpace):
        return HslaRecord(*rgb_to_hsl(c0, c1, c2), alpha)
    raise TypeError(f"Unsupported color type: {type(color).__name__}")

def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    """
    Convert this color to a different color space.

    Alpha and whether it was given explicitly carry over unchanged.

    Args:
        to_space: Target color space ("rgb" or "hsl")

    Returns:
        New ColorBase instance in the target space
    """
    if not isinstance(to_space, str) or to_space.lower() not in COLOR_SPACES:
        raise ValueError(f"Unsupported color space: {to_space!r}, expected one of {COLOR_SPACES}")
    to_space = to_space.lower()  # type: ignore

    record = to_rgba(self) if to_space == "rgb" else to_hsla(self)
    cls = space_to_class[to_space]
    return cls(*record, explicit_alpha=self.has_alpha)

ColorBase.convert = color_convert
ColorBase.to_rgba = to_rgba
ColorBase.to_hsla = to_hsla
