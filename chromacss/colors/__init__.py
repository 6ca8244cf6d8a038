"""
chromacss Color Values
======================

An immutable color is either an ``RgbSpace`` or an ``HslSpace`` value. It
stays in the space it was built in; the other representation is computed
on demand.

Usage
-----
>>> from chromacss.colors import rgb, hsla, to_hsla
>>> red = rgb(1.0, 0.0, 0.0)
>>> to_hsla(red)
HslaRecord(hue=0.0, saturation=1.0, lightness=0.5, alpha=1.0)
>>> lime = hsla(120, 1.0, 0.5, 0.25)
>>> lime.convert("rgb").value
(0.0, 1.0, 0.0, 0.25)

Constructors
------------
RGB space:
    - rgb(r, g, b): opaque, alpha left out of CSS output
    - rgba(r, g, b, a)
    - rgb255(r, g, b): channels on the 0-255 scale
    - from_rgba(record): RgbaRecord or mapping

HSL space:
    - hsl(h, s, l)
    - hsla(h, s, l, a)
    - from_hsla(record): HslaRecord or mapping

Notes
-----
- No component is clamped or validated at construction.
- Equality is structural; ``rgb(1, 0, 0) != hsl(0, 1, 0.5)``.
"""

from .color_base import ColorBase
from .rgb import RgbSpace, rgb, rgba, rgb255, from_rgba
from .hsl import HslSpace, hsl, hsla, from_hsla
from .color import to_rgba, to_hsla, color_convert, space_to_class


__all__ = [
    'ColorBase',
    'RgbSpace',
    'HslSpace',
    'rgb',
    'rgba',
    'rgb255',
    'from_rgba',
    'hsl',
    'hsla',
    'from_hsla',
    'to_rgba',
    'to_hsla',
    'color_convert',
    'space_to_class',
]
