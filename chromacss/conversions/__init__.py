"""
chromacss Color Space Conversions
=================================

RGB <-> HSL conversion with scalar and vectorized (numpy) implementations.

Conversion Functions
-------------------

RGB → HSL:
    rgb_to_hsl(r, g, b)
        Scalar conversion, channels normalized to [0, 1]
    rgb255_to_hsl(r, g, b)
        Scalar conversion, channels on the 0-255 scale
    np_rgb_to_hsl(r, g, b)
        Vectorized conversion

HSL → RGB:
    hsl_to_rgb(h, s, l)
        Scalar conversion, hue in degrees
    hsl_to_rgb255(h, s, l)
        Scalar conversion scaled to 0-255 (unrounded)
    np_hsl_to_rgb(h, s, l)
        Vectorized conversion

Conventions
-----------
- Hue is in degrees; results of rgb_to_hsl lie in [0, 360).
- Achromatic colors (chroma 0) report hue 0 and saturation 0.
- No division can fail or produce NaN for finite input.

Examples
--------
>>> from chromacss.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> hsl_to_rgb(120.0, 1.0, 0.5)
(0.0, 1.0, 0.0)
"""

# RGB → HSL conversions
from .to_hsl import (
    rgb_to_hsl,
    rgb255_to_hsl,
    np_rgb_to_hsl,
)

# HSL → RGB conversions
from .to_rgb import (
    hsl_to_rgb,
    hsl_to_rgb255,
    np_hsl_to_rgb,
    normalize_hue,
)

__all__ = [
    # RGB → HSL
    'rgb_to_hsl',
    'rgb255_to_hsl',
    'np_rgb_to_hsl',

    # HSL → RGB
    'hsl_to_rgb',
    'hsl_to_rgb255',
    'np_hsl_to_rgb',
    'normalize_hue',
]
