import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Triple
from ..types.css_syntax import CHANNEL_MAX
from ..utils.num_utils import all_finite

## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """
    Convert normalized RGB to HSL.

    Achromatic input (chroma 0) has no defined hue; it is reported as 0.
    Any non-finite channel yields ``(nan, nan, nan)``.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    if not all_finite(r, g, b):
        return math.nan, math.nan, math.nan

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    chroma = max_c - min_c

    # Hue, as a fraction of a full turn
    if chroma == 0:
        h = 0.0
    elif max_c == r:
        h = (g - b) / chroma
    elif max_c == g:
        h = (b - r) / chroma + 2
    else:
        h = (r - g) / chroma + 4
    hue_fraction = h / 6
    if hue_fraction < 0:
        hue_fraction += 1
    hue = hue_fraction * 360
    if hue >= 360:
        hue -= 360

    lightness = (max_c + min_c) / 2

    denominator = 1 - abs(2 * lightness - 1)
    if lightness == 0 or chroma == 0 or denominator == 0:
        saturation = 0.0
    else:
        saturation = chroma / denominator

    return hue, saturation, lightness

def rgb255_to_hsl(r: float, g: float, b: float) -> Triple:
    """Convert RGB channels on the 0-255 scale to HSL."""
    return rgb_to_hsl(r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX)

def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert normalized RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    # Non-finite rows are zeroed for the arithmetic and set to NaN at the end
    finite = np.isfinite(r) & np.isfinite(g) & np.isfinite(b)
    r = np.where(finite, r, 0.0)
    g = np.where(finite, g, 0.0)
    b = np.where(finite, b, 0.0)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    chroma = max_c - min_c

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation
    denominator = 1 - np.abs(2 * lightness - 1)
    saturation = np.zeros(out_shape)
    mask_s = (chroma != 0) & (lightness != 0) & (denominator != 0)
    saturation[mask_s] = chroma[mask_s] / denominator[mask_s]

    # Hue; the masks are exclusive and follow the scalar tie-breaking order
    h = np.zeros(out_shape)
    mask = chroma != 0
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    h[mask_r] = (g[mask_r] - b[mask_r]) / chroma[mask_r]
    h[mask_g] = (b[mask_g] - r[mask_g]) / chroma[mask_g] + 2
    h[mask_b] = (r[mask_b] - g[mask_b]) / chroma[mask_b] + 4

    hue_fraction = h / 6
    hue_fraction = np.where(hue_fraction < 0, hue_fraction + 1, hue_fraction)
    hue = hue_fraction * 360
    hue = np.where(hue >= 360, hue - 360, hue)

    hsl = np.stack([hue, saturation, lightness], axis=-1)

    # Same non-finite policy as the scalar version
    hsl[~finite] = np.nan
    return hsl
