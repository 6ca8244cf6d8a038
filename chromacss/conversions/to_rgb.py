import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Triple
from ..types.css_syntax import CHANNEL_MAX


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360

## HSL to RGB conversions

def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    """
    Convert HSL to normalized RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB

    The hue circle is cut into six 60 degree sectors. In each one a channel
    sits at full chroma, one is zero and the third ramps linearly between
    the two. Saturation 0 gives a gray of the given lightness whatever the hue.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    chroma = (1 - abs(2 * l - 1)) * s

    if h < 60:
        r, g, b = chroma, chroma * h / 60, 0.0
    elif h < 120:
        r, g, b = chroma * (120 - h) / 60, chroma, 0.0
    elif h < 180:
        r, g, b = 0.0, chroma, chroma * (h - 120) / 60
    elif h < 240:
        r, g, b = 0.0, chroma * (240 - h) / 60, chroma
    elif h < 300:
        r, g, b = chroma * (h - 240) / 60, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, chroma * (360 - h) / 60

    m = l - chroma / 2
    return r + m, g + m, b + m

def hsl_to_rgb255(h: float, s: float, l: float) -> Triple:
    """Convert HSL to RGB channels on the 0-255 scale (unrounded)."""
    r, g, b = hsl_to_rgb(h, s, l)
    return r * CHANNEL_MAX, g * CHANNEL_MAX, b * CHANNEL_MAX

def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to normalized RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    # NaN and inf propagate as with scalar floats, silently
    with np.errstate(invalid="ignore", over="ignore"):
        h = h % 360
        chroma = (1 - np.abs(2 * l - 1)) * s
        zero = np.zeros(out_shape)

        # NaN hues fail every comparison and land in the last sector, as in the scalar code
        sectors = [h < 60, h < 120, h < 180, h < 240, h < 300]

        r = np.select(sectors, [chroma, chroma * (120 - h) / 60, zero, zero, chroma * (h - 240) / 60], default=chroma)
        g = np.select(sectors, [chroma * h / 60, chroma, chroma, chroma * (240 - h) / 60, zero], default=zero)
        b = np.select(sectors, [zero, zero, chroma * (h - 120) / 60, chroma, chroma], default=chroma * (360 - h) / 60)

        m = l - chroma / 2
        return np.stack([r + m, g + m, b + m], axis=-1)
