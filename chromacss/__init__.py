"""chromacss: immutable RGB/HSL color values and CSS color strings."""

from .colors import (
    ColorBase,
    RgbSpace,
    HslSpace,
    rgb,
    rgba,
    rgb255,
    from_rgba,
    hsl,
    hsla,
    from_hsla,
    to_rgba,
    to_hsla,
    color_convert,
)
from .conversions import (
    rgb_to_hsl,
    rgb255_to_hsl,
    hsl_to_rgb,
    hsl_to_rgb255,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    normalize_hue,
)
from .css_format import (
    to_css_string,
    css_declaration,
    round_percent,
    round_number,
    round_channel,
    format_number,
)
from .types import RgbaRecord, HslaRecord, CssSyntax, ColorSpace

__version__ = "1.0.0"

__all__ = [
    # Color values
    "ColorBase", "RgbSpace", "HslSpace",

    # Constructors
    "rgb", "rgba", "rgb255", "from_rgba",
    "hsl", "hsla", "from_hsla",

    # Accessors
    "to_rgba", "to_hsla", "color_convert",

    # Conversions
    "rgb_to_hsl", "rgb255_to_hsl",
    "hsl_to_rgb", "hsl_to_rgb255",
    "np_rgb_to_hsl", "np_hsl_to_rgb",
    "normalize_hue",

    # CSS output
    "to_css_string", "css_declaration",
    "round_percent", "round_number", "round_channel", "format_number",

    # Types
    "RgbaRecord", "HslaRecord", "CssSyntax", "ColorSpace",
]
