from .color_types import (
    Scalar,
    Triple,
    ColorSpace,
    COLOR_SPACES,
    HUE_SPACES,
    RgbaRecord,
    HslaRecord,
    RgbaInput,
    HslaInput,
    is_hue_space,
)
from .css_syntax import CssSyntax, DEFAULT_CSS_SYNTAX, CHANNEL_MAX

__all__ = [
    'Scalar',
    'Triple',
    'ColorSpace',
    'COLOR_SPACES',
    'HUE_SPACES',
    'RgbaRecord',
    'HslaRecord',
    'RgbaInput',
    'HslaInput',
    'is_hue_space',
    'CssSyntax',
    'DEFAULT_CSS_SYNTAX',
    'CHANNEL_MAX',
]
