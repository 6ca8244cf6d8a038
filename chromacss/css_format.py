"""CSS color-function serialization.

Percentage components (saturation, lightness, and RGB channels in the
percent syntaxes) keep two decimals, plain numbers (hue, alpha) keep three,
and legacy 0-255 channels are whole numbers. Rounding sends halves up.
"""
from __future__ import annotations
import math
import warnings
from typing import List, Optional, Union

from .colors.color_base import ColorBase
from .colors.rgb import RgbSpace
from .colors.hsl import HslSpace
from .types.css_syntax import (
    CssSyntax,
    DEFAULT_CSS_SYNTAX,
    CHANNEL_MAX,
    decimals,
    argument_separator,
    alpha_separator,
    alpha_suffix,
)
from .utils.num_utils import round_half_up


def round_percent(x: float) -> float:
    """``x`` in [0, 1] as a percentage with two decimals."""
    return round_half_up(x, decimals["percent"], 100)

def round_number(x: float) -> float:
    return round_half_up(x, decimals["number"])

def round_channel(x: float) -> float:
    """``x`` in [0, 1] as a whole number on the 0-255 scale."""
    return round_half_up(x, decimals["channel"], CHANNEL_MAX)

def format_number(x: float) -> str:
    """Plain decimal text with a trailing ``.0`` dropped."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == int(x):
        return str(int(x))
    text = repr(float(x))
    if "e" in text:
        # repr switches to exponent notation below 1e-4
        text = f"{x:.{decimals['number'] + 2}f}".rstrip("0").rstrip(".")
    return text

def _percent(x: float) -> str:
    return format_number(round_percent(x)) + "%"

def _number(x: float) -> str:
    return format_number(round_number(x))

def _channel(x: float) -> str:
    return format_number(round_channel(x))

def _resolve_syntax(syntax: Optional[Union[CssSyntax, str]]) -> CssSyntax:
    if syntax is None:
        return DEFAULT_CSS_SYNTAX
    try:
        return CssSyntax(syntax)
    except ValueError:
        valid = ", ".join(s.value for s in CssSyntax)
        raise ValueError(f"Unknown CSS syntax: {syntax!r}, expected one of: {valid}") from None

def _warn_non_finite(color: ColorBase) -> None:
    if not all(math.isfinite(v) for v in color.value):
        warnings.warn(
            f"Non-finite component in {color!r}; CSS output will not be a valid color",
            RuntimeWarning,
            stacklevel=3,
        )

def to_css_string(color: ColorBase, syntax: Optional[Union[CssSyntax, str]] = None) -> str:
    """
    Serialize a color as a CSS color function.

    The color is written in the space it was built in. Alpha is written
    only when it was given explicitly.

    Args:
        color: RgbSpace or HslSpace value
        syntax: CssSyntax member or its value; defaults to DEFAULT_CSS_SYNTAX

    Returns:
        e.g. ``"rgba(50%,25%,10%,0.8)"`` with the default percent syntax

    Raises:
        ValueError: unknown syntax
        TypeError: not a color value
    """
    syntax = _resolve_syntax(syntax)
    _warn_non_finite(color)

    c0, c1, c2, alpha = color.value
    if isinstance(color, RgbSpace):
        name = "rgb"
        channel = _channel if syntax == CssSyntax.LEGACY else _percent
        args: List[str] = [channel(c0), channel(c1), channel(c2)]
    elif isinstance(color, HslSpace):
        name = "hsl"
        args = [_number(c0), _percent(c1), _percent(c2)]
    else:
        raise TypeError(f"Unsupported color type: {type(color).__name__}")

    body = argument_separator[syntax].join(args)
    if color.has_alpha:
        body += alpha_separator[syntax] + _number(alpha)
        if alpha_suffix[syntax]:
            name += "a"
    return f"{name}({body})"

def css_declaration(property_name: str, color: ColorBase, syntax: Optional[Union[CssSyntax, str]] = None) -> str:
    """Pair a style property with a color, e.g. ``"color: rgb(100%,0%,0%)"``."""
    return f"{property_name}: {to_css_string(color, syntax)}"


ColorBase.to_css = to_css_string
