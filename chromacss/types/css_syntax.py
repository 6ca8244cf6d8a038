# No dependencies
from enum import Enum


class CssSyntax(str, Enum):
    """Output shape of the CSS color functions.

    PERCENT: ``rgba(50%,25%,10%,0.8)``
    LEGACY:  ``rgba(128,64,26,0.8)``
    MODERN:  ``rgb(50% 25% 10% / 0.8)``

    Percentages keep two decimals and plain numbers (hue, alpha) keep
    three. LEGACY writes RGB channels on the 0-255 scale as whole numbers
    instead of three-decimal numbers, so 0.5 becomes ``128``, not ``127.5``.
    """
    PERCENT = "percent"
    LEGACY = "legacy"
    MODERN = "modern"


DEFAULT_CSS_SYNTAX = CssSyntax.PERCENT

CHANNEL_MAX = 255

# Decimal places kept when rounding a component for output
decimals = {
    "percent": 2,
    "number": 3,
    "channel": 0,
}

argument_separator = {
    CssSyntax.PERCENT: ",",
    CssSyntax.LEGACY: ",",
    CssSyntax.MODERN: " ",
}

alpha_separator = {
    CssSyntax.PERCENT: ",",
    CssSyntax.LEGACY: ",",
    CssSyntax.MODERN: " / ",
}

# Whether the function name takes an "a" suffix when alpha is emitted
alpha_suffix = {
    CssSyntax.PERCENT: True,
    CssSyntax.LEGACY: True,
    CssSyntax.MODERN: False,
}
