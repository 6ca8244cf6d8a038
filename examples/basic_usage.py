"""Basic chromacss usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromacss import (
    CssSyntax,
    rgb,
    rgba,
    rgb255,
    hsla,
    to_hsla,
    to_css_string,
    css_declaration,
    np_hsl_to_rgb,
)


def demonstrate_colors() -> None:
    # Construct colors and read them back in the other space.
    accent = rgb255(255, 128, 64)
    print("RGB as floats:", accent.value)
    print("RGB -> HSL:", to_hsla(accent))

    sky = hsla(210, 0.5, 0.4, 0.25)
    print("HSL -> RGB:", sky.to_rgba())
    print("Converted:", sky.convert("rgb"))


def demonstrate_css() -> None:
    # The same color in the three supported syntaxes.
    color = rgba(0.5, 0.25, 0.1, 0.8)
    for syntax in CssSyntax:
        print(f"{syntax.value:>8}:", to_css_string(color, syntax))

    print(css_declaration("background-color", rgb(1, 0, 0)))


def demonstrate_arrays() -> None:
    # Vectorized conversion of a full hue wheel.
    hues = np.arange(0, 360, 60)
    wheel = np_hsl_to_rgb(hues, 1.0, 0.5)
    print("Hue wheel RGB:\n", wheel)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_css()
    demonstrate_arrays()
