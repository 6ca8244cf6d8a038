import math
import pytest
from chromacss import (
    CssSyntax,
    rgb, rgba, rgb255, hsl, hsla,
    to_css_string, css_declaration,
    round_percent, round_number, round_channel, format_number,
)

# Pinned output for the default (percent, comma-separated) syntax
css_samples = [
    (rgb(1, 0, 0), "rgb(100%,0%,0%)"),
    (rgb(1, 1, 1), "rgb(100%,100%,100%)"),
    (rgba(1, 1, 1, 1), "rgba(100%,100%,100%,1)"),
    (rgba(0.5, 0.25, 0.1, 0.8), "rgba(50%,25%,10%,0.8)"),
    (rgba(0, 0, 0, 0), "rgba(0%,0%,0%,0)"),
    (rgb255(51, 102, 153), "rgb(20%,40%,60%)"),
    (hsl(120, 1, 0.25), "hsl(120,100%,25%)"),
    (hsla(210, 0.5, 0.4, 0.25), "hsla(210,50%,40%,0.25)"),
    (hsl(0, 0, 1), "hsl(0,0%,100%)"),
]

def test_to_css_string():
    for color, expected in css_samples:
        assert to_css_string(color) == expected

def test_str_and_method():
    color = rgba(0.5, 0.25, 0.1, 0.8)
    assert str(color) == "rgba(50%,25%,10%,0.8)"
    assert color.to_css() == "rgba(50%,25%,10%,0.8)"
    assert color.to_css(CssSyntax.MODERN) == "rgb(50% 25% 10% / 0.8)"

def test_legacy_syntax():
    assert to_css_string(rgba(0.5, 0.25, 0.1, 0.8), "legacy") == "rgba(128,64,26,0.8)"
    assert to_css_string(rgb(1, 0, 0), CssSyntax.LEGACY) == "rgb(255,0,0)"
    assert to_css_string(rgb255(12, 34, 56), CssSyntax.LEGACY) == "rgb(12,34,56)"
    # hsl has no raw-number form
    assert to_css_string(hsla(210, 0.5, 0.4, 0.25), CssSyntax.LEGACY) == "hsla(210,50%,40%,0.25)"

def test_modern_syntax():
    assert to_css_string(rgb(1, 0, 0), CssSyntax.MODERN) == "rgb(100% 0% 0%)"
    assert to_css_string(rgba(1, 1, 1, 1), CssSyntax.MODERN) == "rgb(100% 100% 100% / 1)"
    assert to_css_string(hsla(210, 0.5, 0.4, 0.25), "modern") == "hsl(210 50% 40% / 0.25)"
    assert to_css_string(hsl(120, 1, 0.25), "modern") == "hsl(120 100% 25%)"

def test_unknown_syntax():
    with pytest.raises(ValueError, match="Unknown CSS syntax"):
        to_css_string(rgb(1, 0, 0), "css5")

def test_color_written_in_its_own_space():
    converted = rgba(0.5, 0.25, 0.1, 0.8).convert("hsl")
    assert to_css_string(converted) == "hsla(22.5,66.67%,30%,0.8)"
    assert to_css_string(hsl(0, 1, 0.5).convert("rgb")) == "rgb(100%,0%,0%)"

def test_rounding():
    assert to_css_string(rgb(1 / 3, 2 / 3, 0.123456)) == "rgb(33.33%,66.67%,12.35%)"
    assert to_css_string(hsla(123.45678, 0.5, 0.5, 0.33333)) == "hsla(123.457,50%,50%,0.333)"

def test_out_of_range_is_written_as_given():
    assert to_css_string(rgb(1.5, -0.25, 0)) == "rgb(150%,-25%,0%)"
    assert to_css_string(hsl(400, 0.5, 0.5)) == "hsl(400,50%,50%)"

def test_round_helpers():
    assert round_percent(0.5) == 50
    assert round_percent(0.123456) == 12.35
    assert round_percent(0.125) == 12.5
    # halves go up, not to even
    assert round_number(0.0625) == 0.063
    assert round_number(22.49999) == 22.5
    assert round_channel(0.5) == 128
    assert round_channel(0.1) == 26

@pytest.mark.parametrize("value, text", [
    (50.0, "50"),
    (0.5, "0.5"),
    (66.67, "66.67"),
    (-25.0, "-25"),
    (-0.0, "0"),
    (0.00001, "0.00001"),
    (math.nan, "NaN"),
    (math.inf, "Infinity"),
    (-math.inf, "-Infinity"),
])
def test_format_number(value, text):
    assert format_number(value) == text

def test_non_finite_components_warn():
    with pytest.warns(RuntimeWarning, match="Non-finite"):
        assert to_css_string(rgb(math.nan, 0, 0)) == "rgb(NaN%,0%,0%)"
    with pytest.warns(RuntimeWarning):
        assert to_css_string(hsla(math.inf, 0.5, 0.5, 1)) == "hsla(Infinity,50%,50%,1)"

def test_css_declaration():
    assert css_declaration("background-color", rgb(1, 0, 0)) == "background-color: rgb(100%,0%,0%)"
    assert css_declaration("color", hsla(210, 0.5, 0.4, 0.25), "modern") == "color: hsl(210 50% 40% / 0.25)"

def test_huge_finite_components_do_not_raise():
    # scaling past the float range gives Infinity instead of an OverflowError
    assert to_css_string(rgb(1e305, 0, 0)) == "rgb(Infinity%,0%,0%)"
    assert to_css_string(hsl(1e306, 0.5, 0.5)) == "hsl(Infinity,50%,50%)"
    assert to_css_string(rgba(-1e307, 0, 0, 1e306), "legacy") == "rgba(-Infinity,0,0,Infinity)"
    assert round_percent(1e305) == math.inf
    assert round_number(-1e306) == -math.inf
