import warnings
import numpy as np
import pytest
from chromacss.conversions import hsl_to_rgb, hsl_to_rgb255, np_hsl_to_rgb, normalize_hue
from ..samples import samples_hsl_rgb

tolerance = 1e-9

def test_hsl_to_rgb():
    for (h, s, l), (r_exp, g_exp, b_exp) in samples_hsl_rgb.items():
        r, g, b = hsl_to_rgb(h, s, l)

        assert abs(r - r_exp) < tolerance
        assert abs(g - g_exp) < tolerance
        assert abs(b - b_exp) < tolerance

@pytest.mark.parametrize("hue", [0, 45, 90, 180, 275, 359.9])
def test_zero_saturation_is_gray(hue):
    r, g, b = hsl_to_rgb(hue, 0.0, 0.35)
    assert r == g == b == 0.35

@pytest.mark.parametrize("hue", [0, 120, 200, 330])
def test_lightness_extremes(hue):
    assert hsl_to_rgb(hue, 0.8, 0.0) == (0.0, 0.0, 0.0)
    assert hsl_to_rgb(hue, 0.8, 1.0) == (1.0, 1.0, 1.0)

@pytest.mark.parametrize("hue, wrapped", [(360, 0), (400, 40), (-60, 300), (720 + 210, 210)])
def test_hue_wraps(hue, wrapped):
    assert normalize_hue(hue) == wrapped
    assert np.allclose(hsl_to_rgb(hue, 0.5, 0.5), hsl_to_rgb(wrapped, 0.5, 0.5), atol=tolerance)

def test_sector_boundaries():
    # each boundary hue gives the pure primary or secondary
    expected = {
        0: (1.0, 0.0, 0.0),
        60: (1.0, 1.0, 0.0),
        120: (0.0, 1.0, 0.0),
        180: (0.0, 1.0, 1.0),
        240: (0.0, 0.0, 1.0),
        300: (1.0, 0.0, 1.0),
    }
    for hue, rgb in expected.items():
        assert hsl_to_rgb(hue, 1.0, 0.5) == rgb

def test_hsl_to_rgb255():
    r, g, b = hsl_to_rgb255(210, 0.5, 0.4)
    assert abs(r - 51) < 1e-9
    assert abs(g - 102) < 1e-9
    assert abs(b - 153) < 1e-9

def test_hsl_to_rgb_numpy():
    the_matrix = np.array(list(samples_hsl_rgb.keys()))
    expected = np.array(list(samples_hsl_rgb.values()))
    h, s, l = the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2]
    rgb = np_hsl_to_rgb(h, s, l)

    assert rgb.shape == expected.shape
    assert np.allclose(rgb, expected, atol=tolerance)

def test_hsl_to_rgb_numpy_matches_scalar():
    rng = np.random.default_rng(11)
    h = rng.uniform(-360, 720, 64)
    s = rng.random(64)
    l = rng.random(64)
    rgb = np_hsl_to_rgb(h, s, l)
    for i in range(64):
        assert np.allclose(rgb[i], hsl_to_rgb(h[i], s[i], l[i]), atol=1e-12)

def test_hsl_to_rgb_numpy_grid():
    h, s = np.meshgrid(np.arange(0, 360, 30), np.linspace(0, 1, 5))
    rgb = np_hsl_to_rgb(h, s, 0.5)
    assert rgb.shape == h.shape + (3,)
    # saturation 0 row is a flat mid gray
    assert np.allclose(rgb[0], 0.5)

def test_hsl_to_rgb_numpy_non_finite_matches_scalar():
    h = np.array([30.0, np.nan, np.inf, 200.0, 100.0, -np.inf])
    s = np.array([0.5, 0.5, 0.5, np.inf, 0.3, 0.2])
    l = np.array([0.4, 0.5, 0.5, 0.5, -np.inf, 0.6])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        rgb = np_hsl_to_rgb(h, s, l)

    for i in range(len(h)):
        assert np.allclose(rgb[i], hsl_to_rgb(h[i], s[i], l[i]), atol=1e-12, equal_nan=True)
    assert not np.isnan(rgb[0]).any()
