import math

import numpy as np
import pytest

from wcag_palette import (
    WHITE, Color, accessibility_level, accessibility_report, delta_e_cie2000, distance_matrix,
    generate, min_pairwise_distance,
)
from wcag_palette.distance import rgb_to_lab
from wcag_palette.report import contrast_info


@pytest.mark.parametrize("ratio, level", [(21, "AAA"), (7.0, "AAA"), (6.99, "AA"), (4.5, "AA"), (4.49, "FAIL")])
def test_accessibility_level(ratio, level):
    assert accessibility_level(ratio) == level


def test_contrast_info():
    info = contrast_info(Color.from_hex("#767676"), WHITE, "AAA")
    assert info.level == "AA"
    assert not info.compliant
    assert info.ratio == pytest.approx(4.54, abs=0.01)


def test_report_for_default_generation():
    palettes = generate()
    report = accessibility_report(palettes)
    assert len(report.light) == len(report.dark) == 5
    assert report.compliant
    assert report.differentiation_applied
    assert 0 < report.light_min_distance < math.inf
    assert 0 < report.dark_min_distance < math.inf


def test_report_without_differentiation():
    report = accessibility_report(generate({"differentiation": False, "palette_size": 3}))
    assert not report.differentiation_applied
    assert len(report.light) == 3


def test_lab_of_white():
    assert rgb_to_lab((255, 255, 255)) == pytest.approx([100, 0, 0], abs=1e-3)


@pytest.mark.parametrize(
    "lab1, lab2, expected",
    [
        ((50.0, 2.6772, -79.7751), (50.0, 0.0, -82.7485), 2.0425),
        ((50.0, 2.5, 0.0), (73.0, 25.0, -18.0), 27.1492),
        ((0.0, 0.0, 0.0), (100.0, 0.0, 0.0), 100.0),
    ],
)
def test_delta_e_cie2000_reference_pairs(lab1, lab2, expected):
    assert delta_e_cie2000(lab1, lab2) == pytest.approx(expected, abs=1e-4)
    assert delta_e_cie2000(lab2, lab1) == pytest.approx(expected, abs=1e-4)


def test_distance_matrix_accepts_colors_and_rows():
    colors = [Color.from_hex(x) for x in ("#FF0000", "#00FF00", "#0000FF")]
    matrix = distance_matrix(colors)
    assert matrix.shape == (3, 3)
    assert np.allclose(matrix, matrix.T)
    assert np.all(np.diag(matrix) == 0)
    assert np.allclose(matrix, distance_matrix([c.rgb for c in colors]))


def test_min_pairwise_distance():
    assert min_pairwise_distance([Color.from_hex("#123456")]) == math.inf
    black, white = Color.from_hex("#000000"), Color.from_hex("#FFFFFF")
    assert min_pairwise_distance([black, white]) == pytest.approx(100, abs=0.01)
    assert min_pairwise_distance([black, white, black]) == 0


def test_report_uses_injected_backgrounds():
    light_bg = Color.from_hex("#DDDDDD")
    dark_bg = Color.from_hex("#111111")
    palettes = generate(light_background=light_bg, dark_background=dark_bg)
    report = accessibility_report(palettes)
    for color, info in zip(palettes.light_optimized, report.light):
        assert info.ratio == pytest.approx(color.contrast_ratio(light_bg))
        assert info.level == accessibility_level(color.contrast_ratio(light_bg))
    for color, info in zip(palettes.dark_optimized, report.dark):
        assert info.ratio == pytest.approx(color.contrast_ratio(dark_bg))


def test_report_backgrounds_can_be_overridden():
    palettes = generate()
    black = Color.from_hex("#000000")
    report = accessibility_report(palettes, light_background=black)
    assert [info.ratio for info in report.light] == pytest.approx(
        [c.contrast_ratio(black) for c in palettes.light_optimized])
