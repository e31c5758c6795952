"""Tests for known-color substitution on untagged templates."""

from tests.conftest import PALETTE, PANDA_SVG

from avatarkit.engine.color_map import COLOR_MAPPINGS, swap_known_colors
from avatarkit.engine.palette import Palette


def test_panda_fills_swapped():
    result = swap_known_colors(PANDA_SVG, "panda", PALETTE)
    assert ".fur { fill: #445566; }" in result.svg
    assert ".patch { fill:#112233}" in result.svg
    assert 'rx="6" ry="8" fill="#112233"' in result.svg
    assert result.replaced == 3
    assert result.by_category == {"primary": 2, "secondary": 1}


def test_longer_color_not_split():
    result = swap_known_colors(PANDA_SVG, "panda", PALETTE)
    assert 'fill="#4445aa"' in result.svg


def test_strokes_untouched():
    result = swap_known_colors(PANDA_SVG, "panda", PALETTE)
    assert 'stroke="#444"' in result.svg


def test_unknown_character_uses_default_table():
    svg = '<svg><path fill="#DBB79C" d="M0 0"/><path fill="#f0d6c2" d="M1 1"/></svg>'
    result = swap_known_colors(svg, "axolotl", PALETTE)
    assert result.svg == '<svg><path fill="#112233" d="M0 0"/><path fill="#445566" d="M1 1"/></svg>'
    assert COLOR_MAPPINGS["default"] == COLOR_MAPPINGS["meerkat"]


def test_single_pass_no_chained_swaps():
    # Primary target is itself a known secondary color; it must not be swapped again
    palette = Palette(primary="#f0d6c2", secondary="#000000")
    svg = '<path fill="#dbb79c"/>'
    result = swap_known_colors(svg, "meerkat", palette)
    assert result.svg == '<path fill="#f0d6c2"/>'
    assert result.replaced == 1


def test_no_known_colors():
    svg = '<svg><rect fill="#123456"/></svg>'
    result = swap_known_colors(svg, "owl", PALETTE)
    assert result.svg == svg
    assert result.replaced == 0
