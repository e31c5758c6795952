"""Tests for hex color parsing and darkening."""

import pytest

from avatarkit.engine.color import darken, is_hex_color, normalize_hex, parse_hex, to_hex


def test_darken_white():
    assert darken("#ffffff", 0.2) == "#cccccc"
    assert darken("#FFFFFF", 0.2) == "#cccccc"


def test_darken_black_any_factor():
    for factor in (0.0, 0.2, 0.5, 0.99):
        assert darken("#000000", factor) == "#000000"


def test_darken_zero_factor_is_identity():
    for color in ("#112233", "#d4a574", "#00ff7f", "#010203"):
        assert darken(color, 0) == color


def test_darken_without_hash():
    assert darken("ffffff", 0.2) == "#cccccc"


def test_darken_rounds_half_up():
    # 0x05 * 0.5 = 2.5 -> 3
    assert darken("#050505", 0.5) == "#030303"


def test_darken_default_palette():
    # 0xd4=212 -> 169.6 -> 170 (aa), 0xa5=165 -> 132 (84), 0x74=116 -> 92.8 -> 93 (5d)
    assert darken("#D4A574", 0.2) == "#aa845d"


def test_darken_pads_channels():
    assert darken("#0a0a0a", 0.2) == "#080808"


def test_darken_malformed_raises():
    with pytest.raises(ValueError):
        darken("#zzzzzz", 0.2)
    with pytest.raises(ValueError):
        darken("#fff", 0.2)


def test_parse_and_to_hex():
    assert parse_hex("#0A0B0C") == (10, 11, 12)
    assert to_hex((10, 11, 12)) == "#0a0b0c"


def test_is_hex_color():
    assert is_hex_color("#abc")
    assert is_hex_color("abcdef")
    assert not is_hex_color("red")
    assert not is_hex_color("#abcd")
    assert not is_hex_color("")


def test_normalize_hex():
    assert normalize_hex("FA0") == "#ffaa00"
    assert normalize_hex(" #D4A574 ") == "#d4a574"
