"""Tests for rampgen.gamut: hue wrapping, achromatic guard and conversions."""
from __future__ import annotations

import math
import re

import pytest

from rampgen.errors import ColorFormatError
from rampgen.gamut import (
    format_okhsl,
    format_oklch,
    hex_to_lab,
    hex_to_okhsl,
    hex_to_oklch,
    oklch_to_hex,
    okhsl_to_oklch,
    parse_hex,
    safe_chroma,
    wrap_hue,
)

HEX = re.compile(r"^#[0-9a-f]{6}$")


class TestWrapHue:
    @pytest.mark.parametrize(
        "h,expected",
        [(0, 0), (-30, 330), (370, 10), (720, 0), (-720, 0), (359.5, 359.5), (-1e-14, 0.0)],
    )
    def test_values(self, h, expected) -> None:
        assert wrap_hue(h) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize("h", [-1e6, -361.25, -0.001, 0, 12.5, 359.999, 360, 1e5 + 0.3])
    def test_range_and_idempotent(self, h) -> None:
        w = wrap_hue(h)
        assert 0 <= w < 360
        assert wrap_hue(w) == w


class TestSafeChroma:
    def test_zero_saturation(self) -> None:
        assert safe_chroma(250.0, 0.0, 60.0) == 0.0

    def test_nan_saturation(self) -> None:
        assert safe_chroma(250.0, math.nan, 60.0) == 0.0

    def test_vivid_color_has_chroma(self) -> None:
        assert safe_chroma(250.41, 93.95, 60.67) > 0.05


class TestConversions:
    def test_okhsl_hue_preserved(self) -> None:
        L, C, H = okhsl_to_oklch(250.41, 93.95, 60.67)
        assert H == pytest.approx(250.41, abs=1e-4)
        assert 0 < L < 100
        assert C > 0

    def test_out_of_gamut_is_mapped(self) -> None:
        assert HEX.match(oklch_to_hex(50.0, 0.5, 30.0))
        assert HEX.match(oklch_to_hex(99.0, 0.4, 140.0))

    def test_white_and_black(self) -> None:
        assert oklch_to_hex(100.0, 0.0, 0.0) == "#ffffff"
        assert oklch_to_hex(0.0, 0.0, 0.0) == "#000000"

    def test_gray_is_achromatic(self) -> None:
        h, s, l = hex_to_okhsl("#808080")
        assert (h, s) == (0.0, 0.0)
        assert 0 < l < 100
        assert hex_to_oklch("#808080")[1:] == (0.0, 0.0)

    def test_lab_of_white(self) -> None:
        lab = hex_to_lab("#ffffff")
        assert lab[0] == pytest.approx(100.0, abs=0.05)
        assert lab[1] == pytest.approx(0.0, abs=0.05)
        assert lab[2] == pytest.approx(0.0, abs=0.05)

    def test_format_strings(self) -> None:
        assert re.match(r"^oklch\(\d+\.\d% \d\.\d{3} \d+\.\d\)$", format_oklch("#ff0000"))
        assert re.match(r"^okhsl\(\d+\.\d, \d+\.\d%, \d+\.\d%\)$", format_okhsl("#ff0000"))


class TestParseHex:
    @pytest.mark.parametrize(
        "text,expected",
        [("#ABC", "#aabbcc"), ("123456", "#123456"), (" #FfA500 ", "#ffa500")],
    )
    def test_valid(self, text, expected) -> None:
        assert parse_hex(text) == expected

    @pytest.mark.parametrize("text", ["#12345", "red", "#ggg000", "", None, "rgb(1,2,3)"])
    def test_invalid_raises(self, text) -> None:
        with pytest.raises(ColorFormatError):
            parse_hex(text)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            hex_to_okhsl("#nothex")
