"""Tests for rampgen.build: palette generation, token JSON and the report."""
from __future__ import annotations

import json

import pytest

from rampgen.build import generate_ramps, ramp_report, ramps_to_tokens, write_tokens
from rampgen.config import ANCHOR_COLORS, builtin_palette
from rampgen.contrast import ContrastSettings
from rampgen.gamut import okhsl_to_oklch, oklch_to_hex
from rampgen.steps import STEPS


@pytest.fixture(scope="module")
def ramps():
    return generate_ramps(builtin_palette("anchors"))


class TestTokens:
    def test_every_family(self, ramps) -> None:
        assert len(ramps) == len(ANCHOR_COLORS)
        assert "red" in ramps and "neutral" in ramps

    def test_step_keys_ascending(self, ramps) -> None:
        tokens = ramps_to_tokens(ramps)
        for shades in tokens.values():
            assert list(shades) == [str(s) for s in STEPS]

    def test_pivot_token_is_base_color(self, ramps) -> None:
        tokens = ramps_to_tokens(ramps)
        assert tokens["red"]["500"] == oklch_to_hex(*okhsl_to_oklch(20.06, 92.91, 57.25))
        assert tokens["blue"]["500"] == oklch_to_hex(*okhsl_to_oklch(253.75, 100.0, 53.2))

    def test_write(self, ramps, tmp_path) -> None:
        out = tmp_path / "color-scale.json"
        tokens = ramps_to_tokens(ramps)
        write_tokens(tokens, out)
        assert json.loads(out.read_text()) == tokens

    def test_curve_mode(self) -> None:
        tokens = ramps_to_tokens(generate_ramps(builtin_palette("curves")))
        assert "zinc" in tokens
        assert all(len(shades) == len(STEPS) for shades in tokens.values())


class TestReport:
    def test_columns(self, ramps) -> None:
        df = ramp_report(ramps, ContrastSettings())
        assert list(df.columns) == [
            "family",
            "step",
            "hex",
            "L",
            "C",
            "H",
            "S",
            "lab_L",
            "lab_a",
            "lab_b",
            "contrast_white",
            "contrast_black",
            "representative",
        ]
        assert len(df) == len(ramps) * len(STEPS)

    def test_one_mark_per_family(self, ramps) -> None:
        df = ramp_report(ramps, ContrastSettings("wcag21", 4.5))
        marks = df.groupby("family")["representative"].sum()
        assert (marks <= 1).all()

    def test_achromatic_rows(self, ramps) -> None:
        df = ramp_report(ramps, ContrastSettings())
        assert (df[df["family"] == "neutral"]["C"] == 0.0).all()
