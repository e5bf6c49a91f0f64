"""Tests for rampgen.anchors: label-distance interpolation of control points."""
from __future__ import annotations

import logging

import pytest

from rampgen.anchors import (
    hue_controls,
    interpolate_anchor,
    lightness_controls,
    map_values_to_steps,
    saturation_controls,
    split_progression,
)
from rampgen.steps import STEPS, TINT_STEPS


class TestInterpolate:
    def test_exact_entry(self) -> None:
        assert interpolate_anchor(200, {50: 1.0, 200: 7.5, 950: 3.0}) == 7.5

    def test_three_mandatory_labels(self) -> None:
        cp = {50: 98.0, 500: 60.0, 950: 10.0}
        for step in STEPS:
            if step in cp:
                continue
            lower = 50 if step < 500 else 500
            upper = 500 if step < 500 else 950
            t = (step - lower) / (upper - lower)
            assert interpolate_anchor(step, cp) == pytest.approx(cp[lower] + t * (cp[upper] - cp[lower]))

    def test_uses_label_distance_not_index(self) -> None:
        # by index 800 would be halfway (3 of 6), by label it is 300 of 450
        assert interpolate_anchor(800, {500: 0.0, 950: 90.0}) == pytest.approx(60.0)

    def test_clamps_outside(self) -> None:
        cp = {200: 5.0, 500: 0.0, 800: -3.0}
        assert interpolate_anchor(50, cp) == 5.0
        assert interpolate_anchor(950, cp) == -3.0

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            interpolate_anchor(100, {})


class TestMapValues:
    def test_string_keys(self) -> None:
        assert map_values_to_steps({"50": 98, "200": 90}, TINT_STEPS) == {50: 98.0, 200: 90.0}

    def test_invalid_keys_discarded(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="rampgen.anchors"):
            out = map_values_to_steps({250: 1, "abc": 2, 100: 3}, TINT_STEPS)
        assert out == {100: 3.0}
        assert len(caplog.records) == 2

    def test_none(self) -> None:
        assert map_values_to_steps(None, TINT_STEPS) == {}

    def test_split(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="rampgen.anchors"):
            tint, shade = split_progression({50: 1, 500: 2, 900: 3})
        assert tint == {50: 1.0}
        assert shade == {900: 3.0}
        assert "500" in caplog.text


class TestControls:
    def test_hue_pivot_zero(self) -> None:
        assert hue_controls({50: -10, 950: 5}) == {50: -10.0, 500: 0.0, 950: 5.0}

    def test_saturation_percent_of_base(self) -> None:
        cp = saturation_controls(80.0, {50: 60, 950: 90})
        assert cp == {50: pytest.approx(48.0), 500: 80.0, 950: pytest.approx(72.0)}

    def test_zero_percent_desaturates(self) -> None:
        cp = saturation_controls(80.0, {50: 0})
        assert cp[50] == 0.0

    def test_lightness_percent_of_range(self) -> None:
        cp = lightness_controls(60.0, 98.0, 10.0, {200: 40, 600: 8})
        assert cp[200] == pytest.approx(98.0 + 0.4 * (60.0 - 98.0))
        assert cp[600] == pytest.approx(60.0 + 0.08 * (10.0 - 60.0))
        assert cp[500] == 60.0

    def test_lightness_endpoints_absolute(self) -> None:
        cp = lightness_controls(60.0, 98.0, 10.0, {50: 30, 950: 50})
        assert cp[50] == 98.0
        assert cp[950] == 10.0
