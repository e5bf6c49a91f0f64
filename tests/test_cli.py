"""Tests for rampgen.cli: the click commands."""
from __future__ import annotations

import json

from click.testing import CliRunner

from rampgen.cli import main


def _run(*args):
    # wide console so rich tables do not wrap
    return CliRunner().invoke(main, list(args), env={"COLUMNS": "200"})


class TestBuild:
    def test_builtin(self, tmp_path) -> None:
        out = tmp_path / "scale.json"
        result = _run("build", "--out", str(out))
        assert result.exit_code == 0, result.output
        assert "✓ Wrote" in result.output
        assert "12 color scales with 13 shades each" in result.output
        assert "red" in json.loads(out.read_text())

    def test_config_file(self, tmp_path) -> None:
        cfg = tmp_path / "palette.json"
        cfg.write_text(
            json.dumps(
                {
                    "mode": "curves",
                    "colors": [
                        {"name": "ink-500", "base_hue": 260, "base_saturation": 40, "base_lightness": 45}
                    ],
                }
            )
        )
        out = tmp_path / "scale.json"
        result = _run("build", "--config", str(cfg), "--out", str(out))
        assert result.exit_code == 0, result.output
        assert list(json.loads(out.read_text())) == ["ink"]

    def test_bad_config(self, tmp_path) -> None:
        cfg = tmp_path / "palette.json"
        cfg.write_text(json.dumps({"colors": [{"name": "ink-500"}]}))
        result = _run("build", "--config", str(cfg), "--out", str(tmp_path / "x.json"))
        assert result.exit_code == 1
        assert "missing" in result.output

    def test_non_numeric_value(self, tmp_path) -> None:
        cfg = tmp_path / "palette.json"
        entry = {
            "name": "ink-500",
            "base_hue": 260,
            "base_saturation": 40,
            "base_lightness": 45,
            "start_l": "light",
        }
        cfg.write_text(json.dumps({"mode": "curves", "colors": [entry]}))
        out = tmp_path / "x.json"
        result = _run("build", "--config", str(cfg), "--out", str(out))
        assert result.exit_code == 1
        assert "ink-500: start_l must be a number" in result.output
        assert not isinstance(result.exception, ValueError)
        assert not out.exists()


class TestShow:
    def test_overview(self) -> None:
        result = _run("show", "--mode", "curves")
        assert result.exit_code == 0, result.output
        assert "Family" in result.output

    def test_family(self) -> None:
        result = _run("show", "--family", "red", "--format", "oklch", "--metric", "wcag21")
        assert result.exit_code == 0, result.output
        assert "red-950" in result.output

    def test_unknown_family(self) -> None:
        result = _run("show", "--family", "nope")
        assert result.exit_code == 1
        assert "Unknown families: nope" in result.output


class TestReport:
    def test_csv(self, tmp_path) -> None:
        out = tmp_path / "ramps.csv"
        result = _run("report", "--out", str(out))
        assert result.exit_code == 0, result.output
        assert "(156 rows)" in result.output
        assert out.read_text().startswith("family,step,hex")


class TestInspect:
    def test_color(self) -> None:
        result = _run("inspect", "#3b82f6")
        assert result.exit_code == 0, result.output
        assert "Input:  #3B82F6" in result.output
        assert '"name": "color-500"' in result.output

    def test_gray(self) -> None:
        result = _run("inspect", "808080")
        assert result.exit_code == 0, result.output
        assert "Achromatic" in result.output
        assert '"saturation_progression"' in result.output

    def test_invalid(self) -> None:
        result = _run("inspect", "nothex")
        assert result.exit_code == 1
        assert "Invalid hex color" in result.output
