from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.logging import RichHandler

from .build import generate_ramps, ramp_report, ramps_to_tokens, write_tokens
from .config import MODES, builtin_palette, load_palette_config
from .contrast import DEFAULT_TARGETS, METRICS, ContrastSettings
from .display import FORMATTERS, render_family, render_overview
from .errors import ColorFormatError, ConfigError
from .gamut import hex_to_okhsl, hex_to_oklch, parse_hex
from .steps import STEPS

# ============================================================
# Shared options
# ============================================================

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Palette JSON (defaults to the built-in palette).",
)
mode_option = click.option(
    "--mode",
    type=click.Choice(MODES),
    default=None,
    help="Generation mode (overrides the config file's own mode).",
)
metric_option = click.option(
    "--metric",
    type=click.Choice(sorted(METRICS)),
    default="apca",
    show_default=True,
)
target_option = click.option(
    "--target",
    type=float,
    default=None,
    help="Contrast target (apca: 60, wcag21: 4.5 when omitted).",
)


def _ramps(config_path: Optional[Path], mode: Optional[str]):
    try:
        if config_path is not None:
            palette = load_palette_config(config_path, mode)
        else:
            palette = builtin_palette(mode or "anchors")
        return generate_ramps(palette)
    except ConfigError as e:
        raise click.ClickException(str(e))


def _settings(metric: str, target: Optional[float]) -> ContrastSettings:
    return ContrastSettings(metric, DEFAULT_TARGETS[metric] if target is None else target)


# ============================================================
# Commands
# ============================================================


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose: bool):
    """
    Generate 13-step perceptual color ramps (50..950) from OKhsl base colors.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


@main.command()
@config_option
@mode_option
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("color-scale.json"),
    show_default=True,
)
def build(config_path: Optional[Path], mode: Optional[str], out: Path):
    """
    Generate every family and write the token JSON (family -> step -> hex).
    """
    ramps = _ramps(config_path, mode)
    tokens = ramps_to_tokens(ramps)
    for family, shades in tokens.items():
        click.echo(f"  ✓ {family:<10} - {len(shades)} shades")

    write_tokens(tokens, out)
    click.echo(f"✓ Wrote {out}")
    click.echo(f"✓ {len(tokens)} color scales with {len(STEPS)} shades each")


@main.command()
@config_option
@mode_option
@click.option(
    "--family",
    "families",
    multiple=True,
    help="Show step details for this family (repeatable).",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(list(FORMATTERS)),
    default="hex",
    show_default=True,
)
@metric_option
@target_option
def show(
    config_path: Optional[Path],
    mode: Optional[str],
    families: Tuple[str, ...],
    fmt: str,
    metric: str,
    target: Optional[float],
):
    """
    Preview ramps in the terminal.
    """
    ramps = _ramps(config_path, mode)
    settings = _settings(metric, target)

    unknown = [f for f in families if f not in ramps]
    if unknown:
        raise click.ClickException(f"Unknown families: {', '.join(unknown)}")

    if not families:
        render_overview(ramps, settings)
        return
    for family in families:
        render_family(family, ramps[family], settings, fmt)


@main.command()
@config_option
@mode_option
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("ramps.csv"),
    show_default=True,
)
@metric_option
@target_option
def report(
    config_path: Optional[Path],
    mode: Optional[str],
    out: Path,
    metric: str,
    target: Optional[float],
):
    """
    Write a per-step CSV with OKLCH, CIELAB and contrast columns.
    """
    ramps = _ramps(config_path, mode)
    df = ramp_report(ramps, _settings(metric, target))
    out.write_text(df.to_csv(index=False))
    click.echo(f"✓ Wrote {out} ({len(df)} rows)")


@main.command()
@click.argument("hex_color")
def inspect(hex_color: str):
    """
    Print the OKLCH / OKhsl values of HEX_COLOR and a config entry for it.
    """
    try:
        normalized = parse_hex(hex_color)
        L, C, H = hex_to_oklch(normalized)
        h, s, l = hex_to_okhsl(normalized)
    except ColorFormatError as e:
        raise click.ClickException(f"Invalid hex color {hex_color!r}: {e}")

    achromatic = C == 0.0
    click.echo(f"Input:  {normalized.upper()}")
    click.echo(f"Output: oklch({L:.2f}% {C:.4f} {H:.2f}°)")
    if achromatic:
        click.echo("        ⚠️  Achromatic color (gray) - hue and saturation set to 0")

    click.echo("")
    click.echo(f"  base_hue:        {h:.2f}")
    click.echo(f"  base_saturation: {s:.2f}")
    click.echo(f"  base_lightness:  {l:.2f}")
    click.echo("")

    entry = {
        "name": "gray-500" if achromatic else "color-500",
        "base_hue": round(h, 2),
        "base_saturation": round(s, 2),
        "base_lightness": round(l, 2),
    }
    if achromatic:
        entry["saturation_progression"] = {"50": 0, "950": 0}
    click.echo(json.dumps(entry, indent=2))


if __name__ == "__main__":
    main()
