from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from .contrast import ContrastSettings, contrast_dot_color, representative_step
from .gamut import format_okhsl, format_oklch
from .scale import ColorSample, ramp_to_hex
from .steps import STEPS

FORMATTERS: Dict[str, Callable[[str], str]] = {
    "hex": lambda h: h,
    "oklch": format_oklch,
    "okhsl": format_okhsl,
}

# ============================================================
# Swatches
# ============================================================


def swatch(hex_color: str, settings: ContrastSettings, marked: bool = False) -> Text:
    """Swatch with a contrast dot; the representative step gets a triangle."""
    dot = contrast_dot_color(hex_color, settings)
    glyph = " ▲ " if marked else " ● "
    return Text(glyph, style=Style(bgcolor=hex_color, color=dot))


# ============================================================
# Tables
# ============================================================


def render_overview(
    ramps: Dict[str, List[ColorSample]],
    settings: ContrastSettings,
    console: Optional[Console] = None,
):
    console = console or Console()
    title = f"Color ramps ({settings.metric} ≥ {settings.target:g} on white marked ▲)"
    table = Table(title=title, show_header=True, header_style="bold")

    table.add_column("Family", style="cyan")
    for step in STEPS:
        table.add_column(str(step), justify="center")

    for family, samples in ramps.items():
        hexes = ramp_to_hex(samples)
        marked = representative_step(hexes, settings.query("white", "background"))
        table.add_row(
            family, *[swatch(h, settings, i == marked) for i, h in enumerate(hexes)]
        )

    console.print(table)


def render_family(
    family: str,
    samples: Sequence[ColorSample],
    settings: ContrastSettings,
    fmt: str = "hex",
    console: Optional[Console] = None,
):
    console = console or Console()
    to_text = FORMATTERS[fmt]
    on_white = settings.query("white", "background")
    on_black = settings.query("black", "background")

    table = Table(title=family, show_header=True, header_style="bold")
    table.add_column("Step", style="cyan")
    table.add_column("Value")
    table.add_column("Swatch")
    table.add_column("L", justify="right")
    table.add_column("C", justify="right")
    table.add_column("H", justify="right")
    table.add_column("vs white", justify="right")
    table.add_column("vs black", justify="right")

    hexes = ramp_to_hex(samples)
    marked = representative_step(hexes, on_white)
    for i, (sample, h) in enumerate(zip(samples, hexes)):
        table.add_row(
            f"{family}-{sample.step}",
            to_text(h),
            swatch(h, settings, i == marked),
            f"{sample.oklch[0]:.1f}",
            f"{sample.chroma:.3f}",
            f"{sample.hue:.0f}°",
            f"{on_white.measure(h):.1f}",
            f"{on_black.measure(h):.1f}",
        )

    console.print(table)
