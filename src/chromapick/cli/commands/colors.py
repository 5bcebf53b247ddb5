"""Color conversion and catalogue commands."""

import click

from chromapick.colors import (
    PRESET_PALETTE,
    generate_grayscale_ramp,
    generate_spectrum,
    hsl_to_color,
    is_selected,
    parse_hex,
)
from chromapick.models import Color


def _swatch(color: Color) -> str:
    """Two-cell block rendered in the color itself."""
    return click.style("  ", bg=color.to_rgb_tuple())


def _describe(color: Color) -> str:
    r, g, b = color.to_rgb_tuple()
    return f"{color.to_hex()}  rgb({r}, {g}, {b})"


@click.command(name="convert")
@click.argument("value")
def convert(value: str):
    """
    Normalize a hex color and show its RGB channels.

    VALUE may be written with or without the leading '#', in any case.
    """
    color = parse_hex(value, require_hash=False)
    if color is None:
        raise click.BadParameter(f"{value!r} is not a #RRGGBB color", param_hint="VALUE")
    click.echo(f"{_swatch(color)} {_describe(color)}")


@click.command(name="hsl")
@click.argument("hue", type=float)
@click.argument("saturation", type=float)
@click.argument("lightness", type=float)
def hsl(hue: float, saturation: float, lightness: float):
    """
    Convert an HSL triple to hex and RGB.

    HUE is in degrees (wrapped into 0-360); SATURATION and LIGHTNESS are
    percentages (clamped to 0-100).
    """
    color = hsl_to_color(hue, saturation, lightness)
    click.echo(f"{_swatch(color)} {_describe(color)}")


@click.command(name="palette")
@click.option(
    "--color",
    "-c",
    type=str,
    default=None,
    help="Mark the preset matching this color",
)
def palette(color: str | None):
    """List the preset palette, row by row."""
    for row in PRESET_PALETTE:
        click.echo(f"\nRow {row[0].row + 1}:")
        for swatch in row:
            marker = "✓" if color is not None and is_selected(swatch, color) else " "
            click.echo(f"  {marker} {_swatch(swatch.color)} {swatch.name:<8} {swatch.hex}")


@click.command(name="spectrum")
@click.option(
    "--grayscale/--no-grayscale",
    default=True,
    help="Include the grayscale ramp (default: enabled)",
)
@click.option(
    "--hex/--no-hex",
    "show_hex",
    default=False,
    help="Print hex values instead of color blocks",
)
def spectrum(grayscale: bool, show_hex: bool):
    """Print the spectrum table (12 hues x 10 saturations at 50% lightness)."""
    columns = generate_spectrum()
    header = " ".join(f"{column[0].sample.hue:>7g}" if show_hex else f"{column[0].sample.hue:>3g}"
                      for column in columns)
    click.echo(f"{'sat':>4} {header}")

    for row in range(len(columns[0])):
        saturation = columns[0][row].sample.saturation
        if show_hex:
            cells = " ".join(column[row].color.to_hex() for column in columns)
        else:
            cells = " ".join(f" {_swatch(column[row].color)}" for column in columns)
        click.echo(f"{saturation:>4g} {cells}")

    if grayscale:
        click.echo("\nGrayscale:")
        ramp = generate_grayscale_ramp()
        if show_hex:
            click.echo(" ".join(color.to_hex() for color in ramp))
        else:
            click.echo("".join(_swatch(color) for color in ramp))
