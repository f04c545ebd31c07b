from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from colordump.ui.ansi import RESET, foreground

# xterm 256-color indices
GREY19 = 236
GREY35 = 240
GREY93 = 255
GREY100 = 231


@dataclass(frozen=True)
class Palette:
    name: str
    colors: tuple[int, ...]
    absent: int = GREY19
    splitter: int = GREY93
    offset: int = GREY93
    special: int = GREY35
    highlight: int = GREY100

    def color_for(self, value: int) -> int:
        return self.colors[value]


@dataclass(frozen=True)
class Markers:
    """Escape strings for one palette, all empty when color is off."""

    values: tuple[str, ...]
    absent: str
    splitter: str
    offset: str
    special: str
    highlight: str
    reset: str

    @classmethod
    def from_palette(cls, palette: Palette, enabled: bool) -> Markers:
        if not enabled:
            return cls(
                values=("",) * 256,
                absent="",
                splitter="",
                offset="",
                special="",
                highlight="",
                reset="",
            )
        return cls(
            values=tuple(foreground(color) for color in palette.colors),
            absent=foreground(palette.absent),
            splitter=foreground(palette.splitter),
            offset=foreground(palette.offset),
            special=foreground(palette.special),
            highlight=foreground(palette.highlight),
            reset=RESET,
        )


def build_palette(
    name: str,
    overrides: Mapping[int, int],
    default: int,
    **extra: int,
) -> Palette:
    colors = []
    for value in range(256):
        colors.append(overrides.get(value, default))
    palette = Palette(name=name, colors=tuple(colors), **extra)
    if palette.absent == palette.color_for(0):
        raise ValueError(f"palette {name}: absent color must differ from 0x00")
    return palette


def _span(start: int, end: int, color: int) -> dict[int, int]:
    return {value: color for value in range(start, end + 1)}


def _default_overrides() -> dict[int, int]:
    table: dict[int, int] = {}
    table.update(_span(0x01, 0x1F, 161))
    table.update(_span(0x21, 0x2F, 214))
    table.update(_span(0x30, 0x39, 34))
    table.update(_span(0x3A, 0x40, 214))
    table.update(_span(0x41, 0x5A, 117))
    table.update(_span(0x5B, 0x60, 214))
    table.update(_span(0x61, 0x7A, 153))
    table.update(_span(0x7B, 0x7E, 214))
    table.update(_span(0x80, 0xFE, 67))
    table.update(
        {
            0x00: GREY35,
            0x09: 33,
            0x0A: 33,
            0x0D: 33,
            0x20: 33,
            0x7F: 161,
            0xFF: 196,
        }
    )
    return table


DEFAULT_PALETTE = build_palette("default", _default_overrides(), default=GREY93)

MONO_PALETTE = build_palette("mono", {}, default=GREY93, absent=GREY35)


PALETTES = {
    DEFAULT_PALETTE.name: DEFAULT_PALETTE,
    MONO_PALETTE.name: MONO_PALETTE,
}


def get_palette(name: str) -> Palette:
    palette = PALETTES.get(name)
    if palette is None:
        choices = ", ".join(sorted(PALETTES.keys()))
        raise ValueError(f"unknown palette: {name} (choices: {choices})")
    return palette
