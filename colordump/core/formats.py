from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from colordump.ui.palette import Markers

PLACEHOLDER = "‡"
SUBSTITUTE = "."


def ascii_char(value: int) -> str:
    if 0x20 <= value <= 0x7E:
        return chr(value)
    return SUBSTITUTE


@dataclass(frozen=True)
class ByteFormat:
    """How one byte is shown in a column.

    ``render`` returns the plain text of a present byte, ``paint`` the same
    text with any inner color escapes. ``composite`` formats change color
    mid-column, so the next column must restate its byte color.
    """

    name: str
    width: int
    render: Callable[[int], str]
    label: Callable[[int], str]
    packed: bool = False
    composite: bool = False

    def absent(self) -> str:
        return PLACEHOLDER * self.width

    def paint(self, value: int, markers: Markers) -> str:
        if not self.composite:
            return self.render(value)
        number, char = self.render(value).split(" ", 1)
        return (
            f"{number} {markers.special}[{markers.highlight}{char[1]}"
            f"{markers.special}]"
        )


def _with_ascii(fmt: str) -> Callable[[int], str]:
    def render(value: int) -> str:
        return f"{value:{fmt}} [{ascii_char(value)}]"

    return render


def _hex_label(width: int) -> Callable[[int], str]:
    def label(position: int) -> str:
        return f"{position:0{width}x}"

    return label


def _short_label(width: int) -> Callable[[int], str]:
    def label(position: int) -> str:
        return f"{position:02x}".ljust(width)

    return label


BYTE_FORMATS: dict[str, ByteFormat] = {
    fmt.name: fmt
    for fmt in (
        ByteFormat("hex", 2, lambda value: f"{value:02x}", _hex_label(2)),
        ByteFormat("dec", 3, lambda value: f"{value:03d}", _hex_label(3)),
        ByteFormat("oct", 3, lambda value: f"{value:03o}", _hex_label(3)),
        ByteFormat("bit", 8, lambda value: f"{value:08b}", _hex_label(8)),
        ByteFormat("asc", 1, ascii_char, _hex_label(1), packed=True),
        ByteFormat(
            "hexasc", 6, _with_ascii("02x"), _short_label(6), composite=True
        ),
        ByteFormat(
            "decasc", 7, _with_ascii("03d"), _short_label(7), composite=True
        ),
    )
}

_ALIASES = {
    "ascii": "asc",
}


def get_byte_format(name: str) -> ByteFormat:
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    fmt = BYTE_FORMATS.get(key)
    if fmt is None:
        choices = ", ".join(BYTE_FORMATS.keys())
        raise ValueError(f"unknown format: {name!r} (choices: {choices})")
    return fmt


def get_byte_formats(names: Iterable[str]) -> list[ByteFormat]:
    formats = [get_byte_format(name) for name in names]
    if not formats:
        raise ValueError("at least one format is required")
    return formats
