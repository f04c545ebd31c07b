from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

PERCENT_WIDTH = 8
MAX_OFFSET_FORMATS = 2


@dataclass(frozen=True)
class OffsetColumn:
    name: str
    width: int
    format: Callable[[int], str]

    @property
    def visible(self) -> bool:
        return self.name != "no"


@dataclass(frozen=True)
class OffsetFormat:
    name: str
    base: str | None

    def bind(self, total_size: int) -> OffsetColumn:
        if self.base is None:
            return OffsetColumn(self.name, 0, lambda offset: "")
        if self.base == "%":
            return OffsetColumn(self.name, PERCENT_WIDTH, _percent(total_size))
        width = len(f"{max(total_size, 0):{self.base}}")
        base = self.base

        def render(offset: int) -> str:
            return f"{offset:0{width}{base}}"

        return OffsetColumn(self.name, width, render)


def _percent(total_size: int) -> Callable[[int], str]:
    def render(offset: int) -> str:
        if total_size <= 0:
            return f"{0.0:07.3f}%"
        return f"{offset * 100.0 / total_size:07.3f}%"

    return render


OFFSET_FORMATS: dict[str, OffsetFormat] = {
    fmt.name: fmt
    for fmt in (
        OffsetFormat("hex", "x"),
        OffsetFormat("dec", "d"),
        OffsetFormat("oct", "o"),
        OffsetFormat("per", "%"),
        OffsetFormat("no", None),
    )
}


def get_offset_format(name: str) -> OffsetFormat:
    key = name.strip().lower() or "no"
    fmt = OFFSET_FORMATS.get(key)
    if fmt is None:
        choices = ", ".join(OFFSET_FORMATS.keys())
        raise ValueError(f"unknown offset format: {name!r} (choices: {choices})")
    return fmt


def get_offset_formats(names: Iterable[str]) -> list[OffsetFormat]:
    formats = [get_offset_format(name) for name in names]
    if len(formats) > MAX_OFFSET_FORMATS:
        raise ValueError(
            f"at most {MAX_OFFSET_FORMATS} offset formats allowed, got {len(formats)}"
        )
    return formats
