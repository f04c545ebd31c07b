from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Settings:
    formats: list[str] = field(default_factory=lambda: ["hex", "asc"])
    offsets: list[str] = field(default_factory=lambda: ["hex"])
    show_header: bool = True
    enable_color: bool = True
    palette: str = "default"
    limit: int = 0
    seek: int = 0
