from __future__ import annotations

ESC = "\x1b["
RESET = f"{ESC}0m"


def foreground(index: int) -> str:
    return f"{ESC}38;5;{index}m"
