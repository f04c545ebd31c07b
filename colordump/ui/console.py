from __future__ import annotations

import sys

PREFIX = "[colordump]"


def _emit(level: str, msg: str) -> None:
    if level:
        print(f"{PREFIX} {level}: {msg}", file=sys.stderr)
    else:
        print(f"{PREFIX} {msg}", file=sys.stderr)


def warn(msg: str) -> None:
    _emit("warn", msg)


def err(msg: str) -> None:
    _emit("error", msg)
