from __future__ import annotations

import io
import os
from dataclasses import dataclass
from typing import BinaryIO

_SKIP_CHUNK = 64 * 1024


@dataclass
class Source:
    handle: BinaryIO
    name: str
    size: int = 0
    seekable: bool = False
    owned: bool = True

    def skip(self, offset: int) -> int:
        """Move ``offset`` bytes forward and return the new logical position."""
        if offset == 0:
            return self.handle.tell() if self.seekable else 0
        if self.seekable:
            return self.handle.seek(offset, io.SEEK_CUR)
        if offset < 0:
            raise ValueError("cannot seek backwards in a stream")
        remaining = offset
        while remaining > 0:
            data = self.handle.read(min(remaining, _SKIP_CHUNK))
            if not data:
                break
            remaining -= len(data)
        return offset - remaining

    def close(self) -> None:
        if self.owned:
            self.handle.close()


def open_source(path: str | None, stdin: BinaryIO | None = None) -> Source:
    if path:
        if not os.path.exists(path):
            raise ValueError(f"no such file: {path}")
        if os.path.isdir(path):
            raise ValueError(f"{path} is directory")
        handle = open(path, "rb")
        try:
            size = os.fstat(handle.fileno()).st_size
        except OSError:
            handle.close()
            raise
        return Source(handle=handle, name=path, size=size, seekable=True)

    if stdin is None or _is_tty(stdin):
        raise ValueError("no file given as argument, see --help")
    # no clue of the size when streaming
    return Source(
        handle=stdin,
        name="<stdin>",
        size=0,
        seekable=is_seekable(stdin),
        owned=False,
    )


def _is_tty(stream: BinaryIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def is_seekable(stream: BinaryIO) -> bool:
    try:
        return bool(stream.seekable())
    except (AttributeError, ValueError):
        return False
