from __future__ import annotations

from typing import BinaryIO, Iterator, Sequence

from colordump.core.formats import ByteFormat
from colordump.core.offsets import MAX_OFFSET_FORMATS, OffsetColumn, OffsetFormat
from colordump.core.source import is_seekable
from colordump.ui.palette import DEFAULT_PALETTE, Markers, Palette

SPLITTER = "┊"
RECORD_SIZE = 16
HALF_ROW = RECORD_SIZE // 2

_ABSENT = -1


class RecordRenderer:
    """Turns a byte source into dump lines of up to 16 bytes each.

    The source is borrowed: it is read from and queried for its position,
    never closed. Offset widths are fixed here from ``total_size``; pass 0
    when the size is unknown.
    """

    def __init__(
        self,
        source: BinaryIO,
        byte_formats: Sequence[ByteFormat],
        offset_formats: Sequence[OffsetFormat] = (),
        palette: Palette | None = None,
        show_header: bool = True,
        total_size: int = 0,
        enable_color: bool = True,
        origin: int = 0,
    ) -> None:
        if not byte_formats:
            raise ValueError("at least one byte format is required")
        if len(offset_formats) > MAX_OFFSET_FORMATS:
            raise ValueError(f"at most {MAX_OFFSET_FORMATS} offset formats allowed")
        self.source = source
        self.byte_formats = list(byte_formats)
        self.offsets = [fmt.bind(total_size) for fmt in offset_formats]
        self.palette = palette or DEFAULT_PALETTE
        self.markers = Markers.from_palette(self.palette, enable_color)
        self.show_header = show_header
        self.total_size = total_size
        self.bytes_read = 0
        self._origin = origin
        self._seekable = is_seekable(source)
        self._header: str | None = None

    def position(self) -> int:
        if self._seekable:
            return self.source.tell()
        return self._origin + self.bytes_read

    def read(self, count: int = RECORD_SIZE) -> str | None:
        """Render the next record, or return None at end of stream."""
        count = min(count, RECORD_SIZE)
        if count <= 0:
            return None
        offset = self.position()
        chunk = self.source.read(count)
        if not chunk:
            return None

        markers = self.markers
        parts: list[str] = []
        left = self._left_offset()
        if left:
            parts.extend(
                (markers.offset, left.format(offset), markers.splitter, SPLITTER)
            )

        for idx, fmt in enumerate(self.byte_formats):
            if idx:
                parts.extend((markers.splitter, SPLITTER))
            self._render_block(parts, fmt, chunk)

        right = self._right_offset()
        if right:
            parts.extend(
                (markers.splitter, SPLITTER, markers.offset, right.format(offset))
            )
        parts.append(markers.reset)

        self.bytes_read += len(chunk)
        return "".join(parts)

    def iter_lines(self, limit: int = 0) -> Iterator[str]:
        while True:
            count = RECORD_SIZE
            if limit > 0:
                remaining = limit - self.bytes_read
                if remaining <= 0:
                    return
                count = min(count, remaining)
            line = self.read(count)
            if line is None:
                return
            yield line

    def header(self) -> str:
        if not self.show_header:
            return ""
        if self._header is None:
            self._header = self._render_header()
        return self._header

    def _render_block(self, parts: list[str], fmt: ByteFormat, chunk: bytes) -> None:
        markers = self.markers
        previous: int | None = None
        for position in range(RECORD_SIZE):
            if position == HALF_ROW:
                parts.append(" ")
            if position < len(chunk):
                value = chunk[position]
                if value != previous:
                    parts.append(markers.values[value])
                parts.append(fmt.paint(value, markers))
                # inner bracket colors replace the byte color
                previous = None if fmt.composite else value
            else:
                if previous != _ABSENT:
                    parts.append(markers.absent)
                parts.append(fmt.absent())
                previous = _ABSENT
            if position < RECORD_SIZE - 1 and not fmt.packed:
                parts.append(" ")

    def _render_header(self) -> str:
        markers = self.markers
        parts: list[str] = []
        left = self._left_offset()
        if left:
            parts.extend((markers.offset, "_" * left.width, markers.splitter, SPLITTER))

        for idx, fmt in enumerate(self.byte_formats):
            if idx:
                parts.extend((markers.splitter, SPLITTER))
            parts.append(markers.offset)
            for position in range(RECORD_SIZE):
                if position == HALF_ROW:
                    parts.append(" ")
                parts.append(fmt.label(position))
                if position < RECORD_SIZE - 1 and not fmt.packed:
                    parts.append(" ")

        right = self._right_offset()
        if right:
            parts.extend((markers.splitter, SPLITTER, markers.offset, "_" * right.width))
        parts.append(markers.reset)
        return "".join(parts)

    def _left_offset(self) -> OffsetColumn | None:
        if self.offsets and self.offsets[0].visible:
            return self.offsets[0]
        return None

    def _right_offset(self) -> OffsetColumn | None:
        if len(self.offsets) > 1 and self.offsets[1].visible:
            return self.offsets[1]
        return None
