import io
import unittest

from colordump.core.formats import BYTE_FORMATS, get_byte_formats
from colordump.core.offsets import get_offset_formats
from colordump.core.renderer import SPLITTER, RecordRenderer
from tests.ansi_test_utils import visible_len


def _renderer(formats, offsets=(), total_size=0x1000, **kwargs) -> RecordRenderer:
    return RecordRenderer(
        io.BytesIO(bytes(range(16))),
        get_byte_formats(formats),
        get_offset_formats(offsets),
        total_size=total_size,
        **kwargs,
    )


class TestHeader(unittest.TestCase):
    def test_hex_header(self):
        header = _renderer(["hex"], enable_color=False).header()
        self.assertEqual(
            header,
            "00 01 02 03 04 05 06 07  08 09 0a 0b 0c 0d 0e 0f",
        )

    def test_ascii_header_packed(self):
        header = _renderer(["asc"], enable_color=False).header()
        self.assertEqual(header, "01234567 89abcdef")

    def test_offset_underscores(self):
        header = _renderer(["hex"], ["hex", "per"], enable_color=False).header()
        self.assertTrue(header.startswith(f"____{SPLITTER}00 01"))
        self.assertTrue(header.endswith(f"0f{SPLITTER}________"))

    def test_label_width_matches_column(self):
        for name, fmt in BYTE_FORMATS.items():
            renderer = _renderer([name], enable_color=False)
            header = renderer.header()
            line = renderer.read()
            self.assertEqual(len(header), len(line), name)
            for position in range(16):
                self.assertEqual(len(fmt.label(position)), fmt.width, name)

    def test_header_matches_row_with_offsets(self):
        renderer = _renderer(["hex", "asc", "bit"], ["oct", "dec"])
        self.assertEqual(visible_len(renderer.header()), visible_len(renderer.read()))

    def test_header_blocks(self):
        header = _renderer(["dec", "hexasc"], enable_color=False).header()
        dec_block, hexasc_block = header.split(SPLITTER)
        self.assertTrue(dec_block.startswith("000 001 002"))
        self.assertTrue(hexasc_block.startswith("00     01     "))

    def test_header_disabled(self):
        renderer = _renderer(["hex"], show_header=False)
        self.assertEqual(renderer.header(), "")

    def test_header_cached(self):
        renderer = _renderer(["hex"])
        self.assertIs(renderer.header(), renderer.header())


if __name__ == "__main__":
    unittest.main()
