import unittest

from colordump.ui.ansi import RESET, foreground
from colordump.ui.palette import (
    DEFAULT_PALETTE,
    PALETTES,
    Markers,
    build_palette,
    get_palette,
)


class TestPalette(unittest.TestCase):
    def test_total_mapping(self):
        for palette in PALETTES.values():
            self.assertEqual(len(palette.colors), 256)

    def test_fallback_to_default(self):
        palette = build_palette("test", {0x41: 10}, default=200)
        self.assertEqual(palette.color_for(0x41), 10)
        self.assertEqual(palette.color_for(0x42), 200)
        self.assertEqual(palette.color_for(0xFF), 200)

    def test_absent_differs_from_zero(self):
        for palette in PALETTES.values():
            self.assertNotEqual(palette.absent, palette.color_for(0))

    def test_absent_same_as_zero_rejected(self):
        with self.assertRaises(ValueError):
            build_palette("bad", {0: 5}, default=1, absent=5)

    def test_markers_enabled(self):
        markers = Markers.from_palette(DEFAULT_PALETTE, True)
        self.assertEqual(markers.values[0xFF], foreground(DEFAULT_PALETTE.color_for(0xFF)))
        self.assertEqual(markers.absent, foreground(DEFAULT_PALETTE.absent))
        self.assertEqual(markers.reset, RESET)

    def test_markers_disabled(self):
        markers = Markers.from_palette(DEFAULT_PALETTE, False)
        self.assertEqual(set(markers.values), {""})
        self.assertEqual(markers.absent, "")
        self.assertEqual(markers.reset, "")

    def test_unknown_palette(self):
        with self.assertRaises(ValueError):
            get_palette("nope")
        self.assertIs(get_palette("default"), DEFAULT_PALETTE)


if __name__ == "__main__":
    unittest.main()
