import io
import os
import tempfile
import unittest

from colordump.core.source import open_source


class _Pipe(io.BytesIO):
    def seekable(self):
        return False

    def isatty(self):
        return False


class _Tty(io.BytesIO):
    def isatty(self):
        return True


class TestSource(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "data.bin")
        with open(self.path, "wb") as handle:
            handle.write(bytes(range(100)))

    def tearDown(self):
        self._tmp.cleanup()

    def test_open_file(self):
        source = open_source(self.path)
        try:
            self.assertEqual(source.size, 100)
            self.assertTrue(source.seekable)
            self.assertEqual(source.skip(0x10), 0x10)
            self.assertEqual(source.handle.read(1), b"\x10")
        finally:
            source.close()
        self.assertTrue(source.handle.closed)

    def test_missing_file(self):
        with self.assertRaises(ValueError):
            open_source(os.path.join(self._tmp.name, "nope.bin"))

    def test_directory(self):
        with self.assertRaises(ValueError) as ctx:
            open_source(self._tmp.name)
        self.assertIn("is directory", str(ctx.exception))

    def test_stdin_stream(self):
        stdin = _Pipe(bytes(range(50)))
        source = open_source(None, stdin)
        self.assertEqual(source.size, 0)
        self.assertFalse(source.seekable)
        self.assertEqual(source.skip(20), 20)
        self.assertEqual(stdin.read(1), b"\x14")
        source.close()
        self.assertFalse(stdin.closed)

    def test_stream_skip_past_end(self):
        source = open_source(None, _Pipe(b"abc"))
        self.assertEqual(source.skip(10), 3)

    def test_stream_skip_backwards(self):
        source = open_source(None, _Pipe(b"abc"))
        with self.assertRaises(ValueError):
            source.skip(-1)

    def test_tty_without_path(self):
        with self.assertRaises(ValueError) as ctx:
            open_source(None, _Tty())
        self.assertIn("no file given", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
