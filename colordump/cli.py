from __future__ import annotations

import argparse
import os
import sys
from typing import BinaryIO, TextIO

from colordump.core.config import format_setting, list_specs, load_settings, set_setting
from colordump.core.formats import BYTE_FORMATS, get_byte_formats
from colordump.core.offsets import OFFSET_FORMATS, get_offset_formats
from colordump.core.paths import config_path
from colordump.core.renderer import RecordRenderer
from colordump.core.settings import Settings
from colordump.core.source import open_source
from colordump.core.version import version_text
from colordump.ui.console import err, warn
from colordump.ui.palette import PALETTES, get_palette

_NOTES = """\
notes:
  - seek and limit accept prefixes: 0x = hex, 0b = binary, 0o or 0 = octal.
  - use 'no' or '' as offset format to disable offset output.
  - without a file argument, data is read from stdin.

examples:
  colordump -f hex,asc,bit foo.dat
  colordump -o hex,per -f hex,asc foo.dat
  colordump -o no -f bit foo.dat
  colordump -l 0x1024 foo.dat
  colordump -s 0b1010 foo.dat
"""


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="colordump",
        description="Dump files as colored hex, decimal, octal, bits or ascii.",
        epilog=_NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", help="File to dump.")
    parser.add_argument(
        "-f",
        "--format",
        metavar="fmt1,fmt2,..",
        help=f"One or more of: {', '.join(BYTE_FORMATS)} (default: hex,asc).",
    )
    parser.add_argument(
        "-o",
        "--offset-format",
        metavar="[fmt1][,fmt2]",
        help=(
            f"Zero to two of: {', '.join(OFFSET_FORMATS)}. The first is shown "
            "on the left, the second on the right (default: hex)."
        ),
    )
    parser.add_argument(
        "-l",
        "--limit",
        metavar="[prefix]bytes",
        help="Read only N bytes (0 = no limit).",
    )
    parser.add_argument(
        "-s",
        "--seek",
        metavar="[prefix]offset",
        help="Start reading from a given offset.",
    )
    parser.add_argument(
        "--palette",
        help=f"Color palette: {', '.join(PALETTES)}.",
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Do not print the column header.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not emit color escapes.",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective settings and exit.",
    )
    parser.add_argument("--version", action="version", version=version_text())
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> tuple[Settings, str | None]:
    settings = Settings()
    path = config_path()
    if os.path.isfile(path) and not load_settings(settings, path):
        warn(f"ignoring unreadable config: {path}")

    overrides = [
        ("format", args.format),
        ("offset_format", args.offset_format),
        ("limit", args.limit),
        ("seek", args.seek),
        ("palette", args.palette),
        ("header", "off" if args.no_header else None),
        ("color", "off" if args.no_color else None),
    ]
    for key, value in overrides:
        if value is None:
            continue
        ok, message = set_setting(settings, key, [value])
        if not ok:
            return settings, f"error parsing {key}: {message}"
    return settings, None


def main(
    argv: list[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = _parse_args(argv)
    out = stdout or sys.stdout
    if stdin is None:
        stdin = sys.stdin.buffer

    settings, error = build_settings(args)
    if error:
        err(error)
        return 1

    if args.show_config:
        for spec in list_specs():
            print(f"{spec.key} = {format_setting(settings, spec.key)}", file=out)
        return 0

    try:
        byte_formats = get_byte_formats(settings.formats)
        offset_formats = get_offset_formats(settings.offsets)
        palette = get_palette(settings.palette)
        source = open_source(args.path, stdin)
    except ValueError as exc:
        err(str(exc))
        return 1
    except OSError as exc:
        err(f"error opening file: {exc}")
        return 1

    try:
        try:
            origin = source.skip(settings.seek)
        except (OSError, ValueError) as exc:
            err(f"couldn't seek in {source.name}: {exc}")
            return 1

        renderer = RecordRenderer(
            source.handle,
            byte_formats,
            offset_formats,
            palette=palette,
            show_header=settings.show_header,
            total_size=source.size,
            enable_color=settings.enable_color,
            origin=origin,
        )
        try:
            header = renderer.header()
            if header:
                print(header, file=out)
            for line in renderer.iter_lines(settings.limit):
                print(line, file=out)
        except BrokenPipeError:
            # reader went away, e.g. `| head`
            _silence_stdout(out)
            return 0
        except OSError as exc:
            err(f"error while reading {source.name}: {exc}")
            return 1
    finally:
        source.close()
    return 0


def _silence_stdout(out: TextIO) -> None:
    if out is not sys.stdout:
        return
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, out.fileno())
    except (OSError, ValueError):
        return


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
