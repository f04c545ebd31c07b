from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Callable

from colordump.core.formats import get_byte_formats
from colordump.core.offsets import get_offset_formats
from colordump.core.paths import config_path
from colordump.core.settings import Settings
from colordump.ui.palette import PALETTES


@dataclass(frozen=True)
class SettingSpec:
    key: str
    attr: str
    type_name: str
    parse: Callable[[list[str]], object]
    format: Callable[[object], str]
    validate: Callable[[object], bool] | None = None


def load_settings(settings: Settings, path: str | None = None) -> bool:
    path = path or config_path()
    if not path:
        return False
    if not os.path.isfile(path):
        return False

    try:
        with open(path, "r") as handle:
            data = json.load(handle)
    except (OSError, ValueError):
        return False

    if not isinstance(data, dict):
        return False

    _apply_settings(settings, data)
    return True


def list_specs() -> list[SettingSpec]:
    return list(_SPECS)


def set_setting(settings: Settings, key: str, tokens: list[str]) -> tuple[bool, str]:
    spec = _spec_by_key().get(key)
    if not spec:
        return False, f"unknown setting: {key}"
    try:
        value = spec.parse(tokens)
    except ValueError as exc:
        return False, str(exc) or "invalid value"
    if spec.validate and not spec.validate(value):
        return False, "invalid value"
    setattr(settings, spec.attr, value)
    return True, spec.format(value)


def format_setting(settings: Settings, key: str) -> str | None:
    spec = _spec_by_key().get(key)
    if not spec:
        return None
    value = getattr(settings, spec.attr)
    return spec.format(value)


def _apply_settings(settings: Settings, data: dict[str, object]) -> None:
    for spec in _SPECS:
        if spec.key not in data:
            continue
        value = data[spec.key]
        if spec.type_name == "list":
            tokens = _list_tokens(value)
            if tokens is None:
                continue
            try:
                value = spec.parse(tokens)
            except ValueError:
                continue
        if spec.validate and not spec.validate(value):
            continue
        setattr(settings, spec.attr, value)


def _spec_by_key() -> dict[str, SettingSpec]:
    return {spec.key: spec for spec in _SPECS}


def _list_tokens(value: object) -> list[str] | None:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return [",".join(value)]
    return None


def _split_names(tokens: list[str]) -> list[str]:
    if len(tokens) != 1:
        raise ValueError("expected one value")
    return [item.strip().lower() for item in tokens[0].split(",")]


def _parse_formats(tokens: list[str]) -> list[str]:
    names = [name for name in _split_names(tokens) if name]
    return [fmt.name for fmt in get_byte_formats(names)]


def _parse_offsets(tokens: list[str]) -> list[str]:
    return [fmt.name for fmt in get_offset_formats(_split_names(tokens))]


def _parse_bool(tokens: list[str]) -> bool:
    if len(tokens) != 1:
        raise ValueError("expected one value")
    value = tokens[0].strip().lower()
    if value in ("1", "true", "on", "yes"):
        return True
    if value in ("0", "false", "off", "no"):
        return False
    raise ValueError("invalid boolean (use on/off)")


def _parse_int(tokens: list[str]) -> int:
    if len(tokens) != 1:
        raise ValueError("expected one value")
    try:
        return _int_with_prefix(tokens[0].strip())
    except ValueError as exc:
        raise ValueError(f"invalid integer: {tokens[0]}") from exc


def _int_with_prefix(text: str) -> int:
    sign = -1 if text.startswith("-") else 1
    digits = text[1:] if text[:1] in ("-", "+") else text
    if digits[:1] in ("-", "+"):
        raise ValueError(text)
    # C style octal: 010 == 8
    if len(digits) > 1 and digits[0] == "0" and digits[1].isdigit():
        return sign * int(digits, 8)
    return sign * int(digits, 0)


def _parse_palette(tokens: list[str]) -> str:
    if len(tokens) != 1:
        raise ValueError("expected one value")
    name = tokens[0].strip().lower()
    if name not in PALETTES:
        choices = ", ".join(sorted(PALETTES.keys()))
        raise ValueError(f"unknown palette (choices: {choices})")
    return name


def _fmt_bool(value: object) -> str:
    return "on" if bool(value) else "off"


def _fmt_list(value: object) -> str:
    if not isinstance(value, list):
        return ""
    return ",".join(value)


def _fmt_value(value: object) -> str:
    return str(value)


def _is_bool(value: object) -> bool:
    return isinstance(value, bool)


def _is_int(value: object, min_value: int | None = None) -> bool:
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    if min_value is None:
        return True
    return value >= min_value


def _is_int_nonneg(value: object) -> bool:
    return _is_int(value, min_value=0)


def _is_formats(value: object) -> bool:
    return isinstance(value, list) and bool(value)


def _is_offsets(value: object) -> bool:
    return isinstance(value, list) and len(value) <= 2


def _is_palette(value: object) -> bool:
    return isinstance(value, str) and value in PALETTES


_SPECS: list[SettingSpec] = [
    SettingSpec(
        key="format",
        attr="formats",
        type_name="list",
        parse=_parse_formats,
        format=_fmt_list,
        validate=_is_formats,
    ),
    SettingSpec(
        key="offset_format",
        attr="offsets",
        type_name="list",
        parse=_parse_offsets,
        format=_fmt_list,
        validate=_is_offsets,
    ),
    SettingSpec(
        key="header",
        attr="show_header",
        type_name="bool",
        parse=_parse_bool,
        format=_fmt_bool,
        validate=_is_bool,
    ),
    SettingSpec(
        key="color",
        attr="enable_color",
        type_name="bool",
        parse=_parse_bool,
        format=_fmt_bool,
        validate=_is_bool,
    ),
    SettingSpec(
        key="palette",
        attr="palette",
        type_name="palette",
        parse=_parse_palette,
        format=_fmt_value,
        validate=_is_palette,
    ),
    SettingSpec(
        key="limit",
        attr="limit",
        type_name="int",
        parse=_parse_int,
        format=_fmt_value,
        validate=_is_int_nonneg,
    ),
    SettingSpec(
        key="seek",
        attr="seek",
        type_name="int",
        parse=_parse_int,
        format=_fmt_value,
        validate=_is_int,
    ),
]
