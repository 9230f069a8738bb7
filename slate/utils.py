from __future__ import annotations


def parse_int(value: object, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def to_posix(path: object) -> str:
    return str(path).replace("\\", "/")


def strip_suffix_ci(text: str, suffix: str) -> str:
    if text.lower().endswith(suffix.lower()):
        return text[: len(text) - len(suffix)]
    return text
