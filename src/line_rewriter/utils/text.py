"""Small string helpers for writing line handlers."""

import re

_WHITESPACE = re.compile(r"\s")


def line_indent(line: str) -> str:
    """Indentation of ``line`` expressed as spaces (one per leading whitespace char)."""
    return " " * (len(line) - len(line.lstrip()))


def replace_whitespaces(text: str, replacement: str = "") -> str:
    """Replace every whitespace character, newlines included."""
    return _WHITESPACE.sub(lambda _: replacement, text)


def replace_between(text: str, start: str, end: str, replacement: str = "") -> str:
    """Replace what lies between the first ``start`` and the next ``end``.

    The markers themselves are kept. ``text`` is returned unchanged when
    either marker is missing.
    """
    start_index = text.find(start)
    if start_index < 0:
        return text
    end_index = text.find(end, start_index + len(start))
    if end_index < 0:
        return text
    return text[:start_index + len(start)] + replacement + text[end_index:]
