"""Built-in line handlers."""

import re

from line_rewriter.models import BatchHandler, LineContext, SingleLineHandler, Verdict

TAB_WIDTH = 4

_TRAILING_SPACES = re.compile(r" *$")

UMLAUT_REPLACEMENTS = {
    "Ü": "Ue",
    "ü": "ue",
    "Ö": "Oe",
    "ö": "oe",
    "Ä": "Ae",
    "ä": "ae",
    "ß": "ss",
}


def remove_comments(line: str, line_number: int, context: LineContext):
    """Delete lines that are ``//`` comments."""
    if line.strip().startswith("//"):
        return Verdict.DELETE
    return None


def remove_empty_lines(line: str, line_number: int, context: LineContext):
    """Delete lines containing only whitespace."""
    if not line.strip():
        return Verdict.DELETE
    return None


def replace_tabs_with_spaces(line: str, line_number: int, context: LineContext) -> str:
    return line.replace("\t", " " * TAB_WIDTH)


def remove_trailing_spaces(line: str, line_number: int, context: LineContext) -> str:
    return _TRAILING_SPACES.sub("", line, count=1)


def replace_umlauts(line: str, line_number: int, context: LineContext) -> str:
    """Transliterate German umlauts and ß to ASCII."""
    for umlaut, replacement in UMLAUT_REPLACEMENTS.items():
        line = line.replace(umlaut, replacement)
    return line


def _collapse_empty_pair(window: dict[int, str], line_number: int, context: LineContext):
    numbers = list(window)
    if len(numbers) > 1:
        first, second = numbers[0], numbers[1]
        if not window[first].strip() and not window[second].strip():
            window[first] = Verdict.DELETE
    return window


REMOVE_COMMENTS = SingleLineHandler(fn=remove_comments, name="remove-comments")
REMOVE_EMPTY_LINES = SingleLineHandler(fn=remove_empty_lines, name="remove-empty-lines")
REPLACE_TABS_WITH_SPACES = SingleLineHandler(
    fn=replace_tabs_with_spaces, name="replace-tabs-with-spaces"
)
REMOVE_TRAILING_SPACES = SingleLineHandler(
    fn=remove_trailing_spaces, name="remove-trailing-spaces"
)
REPLACE_UMLAUTS = SingleLineHandler(fn=replace_umlauts, name="replace-umlauts")

# Keeps one empty line out of every run of empty lines
REMOVE_DUPLICATE_EMPTY_LINES = BatchHandler(
    fn=_collapse_empty_pair,
    window_size=2,
    hide_changed_in_window=True,
    name="remove-duplicate-empty-lines",
)

PREDEFINED_HANDLERS = [
    REMOVE_COMMENTS,
    REMOVE_DUPLICATE_EMPTY_LINES,
    REMOVE_EMPTY_LINES,
    REPLACE_TABS_WITH_SPACES,
    REMOVE_TRAILING_SPACES,
    REPLACE_UMLAUTS,
]
