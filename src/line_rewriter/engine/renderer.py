"""Diff renderer: final file content, annotated preview and unified diff.

Preview layout, one gutter per rendered line::

    <number><marker><glyph><text>

``<number>`` is left-padded to the width of the original line count,
``<marker>`` is one of ``"   "``, ``" M "``, ``" D "`` and every glyph is three
characters wide, so the glyph column lines up across the whole preview.
Marker and glyph are written back to back: a replacement row reads
``"  M └▷ D"`` with one space between ``M`` and ``└▷``, not two.
"""

import difflib

from line_rewriter.engine.lines import NEWLINE, join_lines, leading_whitespace_length
from line_rewriter.exceptions import ChangeSetMismatchError
from line_rewriter.models import ChangeSet, PreviewOptions

SPACE = " "
SPACE_GLYPH = "·"
TAB_GLYPH = " ▸  "

MARKER_NONE = "   "
MARKER_MODIFIED = " M "
MARKER_DELETED = " D "

LINE_UNCHANGED = "│  "
LINE_CHANGED = "┤  "
ROUTE_START = "┌  "
ROUTE_END = "└▷ "


def _ensure_aligned(change_set: ChangeSet) -> None:
    # Lists inside a frozen model can still be mutated in place
    if len(change_set.original_lines) != len(change_set.modified_lines):
        raise ChangeSetMismatchError(
            f"ChangeSet misaligned: {len(change_set.original_lines)} original lines, "
            f"{len(change_set.modified_lines)} modified lines"
        )


def render_final_content(change_set: ChangeSet) -> str:
    """Content the file becomes: deletions dropped, replacements substituted."""
    _ensure_aligned(change_set)
    return join_lines(change_set.modified_lines)


def show_whitespace(text: str) -> str:
    """Replace spaces with ``·`` and tabs with `` ▸  ``."""
    return text.replace(SPACE, SPACE_GLYPH).replace("\t", TAB_GLYPH)


def pad_line_number(line_number: int, line_count: int) -> str:
    return str(line_number).rjust(len(str(line_count)), SPACE)


def compute_indentation_trims(change_set: ChangeSet) -> dict[int, int]:
    """Measure how many leading characters to strip per modified line.

    A modified line is trimmed by the smallest leading-whitespace run among
    its original and every physical line of its replacement. When the line
    right before it was trimmed too, that trim also caps this one, so a block
    of edits keeps its relative indentation. Lines are measured front to
    back; a later line never changes the trim of an earlier one.

    Returns:
        Mapping of 0-based index to trim amount, modified lines only.
    """
    trims: dict[int, int] = {}

    for index in range(len(change_set)):
        if not change_set.is_modified(index):
            continue
        candidates = [change_set.original_lines[index]]
        candidates.extend(change_set.modified_lines[index].split(NEWLINE))
        amount = min(leading_whitespace_length(line) for line in candidates)
        if index - 1 in trims:
            amount = min(amount, trims[index - 1])
        trims[index] = amount

    return trims


def _render_unchanged(number: str, line: str, options: PreviewOptions) -> str:
    text = show_whitespace(line) if options.show_spaces else line
    return number + MARKER_NONE + LINE_UNCHANGED + text


def _render_deleted(number: str, line: str, options: PreviewOptions) -> str:
    text = show_whitespace(line) if options.show_spaces else line
    return number + MARKER_DELETED + LINE_CHANGED + text


def _render_modified(
    number: str,
    original: str,
    replacement: str,
    trim: int,
    options: PreviewOptions,
) -> str:
    original = original[trim:]
    physical_lines = [line[trim:] for line in replacement.split(NEWLINE)]
    if options.show_spaces:
        original = show_whitespace(original)
        physical_lines = [show_whitespace(line) for line in physical_lines]

    blank_gutter = SPACE * len(number)
    if options.hide_original_lines:
        head = ""
        gutter = number
        indicator = LINE_CHANGED
    else:
        head = number + MARKER_NONE + ROUTE_START + original + NEWLINE
        gutter = blank_gutter
        indicator = ROUTE_END

    rendered = [gutter + MARKER_MODIFIED + indicator + physical_lines[0]]
    for line in physical_lines[1:]:
        rendered.append(blank_gutter + MARKER_MODIFIED + indicator + line)
    return head + NEWLINE.join(rendered)


def render_preview(change_set: ChangeSet, options: PreviewOptions | None = None) -> str:
    """Render the annotated preview of a change set.

    Args:
        change_set: Original and modified lines of one file.
        options: Display switches. Defaults to ``PreviewOptions()``.

    Returns:
        Preview lines joined with ``\\n``, without a trailing newline. Empty
        when nothing is visible.

    Raises:
        ChangeSetMismatchError: If the change set is misaligned.
    """
    _ensure_aligned(change_set)
    options = options or PreviewOptions()
    trims = compute_indentation_trims(change_set) if options.trims_indentation else {}
    line_count = len(change_set)

    blocks: list[str] = []
    for index, original in enumerate(change_set.original_lines):
        number = pad_line_number(index + 1, line_count)
        if change_set.is_deleted(index):
            if not options.hide_deleted_lines:
                blocks.append(_render_deleted(number, original, options))
        elif change_set.is_modified(index):
            blocks.append(_render_modified(
                number,
                original,
                change_set.modified_lines[index],
                trims.get(index, 0),
                options,
            ))
        elif options.show_unchanged_lines:
            blocks.append(_render_unchanged(number, original, options))

    return NEWLINE.join(blocks)


def render_unified_diff(
    file_path: str,
    original_content: str,
    modified_content: str,
) -> str:
    """Generate a git-style unified diff of the whole file.

    Args:
        file_path: Path shown in the ``a/`` and ``b/`` headers.
        original_content: File content before the change.
        modified_content: File content after the change.

    Returns:
        Unified diff text. Empty string if nothing changed.
    """
    if original_content == modified_content:
        return ""

    diff_gen = difflib.unified_diff(
        split_for_diff(original_content),
        split_for_diff(modified_content),
        fromfile=f"a/{file_path}",
        tofile=f"b/{file_path}",
        lineterm="",
    )
    return NEWLINE.join(diff_gen)


def split_for_diff(content: str) -> list[str]:
    # Empty content has no lines, not one empty line
    return content.split(NEWLINE) if content else []
