"""Change collector: turns line handlers into a modified line sequence.

Handlers run strictly in ascending line order. Context is always built from
the lines as they were when the pass started, never from edits made earlier
in the same pass.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from line_rewriter.exceptions import InvalidVerdictError, MissingHandlerError
from line_rewriter.models import (
    BatchHandler,
    ChangeSet,
    LineContext,
    LineHandler,
    ModifiedLine,
    Neighbours,
    Replace,
    SingleLineHandler,
    Verdict,
)


def resolve_verdict(result: Any, current: ModifiedLine, line_number: int) -> ModifiedLine:
    """Map a handler return value onto the slot value for one line.

    Args:
        result: Whatever the handler returned for the line.
        current: The slot value before this handler ran.
        line_number: 1-based line number, used in error messages.

    Returns:
        ``current`` for keep, the replacement text, or ``Verdict.DELETE``
        (returned for both ``Verdict.DELETE`` and a literal ``False``).

    Raises:
        InvalidVerdictError: If ``result`` is not a recognised verdict.
    """
    if result is None or result is Verdict.KEEP:
        return current
    if result is Verdict.DELETE or result is False:
        return Verdict.DELETE
    if isinstance(result, Replace):
        return result.text
    if isinstance(result, str):
        return result
    raise InvalidVerdictError(
        f"Handler returned {type(result).__name__} for line {line_number}; "
        "expected str, Replace, Verdict, False or None"
    )


def resolve_handler(handler: Any) -> LineHandler:
    """Resolve a handler argument into its tagged variant once, up front."""
    if isinstance(handler, BatchHandler):
        if handler.window_size <= 1:
            return SingleLineHandler(fn=_single_from_batch(handler.fn), name=handler.name)
        return handler
    if isinstance(handler, SingleLineHandler):
        return handler
    if callable(handler):
        return SingleLineHandler(fn=handler, name=getattr(handler, "__name__", None))
    raise MissingHandlerError("[ERROR] no callback function given!")


def resolve_handlers(handlers: Any) -> list[LineHandler]:
    """Resolve one handler or a sequence of handlers into a handler chain.

    Raises:
        MissingHandlerError: If nothing callable was given.
    """
    if handlers is None:
        raise MissingHandlerError("[ERROR] no callback function given!")
    if isinstance(handlers, (list, tuple)):
        if not handlers:
            raise MissingHandlerError("[ERROR] no callback function given!")
        return [resolve_handler(h) for h in handlers]
    return [resolve_handler(handlers)]


def _single_from_batch(fn: Callable) -> Callable:
    """Adapt a one-line batch function to the single-line protocol."""

    def _call(line: str, line_number: int, context: LineContext) -> Any:
        window = {line_number: line}
        result = fn(window, line_number, context)
        window = result if isinstance(result, Mapping) else window
        return window.get(line_number)

    return _call


def build_context(
    lines: Sequence[ModifiedLine],
    live_indices: list[int],
    position: int,
    namespace: Any = None,
    file_path: str | None = None,
) -> LineContext:
    """Build the context for ``live_indices[position]``.

    Deleted slots are not part of ``live_indices`` and therefore never appear
    as neighbours.
    """
    previous_lines = [lines[i] for i in live_indices[:position]]
    next_lines = [lines[i] for i in live_indices[position + 1:]]
    return LineContext(
        line_number=live_indices[position] + 1,
        previous=Neighbours(
            line=previous_lines[-1] if previous_lines else None,
            lines=previous_lines,
        ),
        next=Neighbours(
            line=next_lines[0] if next_lines else None,
            lines=next_lines,
        ),
        namespace=namespace,
        file_path=file_path,
    )


def _run_single(
    handler: SingleLineHandler,
    lines: list[ModifiedLine],
    file_path: str | None,
) -> list[ModifiedLine]:
    live_indices = [i for i, line in enumerate(lines) if line is not Verdict.DELETE]
    namespace: dict[str, Any] = {}
    modified = list(lines)

    for position, index in enumerate(live_indices):
        context = build_context(lines, live_indices, position, namespace, file_path)
        result = handler.fn(lines[index], index + 1, context)
        modified[index] = resolve_verdict(result, lines[index], index + 1)

    return modified


def _select_window(
    handler: BatchHandler,
    pass_input: list[ModifiedLine],
    modified: list[ModifiedLine],
    index: int,
) -> dict[int, str]:
    """Pick up to ``window_size`` lines starting at ``index``.

    Deleted lines, and with ``hide_changed_in_window`` lines changed earlier
    in this pass, are skipped and the window grows past them.
    """
    window: dict[int, str] = {}
    wanted = handler.window_size
    offset = 0
    while offset < wanted and index + offset < len(modified):
        slot = modified[index + offset]
        skip = slot is Verdict.DELETE or (
            handler.hide_changed_in_window and slot != pass_input[index + offset]
        )
        if skip:
            wanted += 1
        else:
            window[index + offset + 1] = slot
        offset += 1
    return window


def _run_batch(
    handler: BatchHandler,
    lines: list[ModifiedLine],
    file_path: str | None,
) -> list[ModifiedLine]:
    live_indices = [i for i, line in enumerate(lines) if line is not Verdict.DELETE]
    live_position = {index: position for position, index in enumerate(live_indices)}
    namespace: dict[str, Any] = {}
    modified = list(lines)

    for index in range(len(lines)):
        window = _select_window(handler, lines, modified, index)
        if not window:
            continue

        anchor = live_position.get(index)
        if anchor is None:
            # Window starts on a deleted slot; anchor context on its first line
            anchor = live_position[next(iter(window)) - 1]
        context = build_context(lines, live_indices, anchor, namespace, file_path)

        result = handler.fn(window, index + 1, context)
        updates = result if isinstance(result, Mapping) else window
        for line_number, value in updates.items():
            if not 1 <= line_number <= len(modified):
                raise InvalidVerdictError(
                    f"Batch handler returned line {line_number} outside 1..{len(modified)}"
                )
            slot = line_number - 1
            if modified[slot] is Verdict.DELETE:
                continue
            modified[slot] = resolve_verdict(value, modified[slot], line_number)

    return modified


def collect_changes(
    lines: Sequence[ModifiedLine],
    handler: Any,
    file_path: str | None = None,
) -> list[ModifiedLine]:
    """Run one handler over ``lines`` and return the modified sequence.

    Args:
        lines: Input slots. Deleted slots are skipped and kept deleted.
        handler: A callable, ``SingleLineHandler`` or ``BatchHandler``.
        file_path: Passed through to ``LineContext.file_path``.

    Returns:
        A new list of the same length as ``lines``.
    """
    resolved = resolve_handler(handler)
    lines = list(lines)
    if isinstance(resolved, BatchHandler):
        return _run_batch(resolved, lines, file_path)
    return _run_single(resolved, lines, file_path)


def build_change_set(
    original_lines: Sequence[str],
    handlers: Any,
    file_path: str | None = None,
) -> ChangeSet:
    """Run a handler chain and pair its result with the untouched original.

    Each handler is one pass over the output of the previous pass.
    """
    modified: list[ModifiedLine] = list(original_lines)
    for handler in resolve_handlers(handlers):
        modified = collect_changes(modified, handler, file_path)
    return ChangeSet(original_lines=list(original_lines), modified_lines=modified)
