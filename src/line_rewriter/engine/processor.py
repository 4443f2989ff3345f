"""Top-level file processing: validate, collect, render, write or preview."""

from typing import Any

from line_rewriter.engine.collector import build_change_set, resolve_handlers
from line_rewriter.engine.lines import NEWLINE, split_lines
from line_rewriter.engine.renderer import render_final_content, render_preview, render_unified_diff
from line_rewriter.exceptions import InvalidFileError
from line_rewriter.models import FileChangeResult, ProcessOptions
from line_rewriter.utils.files import is_valid_file, read_text, write_text


def _coerce_options(options: ProcessOptions | dict | None) -> ProcessOptions:
    if options is None:
        return ProcessOptions()
    if isinstance(options, ProcessOptions):
        return options
    return ProcessOptions.model_validate(options)


def log_preview(changed: bool, file_path: str, preview: str) -> None:
    if changed:
        print(f"[INFO] Preview: '{file_path}'{NEWLINE}{NEWLINE}{preview}{NEWLINE}")
    else:
        print(f"[INFO] Nothing changed in file: '{file_path}'")


def log_file_change(changed: bool, file_path: str) -> None:
    if changed:
        print(f"[INFO] Replacing file: '{file_path}'")
    else:
        print(f"[INFO] Nothing changed in file: '{file_path}'")


def process_file(
    file_path: str,
    handler: Any,
    options: ProcessOptions | dict | None = None,
) -> FileChangeResult:
    """Apply a line handler (or handler chain) to one file.

    Flow:
    1. Validate the path and the handler before touching the file
    2. Read and split the content on ``\\n``
    3. Run every handler pass over the lines
    4. Render the final content and compare it to the original
    5. Write once if changed and not previewing, otherwise render the preview
       (annotated, or a unified diff with ``unified_diff``)
    6. Log exactly one outcome

    Args:
        file_path: File to rewrite.
        handler: A callable ``(line, line_number, context)``, a
            ``SingleLineHandler``/``BatchHandler``, or a list of those.
        options: ``ProcessOptions`` or a dict of its fields.

    Returns:
        FileChangeResult describing what happened.

    Raises:
        InvalidFileError: If ``file_path`` is not an existing regular file.
        MissingHandlerError: If no usable handler is given.
        OSError: If reading or writing fails. Never wrapped.
    """
    if not is_valid_file(file_path):
        raise InvalidFileError(f"[ERROR] Not a valid file: '{file_path}'!")
    handlers = resolve_handlers(handler)
    options = _coerce_options(options)

    original_content = read_text(file_path, options.encoding)
    change_set = build_change_set(split_lines(original_content), handlers, file_path)
    final_content = render_final_content(change_set)
    changed = final_content != original_content

    result = FileChangeResult(
        file_path=file_path,
        changed=changed,
        original_content=original_content,
        final_content=final_content,
    )

    if options.preview and options.unified_diff:
        result.preview = render_unified_diff(file_path, original_content, final_content)
    elif options.preview:
        result.preview = render_preview(change_set, options.preview_options)
    elif changed:
        write_text(file_path, final_content, options.encoding)
        result.written = True

    if not changed and options.hide_log_of_unchanged_file:
        return result

    if options.preview:
        log_preview(changed, file_path, result.preview)
    else:
        log_file_change(changed, file_path)

    return result
