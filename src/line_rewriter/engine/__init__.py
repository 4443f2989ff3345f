"""Change collection, diff rendering and file processing."""

from line_rewriter.engine.collector import (
    build_change_set,
    collect_changes,
    resolve_handler,
    resolve_handlers,
    resolve_verdict,
)
from line_rewriter.engine.lines import join_lines, split_lines
from line_rewriter.engine.processor import process_file
from line_rewriter.engine.renderer import (
    compute_indentation_trims,
    render_final_content,
    render_preview,
    render_unified_diff,
    show_whitespace,
)

__all__ = [
    "build_change_set",
    "collect_changes",
    "compute_indentation_trims",
    "join_lines",
    "process_file",
    "render_final_content",
    "render_preview",
    "render_unified_diff",
    "resolve_handler",
    "resolve_handlers",
    "resolve_verdict",
    "show_whitespace",
    "split_lines",
]
