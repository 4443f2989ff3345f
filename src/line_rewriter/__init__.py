"""Line-oriented file rewriting with an annotated diff preview."""

from line_rewriter.engine import (
    build_change_set,
    collect_changes,
    process_file,
    render_final_content,
    render_preview,
    render_unified_diff,
)
from line_rewriter.exceptions import (
    ChangeSetMismatchError,
    InvalidFileError,
    InvalidVerdictError,
    LineRewriterError,
    MissingHandlerError,
    UnknownHandlerError,
)
from line_rewriter.models import (
    BatchHandler,
    ChangeSet,
    FileChangeResult,
    LineContext,
    PreviewOptions,
    ProcessOptions,
    Replace,
    SingleLineHandler,
    Verdict,
)

__version__ = "0.1.0"

__all__ = [
    "BatchHandler",
    "ChangeSet",
    "ChangeSetMismatchError",
    "FileChangeResult",
    "InvalidFileError",
    "InvalidVerdictError",
    "LineContext",
    "LineRewriterError",
    "MissingHandlerError",
    "PreviewOptions",
    "ProcessOptions",
    "Replace",
    "SingleLineHandler",
    "UnknownHandlerError",
    "Verdict",
    "build_change_set",
    "collect_changes",
    "process_file",
    "render_final_content",
    "render_preview",
    "render_unified_diff",
]
