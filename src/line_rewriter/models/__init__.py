"""Data models for the line rewriter."""

from line_rewriter.models.change_models import (
    ChangeSet,
    FileChangeResult,
    LineContext,
    Neighbours,
)
from line_rewriter.models.handler_models import BatchHandler, LineHandler, SingleLineHandler
from line_rewriter.models.options_models import DEFAULT_ENCODING, PreviewOptions, ProcessOptions
from line_rewriter.models.verdict_models import LineVerdict, ModifiedLine, Replace, Verdict

__all__ = [
    "BatchHandler",
    "ChangeSet",
    "DEFAULT_ENCODING",
    "FileChangeResult",
    "LineContext",
    "LineHandler",
    "LineVerdict",
    "ModifiedLine",
    "Neighbours",
    "PreviewOptions",
    "ProcessOptions",
    "Replace",
    "SingleLineHandler",
    "Verdict",
]
