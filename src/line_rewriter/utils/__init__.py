"""Utilities for the line rewriter."""

from line_rewriter.utils.files import is_valid_file, list_files, read_text, write_text
from line_rewriter.utils.text import line_indent, replace_between, replace_whitespaces

__all__ = [
    "is_valid_file",
    "line_indent",
    "list_files",
    "read_text",
    "replace_between",
    "replace_whitespaces",
    "write_text",
]
