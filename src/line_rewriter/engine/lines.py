"""Line splitting and joining primitives.

``\\n`` is the only separator. Carriage returns stay part of the line.
"""

from line_rewriter.models import ModifiedLine, Verdict

NEWLINE = "\n"


def split_lines(content: str) -> list[str]:
    """Split text into lines. Empty text yields a single empty line."""
    return content.split(NEWLINE)


def join_lines(lines: list[ModifiedLine]) -> str:
    """Join lines with ``\\n``, dropping deleted slots."""
    return NEWLINE.join(line for line in lines if line is not Verdict.DELETE)


def leading_whitespace_length(line: str) -> int:
    """Number of whitespace characters before the first non-whitespace one."""
    return len(line) - len(line.lstrip())
