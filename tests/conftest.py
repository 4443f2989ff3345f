from pathlib import Path

import pytest

from line_rewriter.models import Verdict

A = "A"
B = "B"
C = "C"
D = "D"

N = "\n"
T = "\t"

TAB = " ▸  "
SPACE = "·"

TEXT_FILE = "ipsum.txt"
CONTENT = A + N + B + N + C

REPLACING_FILE_LOG = f"[INFO] Replacing file: '{TEXT_FILE}'" + N
NOTHING_CHANGED_IN_FILE_LOG = f"[INFO] Nothing changed in file: '{TEXT_FILE}'" + N
PREVIEW_FILE_LOG = f"[INFO] Preview: '{TEXT_FILE}'" + N


def lookup_handler(lines_to_change: dict):
    """Handler replacing lines found in ``lines_to_change``; ``0`` means delete."""

    def _handler(line, line_number, context):
        if line in lines_to_change:
            change = lines_to_change[line]
            return Verdict.DELETE if change == 0 else change
        return None

    return _handler


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside tmp_path so log lines show the short relative file name."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def text_file(workdir):
    path = workdir / TEXT_FILE
    path.write_text(CONTENT, encoding="utf-8")
    return path


def read_text_file(path: Path | str = TEXT_FILE) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()
