"""Models describing one file pass: line context, change set and outcome."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from line_rewriter.exceptions import ChangeSetMismatchError
from line_rewriter.models.verdict_models import ModifiedLine, Verdict


class Neighbours(BaseModel):
    """Lines on one side of the current line, as they were before the pass."""

    model_config = ConfigDict(frozen=True)

    line: str | None = None  # Adjacent line, None at the file boundary
    lines: list[str] = Field(default_factory=list)


class LineContext(BaseModel):
    """Read-only view handed to a handler together with the current line."""

    model_config = ConfigDict(frozen=True)

    line_number: int  # 1-based
    previous: Neighbours = Field(default_factory=Neighbours)
    next: Neighbours = Field(default_factory=Neighbours)
    namespace: Any = None  # Shared by reference across one pass
    file_path: str | None = None


class ChangeSet(BaseModel):
    """Aligned original and modified line sequences for one file."""

    model_config = ConfigDict(frozen=True)

    original_lines: list[str]
    modified_lines: list[ModifiedLine]

    @model_validator(mode="after")
    def _check_alignment(self) -> "ChangeSet":
        if len(self.original_lines) != len(self.modified_lines):
            raise ChangeSetMismatchError(
                f"ChangeSet misaligned: {len(self.original_lines)} original lines, "
                f"{len(self.modified_lines)} modified lines"
            )
        return self

    def __len__(self) -> int:
        return len(self.original_lines)

    def is_deleted(self, index: int) -> bool:
        return self.modified_lines[index] is Verdict.DELETE

    def is_modified(self, index: int) -> bool:
        """True for replaced lines whose text differs from the original."""
        modified = self.modified_lines[index]
        return modified is not Verdict.DELETE and modified != self.original_lines[index]

    def changed_indices(self) -> list[int]:
        """Indices of lines that are either deleted or modified."""
        return [
            i for i in range(len(self))
            if self.is_deleted(i) or self.is_modified(i)
        ]


class FileChangeResult(BaseModel):
    """Outcome of processing a single file."""

    model_config = ConfigDict(frozen=False)

    file_path: str
    changed: bool
    written: bool = False  # True only when the file on disk was replaced
    original_content: str
    final_content: str
    preview: str | None = None  # Rendered preview, set in preview mode
