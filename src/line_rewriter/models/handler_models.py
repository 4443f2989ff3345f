"""Handler variants accepted by the change collector."""

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field


class SingleLineHandler(BaseModel):
    """Handler called once per line as ``fn(line, line_number, context)``."""

    model_config = ConfigDict(frozen=True)

    fn: Callable
    name: str | None = None


class BatchHandler(BaseModel):
    """Handler called with a window of consecutive lines.

    ``fn(window, line_number, context)`` receives ``window`` as a dict of
    1-based line number to current line text. It may edit the dict in place
    or return a mapping; every entry is applied as a verdict for that line.
    """

    model_config = ConfigDict(frozen=True)

    fn: Callable
    window_size: int = Field(default=2, ge=1)
    hide_changed_in_window: bool = False  # Skip lines already changed in this pass
    name: str | None = None


LineHandler = SingleLineHandler | BatchHandler
