"""Verdict types returned by line handlers."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Verdict(Enum):
    """Non-textual outcome of a handler call.

    Not a ``str`` mixin, so ``Verdict.DELETE`` never equals a replacement
    string.
    """

    KEEP = "keep"
    DELETE = "delete"


class Replace(BaseModel):
    """Explicit replacement for a line. ``text`` may contain newlines."""

    model_config = ConfigDict(frozen=True)

    text: str


# What a single slot of the modified sequence may hold.
ModifiedLine = str | Verdict

# What a handler may return for one line. ``False`` deletes, like Verdict.DELETE.
LineVerdict = str | Replace | Verdict | Literal[False] | None
