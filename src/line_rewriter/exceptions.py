"""Exceptions for line rewriting operations.

I/O failures are not wrapped: ``FileNotFoundError``, ``PermissionError`` and
friends reach the caller as raised by the standard library.
"""


class LineRewriterError(Exception):
    """Base exception for all line rewriting operations."""


class InvalidFileError(LineRewriterError):
    """Raised when the target path is missing or is not a regular file."""


class MissingHandlerError(LineRewriterError):
    """Raised when no usable line handler is given."""


class InvalidVerdictError(LineRewriterError):
    """Raised when a handler returns something that is not a line verdict."""


class ChangeSetMismatchError(LineRewriterError):
    """Raised when original and modified line sequences differ in length."""


class UnknownHandlerError(LineRewriterError):
    """Raised when a predefined handler name is not registered."""
