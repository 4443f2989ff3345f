"""Predefined line handlers and the registry that names them."""

from line_rewriter.handlers.predefined import (
    PREDEFINED_HANDLERS,
    REMOVE_COMMENTS,
    REMOVE_DUPLICATE_EMPTY_LINES,
    REMOVE_EMPTY_LINES,
    REMOVE_TRAILING_SPACES,
    REPLACE_TABS_WITH_SPACES,
    REPLACE_UMLAUTS,
)
from line_rewriter.handlers.registry import HandlerRegistry, registry

for _handler in PREDEFINED_HANDLERS:
    if not registry.has_handler(_handler.name):
        registry.register(_handler)

__all__ = [
    "HandlerRegistry",
    "PREDEFINED_HANDLERS",
    "REMOVE_COMMENTS",
    "REMOVE_DUPLICATE_EMPTY_LINES",
    "REMOVE_EMPTY_LINES",
    "REMOVE_TRAILING_SPACES",
    "REPLACE_TABS_WITH_SPACES",
    "REPLACE_UMLAUTS",
    "registry",
]
