from __future__ import annotations

from typing import Dict, List

from line_rewriter.exceptions import UnknownHandlerError
from line_rewriter.models import LineHandler


class HandlerRegistry:
    _instance = None
    _handlers: Dict[str, LineHandler] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "HandlerRegistry":
        return cls()

    def register(self, handler: LineHandler, name: str | None = None) -> None:
        key = name or handler.name
        if not key:
            raise ValueError("Handler needs a name to be registered")
        if self.has_handler(key):
            print(f"[HandlerRegistry] Replacing handler '{self._normalize_name(key)}'")
        self._handlers[self._normalize_name(key)] = handler

    def has_handler(self, name: str) -> bool:
        return self._normalize_name(name) in self._handlers

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def get(self, name: str) -> LineHandler:
        try:
            return self._handlers[self._normalize_name(name)]
        except KeyError:
            raise UnknownHandlerError(
                f"Unknown handler: '{name}'. Available: {', '.join(self.names())}"
            ) from None

    def get_many(self, names: List[str]) -> List[LineHandler]:
        """Look up several handlers, reporting every unknown name at once."""
        unknown = [name for name in names if not self.has_handler(name)]
        if unknown:
            raise UnknownHandlerError(
                f"Unknown handler(s): {', '.join(unknown)}. "
                f"Available: {', '.join(self.names())}"
            )
        return [self.get(name) for name in names]

    @staticmethod
    def _normalize_name(value: str) -> str:
        return value.strip().replace("_", "-").lower()


registry = HandlerRegistry.get_instance()
