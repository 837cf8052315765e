from __future__ import annotations

from typing import Any, Dict, Mapping


class DotconfError(Exception):
    """Base exception for dotconf."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}


class InvalidArgumentError(DotconfError, ValueError):
    """Raised when a public operation is called with a malformed argument."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        DotconfError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


def require_key(key: Any, *, operation: str) -> str:
    """Return ``key`` unchanged when it is a usable path string."""
    if not isinstance(key, str):
        raise InvalidArgumentError(
            f"Expected `key` to be of type `str`, got {type(key).__name__}",
            context={"operation": operation, "key_type": type(key).__name__},
        )
    if key == "":
        raise InvalidArgumentError(
            "Expected `key` to be a non-empty path",
            context={"operation": operation},
        )
    return key


__all__ = [
    "DotconfError",
    "InvalidArgumentError",
    "require_key",
]
