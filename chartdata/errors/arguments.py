"""
Argument error raised when a caller violates an operation's contract.

Covers absent required inputs, indices outside the valid range and
malformed bound ordering.
"""

from typing import Any, Dict, Optional


class InvalidArgumentError(ValueError):
    """An argument is absent, out of range or otherwise unacceptable."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.argument = argument
        self.value = value
        self.context = context or {}
        self.recoverable = False


def require(value: Any, argument: str) -> Any:
    """Return ``value`` unchanged, or raise if it is ``None``."""
    if value is None:
        raise InvalidArgumentError(f"Null '{argument}' argument", argument=argument)
    return value


def check_index(index: int, size: int, argument: str) -> int:
    """Validate a zero-based index against ``[0, size)``."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError(
            f"'{argument}' must be an integer index, got {index!r}",
            argument=argument,
            value=index,
        )
    if index < 0 or index >= size:
        raise InvalidArgumentError(
            f"'{argument}' index {index} out of range [0, {size})",
            argument=argument,
            value=index,
            context={"size": size},
        )
    return index
