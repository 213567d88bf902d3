"""Exceptions raised while marshaling ADM1 state vectors."""

from typing import Optional


class StateVectorError(Exception):
    """Base exception for state vector handling."""


class SchemaError(StateVectorError, ValueError):
    """Array is too short to match any known state vector layout."""

    def __init__(self, length: int, minimum: int, path: Optional[str] = None):
        self.length = length
        self.minimum = minimum
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(
            f"State vector has {length} values{where}; "
            f"at least {minimum} are required"
        )


class ParseError(StateVectorError, ValueError):
    """A persisted token is not a floating-point literal."""

    def __init__(self, token: str, index: int, path: Optional[str] = None):
        self.token = token
        self.index = index
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(
            f"Cannot parse token {token!r} at position {index}{where} as a float"
        )


__all__ = [
    "StateVectorError",
    "SchemaError",
    "ParseError",
]
