from __future__ import annotations


class WbrError(Exception):
    """Base class for every failure that ends a run with exit status 1."""


class ArgumentError(WbrError):
    pass


class InputNotFoundError(WbrError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Input file does not exist: {path}")
        self.path = path


class DecodeError(WbrError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load image: {path}")
        self.path = path
        self.reason = reason


class EncodeError(WbrError):
    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"Failed to write output image: {path}")
        self.path = path
        self.reason = reason
