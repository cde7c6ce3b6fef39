"""Exceptions raised by jsoninfer."""

from typing import Optional


class JsonInferError(Exception):
    """Base exception for all jsoninfer errors."""
    pass


class InvalidOptionsError(JsonInferError, ValueError):
    """Inference options are invalid."""
    pass


class RecursionTooDeepError(JsonInferError, ValueError):
    """A sample is nested deeper than the configured limit."""

    def __init__(self, message: str, depth: Optional[int], max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(message)


class UnsupportedValueError(JsonInferError, TypeError):
    """A sample holds a Python object that is not a JSON value."""

    def __init__(self, message: str, value_type: type):
        self.value_type = value_type
        super().__init__(message)
