"""Error types raised by loguniform."""

from __future__ import annotations


class InvalidParameter(ValueError):
    """
    Raised when a sampling parameter is outside its valid domain.

    Attributes:
        parameter: Name of the offending parameter ("min", "max", "count",
            or "seed").
    """

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter
