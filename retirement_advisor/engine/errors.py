"""Errors raised by the calculation engine."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when an engine function receives a value outside its domain."""


class UnsupportedStrategyError(InvalidArgumentError):
    """Raised when a withdrawal strategy has no executable simulation."""
