"""Shared types, errors, constants, and logging setup."""

from .types import (
    Exact, Approximate, OverResult,
    RoundingRule, KeyframeType, CircularOrientation, CrossDirection,
)
from .errors import KernelError, DivisionByZero, CorruptData
from .log import setup_logging
