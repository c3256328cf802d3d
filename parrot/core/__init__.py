"""
Core parrot logic.

This module is framework-agnostic - it doesn't read the environment or
configure logging. The speed rules can be tested in isolation.
"""

from .errors import ParrotError, UnknownVariantError
from .models import Parrot, ParrotConfig, ParrotVariant
from .speed import (
    BASE_SPEED,
    FIXED_BASE_SPEED,
    LOAD_FACTOR,
    SpeedCalculator,
    speed,
)

__all__ = [
    "BASE_SPEED",
    "FIXED_BASE_SPEED",
    "LOAD_FACTOR",
    "Parrot",
    "ParrotConfig",
    "ParrotError",
    "ParrotVariant",
    "SpeedCalculator",
    "UnknownVariantError",
    "speed",
]
