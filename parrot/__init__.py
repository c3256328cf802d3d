"""
Parrot speed - flight speed calculation for the three known parrot variants.

This package contains:
- core: Framework-agnostic domain models and the speed calculation
- config: Environment-driven settings and logging setup
"""

from .core import (
    BASE_SPEED,
    FIXED_BASE_SPEED,
    LOAD_FACTOR,
    Parrot,
    ParrotConfig,
    ParrotError,
    ParrotVariant,
    SpeedCalculator,
    UnknownVariantError,
    speed,
)

__version__ = "0.1.0"

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
