"""
Parrot speed calculation.

One function with a branch per variant. The rules:
- European parrots always fly at the base speed.
- African parrots lose LOAD_FACTOR per coconut, never going below zero.
- Norwegian Blues can't fly when nailed. Otherwise speed scales with
  voltage, capped at FIXED_BASE_SPEED.

The calculation is pure. Nothing is retained between calls, so a single
calculator can be shared freely.
"""

import logging
from typing import Union

from .errors import UnknownVariantError
from .models import Parrot, ParrotConfig, ParrotVariant

logger = logging.getLogger(__name__)

BASE_SPEED = 12.0
LOAD_FACTOR = 9.0
FIXED_BASE_SPEED = 24.0


class SpeedCalculator:
    """Maps a parrot variant and its config to a flight speed."""

    def speed(
        self,
        variant: Union[ParrotVariant, str],
        config: ParrotConfig,
    ) -> float:
        """
        Calculate flight speed.

        Accepts a ParrotVariant or a string tag. Raises UnknownVariantError
        if the tag doesn't name a known variant.
        """
        try:
            resolved = ParrotVariant.parse(variant)
        except UnknownVariantError:
            logger.warning(
                "Unknown parrot variant",
                extra={"variant": repr(variant)}
            )
            raise

        if resolved is ParrotVariant.EUROPEAN:
            result = BASE_SPEED
        elif resolved is ParrotVariant.AFRICAN:
            result = max(0.0, BASE_SPEED - LOAD_FACTOR * config.number_of_coconuts)
        elif config.nailed:
            # NORWEGIAN_BLUE, the only variant left
            result = 0.0
        else:
            result = min(config.voltage * BASE_SPEED, FIXED_BASE_SPEED)
        result = float(result)

        logger.debug(
            "Calculated parrot speed",
            extra={
                "variant": resolved.value,
                "number_of_coconuts": config.number_of_coconuts,
                "voltage": config.voltage,
                "nailed": config.nailed,
                "speed": result,
            }
        )
        return result

    def speed_of(self, parrot: Parrot) -> float:
        return self.speed(parrot.variant, parrot.config)


default_calculator = SpeedCalculator()


def speed(variant: Union[ParrotVariant, str], config: ParrotConfig) -> float:
    """Calculate flight speed with the shared calculator."""
    return default_calculator.speed(variant, config)
