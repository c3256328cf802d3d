"""
Domain models for parrot flight.

These models represent the core concepts: which kind of parrot it is and
what it's carrying. They have no dependencies on settings or logging
configuration, so they can be built and compared anywhere.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .errors import UnknownVariantError


class ParrotVariant(Enum):
    """The three kinds of parrot we know how to fly."""
    EUROPEAN = "european"
    AFRICAN = "african"
    NORWEGIAN_BLUE = "norwegian_blue"

    @classmethod
    def parse(cls, tag: Union["ParrotVariant", str]) -> "ParrotVariant":
        """
        Resolve a free-form tag to a variant.

        Matching ignores case, spaces, hyphens and underscores:
        "NorwegianBlue", "NORWEGIANBLUE", "Norwegian Blue" and
        "norwegian-blue" all resolve to NORWEGIAN_BLUE.

        Raises UnknownVariantError for anything else.
        """
        if isinstance(tag, cls):
            return tag
        if not isinstance(tag, str):
            raise UnknownVariantError(tag, cls.names())

        normalized = re.sub(r"[\s\-_]+", "", tag.strip()).lower()
        by_key = {variant.value.replace("_", ""): variant for variant in cls}
        try:
            return by_key[normalized]
        except KeyError:
            raise UnknownVariantError(tag, cls.names()) from None

    @classmethod
    def names(cls) -> list[str]:
        return [variant.value for variant in cls]


@dataclass(frozen=True)
class ParrotConfig:
    """
    What a parrot is carrying and how it's wired up.

    Fields are independent. A European parrot may carry coconuts or a
    voltage; the speed rules just ignore them.
    """
    number_of_coconuts: int = 0
    voltage: float = 0.0
    nailed: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.number_of_coconuts, bool) or not isinstance(self.number_of_coconuts, int):
            raise ValueError("Number of coconuts must be an integer")
        if self.number_of_coconuts < 0:
            raise ValueError("Number of coconuts cannot be negative")
        if isinstance(self.voltage, bool) or not isinstance(self.voltage, (int, float)):
            raise ValueError("Voltage must be a number")
        if not isinstance(self.nailed, bool):
            raise ValueError("Nailed must be a boolean")


@dataclass(frozen=True)
class Parrot:
    """
    A parrot of a given variant with its configuration.

    Frozen because parrots are values here. Two parrots of the same
    variant with the same config fly at the same speed.
    """
    variant: ParrotVariant
    config: ParrotConfig = field(default_factory=ParrotConfig)

    def __post_init__(self) -> None:
        if not isinstance(self.variant, ParrotVariant):
            raise UnknownVariantError(self.variant, ParrotVariant.names())

    @classmethod
    def create(
        cls,
        variant: Union[ParrotVariant, str],
        number_of_coconuts: int = 0,
        voltage: float = 0.0,
        nailed: bool = False,
    ) -> "Parrot":
        """Build a parrot from a variant (or its tag) and raw config fields."""
        return cls(
            variant=ParrotVariant.parse(variant),
            config=ParrotConfig(
                number_of_coconuts=number_of_coconuts,
                voltage=voltage,
                nailed=nailed,
            ),
        )

    @classmethod
    def european(cls, config: Optional[ParrotConfig] = None) -> "Parrot":
        return cls(ParrotVariant.EUROPEAN, config or ParrotConfig())

    @classmethod
    def african(cls, config: Optional[ParrotConfig] = None) -> "Parrot":
        return cls(ParrotVariant.AFRICAN, config or ParrotConfig())

    @classmethod
    def norwegian_blue(cls, config: Optional[ParrotConfig] = None) -> "Parrot":
        return cls(ParrotVariant.NORWEGIAN_BLUE, config or ParrotConfig())

    @property
    def speed(self) -> float:
        """Flight speed for this parrot."""
        from .speed import default_calculator

        return default_calculator.speed_of(self)
