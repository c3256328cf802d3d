"""Errors raised by the parrot domain."""

from typing import Any


class ParrotError(Exception):
    """Base class for parrot errors."""
    pass


class UnknownVariantError(ParrotError, ValueError):
    """
    Raised when a variant selector doesn't name a known parrot.

    Subclasses ValueError so callers parsing user input can treat it
    like any other bad value.
    """

    def __init__(self, variant: Any, known: list[str]):
        self.variant = variant
        self.known = known
        super().__init__(
            f"Unknown parrot variant {variant!r}. Expected one of: {', '.join(known)}"
        )
