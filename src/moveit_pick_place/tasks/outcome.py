"""Define a minimal dataclass to represent the outcome of one step of the sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class StepOutcome(Iterable):
    """The outcome of a single step: a motion request or a scene edit."""

    step: str
    success: bool
    """For motion steps, whether planning succeeded; for scene steps, whether the edit applied."""

    message: str

    def __iter__(self) -> Iterator:
        """Return an iterator over the success flag and message of the outcome."""
        return iter((self.success, self.message))
