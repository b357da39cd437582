"""Score and health counters shown in the top-left corner of the board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

HUD_FONT = ("times", 16)


@dataclass
class Score:
    """Number of enemies destroyed so far."""

    value: int = 0

    label: ClassVar[str] = "Score"
    color: ClassVar[str] = "blue"
    font: ClassVar[tuple[str, int]] = HUD_FONT

    def increase(self) -> None:
        """Count one more destroyed enemy."""
        self.value += 1

    @property
    def text(self) -> str:
        return f"{self.label}: {self.value}"


@dataclass
class Health:
    """Remaining lives of the player; never drops below zero."""

    value: int = 5

    label: ClassVar[str] = "Health"
    color: ClassVar[str] = "red"
    font: ClassVar[tuple[str, int]] = HUD_FONT

    def decrease(self) -> None:
        """Lose one life, unless none are left."""
        if self.value > 0:
            self.value -= 1

    @property
    def depleted(self) -> bool:
        return self.value <= 0

    @property
    def text(self) -> str:
        return f"{self.label}: {self.value}"