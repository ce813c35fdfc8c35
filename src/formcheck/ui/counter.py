"""Click counter widget state."""

from dataclasses import dataclass
from enum import Enum


class Tone(Enum):
    """Display colour of the counter, by sign of its value."""

    POSITIVE = "#26de81"
    NEGATIVE = "#ff6b6b"
    NEUTRAL = "#667eea"


@dataclass(frozen=True)
class Counter:
    value: int = 0

    def increment(self) -> "Counter":
        return Counter(self.value + 1)

    def decrement(self) -> "Counter":
        return Counter(self.value - 1)

    def reset(self) -> "Counter":
        return Counter()

    @property
    def tone(self) -> Tone:
        if self.value > 0:
            return Tone.POSITIVE
        if self.value < 0:
            return Tone.NEGATIVE
        return Tone.NEUTRAL

    @property
    def colour(self) -> str:
        return self.tone.value
