"""Core data models for cloze decks and drill ratings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Card:
    """One cloze card: sentence with a gap, the missing word, and a translation."""

    prompt: str
    solution: str
    note: str


Deck = tuple[Card, ...]


class Rating(Enum):
    """User difficulty signal that drives cursor movement."""

    LOW = "low"
    MID = "mid"
    HIGH = "high"

    @classmethod
    def from_token(cls, token: str) -> Rating:
        """Resolve a rating value or a button name (hard/medium/easy)."""
        key = token.strip().lower()
        for rating in cls:
            if rating.value == key:
                return rating
        alias = _BUTTON_ALIASES.get(key)
        if alias is None:
            raise ValueError(f"Unknown rating: {token!r}")
        return alias


_BUTTON_ALIASES = {
    "hard": Rating.LOW,
    "medium": Rating.MID,
    "easy": Rating.HIGH,
}


class CardState(Enum):
    """Display state of the current card."""

    HIDDEN = "hidden"
    REVEALED = "revealed"


@dataclass(frozen=True)
class LineRejection:
    """A source line dropped because it did not have exactly three fields."""

    line_number: int
    field_count: int
    text: str

    @property
    def reason(self) -> str:
        return f"line {self.line_number}: expected 3 fields, found {self.field_count}"


@dataclass(frozen=True)
class ParseResult:
    """Valid cards in source order plus per-line rejections."""

    cards: Deck
    rejections: tuple[LineRejection, ...] = ()

    @property
    def count(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards
