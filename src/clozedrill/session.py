"""Drill session: current deck, cursor, and reveal state."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Card, CardState, Deck, Rating


class DeckSession:
    """Cycles through one deck according to user ratings.

    Not thread-safe; callers serialize access.
    """

    def __init__(self, deck: Iterable[Card] = ()) -> None:
        """Initialize session and install the given deck."""
        self._deck: Deck = ()
        self._cursor: int | None = None
        self._revealed = False
        self.install(deck)

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def cursor(self) -> int | None:
        """Index of the current card, or None when the deck is empty."""
        return self._cursor

    @property
    def revealed(self) -> bool:
        return self._revealed

    @property
    def size(self) -> int:
        return len(self._deck)

    @property
    def is_empty(self) -> bool:
        return not self._deck

    @property
    def state(self) -> CardState | None:
        """Display state of the current card, or None when the deck is empty."""
        if self._cursor is None:
            return None
        return CardState.REVEALED if self._revealed else CardState.HIDDEN

    def install(self, deck: Iterable[Card]) -> None:
        """Replace the deck and restart from its first card, hidden."""
        self._deck = tuple(deck)
        self._cursor = 0 if self._deck else None
        self._revealed = False

    def current(self) -> Card | None:
        """Return the card at the cursor, or None for an empty deck."""
        if self._cursor is None:
            return None
        return self._deck[self._cursor]

    def reveal(self) -> None:
        """Show the solution of the current card."""
        if self._cursor is None:
            return
        self._revealed = True

    def advance(self, rating: Rating | str) -> None:
        """Move the cursor according to the rating and hide the new card.

        LOW steps back one card, except on the first card, where it moves
        forward like any other rating. MID and HIGH move forward, wrapping
        at the end of the deck.
        """
        if not isinstance(rating, Rating):
            rating = Rating.from_token(rating)
        if self._cursor is None:
            return
        if rating is Rating.LOW and self._cursor > 0:
            self._cursor -= 1
        else:
            self._cursor = (self._cursor + 1) % len(self._deck)
        self._revealed = False
