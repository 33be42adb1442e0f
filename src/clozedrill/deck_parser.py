"""Parse semicolon-delimited deck text into cards."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

from .models import Card, LineRejection, ParseResult

DELIMITER = ";"
FIELD_COUNT = 3
CONTENT_PACKAGE = "clozedrill.content"
SAMPLE_DECK_RESOURCE = "sample_deck.txt"


def _card_from_fields(fields: list[str]) -> Card:
    """Build a card from three trimmed fields."""
    prompt, solution, note = fields
    return Card(prompt=prompt, solution=solution, note=note)


def parse(raw_text: str) -> ParseResult:
    """Parse deck text, keeping valid lines in order and recording the rest.

    Blank lines are skipped without a rejection. A line is valid only when it
    splits into exactly three fields; there is no escape for a literal ``;``.
    """
    cards: list[Card] = []
    rejections: list[LineRejection] = []
    for line_number, line in enumerate(raw_text.split("\n"), start=1):
        if not line.strip():
            continue
        fields = [field.strip() for field in line.split(DELIMITER)]
        if len(fields) != FIELD_COUNT:
            rejections.append(LineRejection(line_number=line_number, field_count=len(fields), text=line))
            continue
        cards.append(_card_from_fields(fields))
    return ParseResult(cards=tuple(cards), rejections=tuple(rejections))


def load_deck(path: Path | str) -> ParseResult:
    """Read and parse a UTF-8 deck file."""
    return parse(Path(path).read_text(encoding="utf-8-sig"))


def load_sample_deck() -> ParseResult:
    """Parse the bundled sample deck."""
    entry = resources.files(CONTENT_PACKAGE).joinpath(SAMPLE_DECK_RESOURCE)
    return parse(entry.read_text(encoding="utf-8-sig"))
