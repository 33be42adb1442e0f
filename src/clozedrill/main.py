"""Terminal drill for cloze flashcard decks."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path

from .deck_parser import load_deck, load_sample_deck
from .models import CardState, ParseResult, Rating
from .session import DeckSession

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
QUIT_COMMANDS = {":quit", ":exit", ":q"}
LOAD_COMMAND = ":load"
RATING_CHOICES = {"1": Rating.LOW, "2": Rating.MID, "3": Rating.HIGH}


class QuitDrill(Exception):
    """Signal immediate exit from the drill loop."""


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    parser = argparse.ArgumentParser(prog="clozedrill", description="Cloze flashcard drill")
    parser.add_argument("deck", nargs="?", default=None, help="deck file (prompt;solution;note per line)")
    parser.add_argument("--strict", action="store_true", help="refuse to start if any line is malformed")
    args = parser.parse_args(argv)
    return play_drill(args.deck, strict=args.strict)


def play_drill(
    deck_path: Path | str | None,
    *,
    strict: bool = False,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> int:
    """Load the starting deck and drill until the user quits."""
    if deck_path is None:
        result = load_sample_deck()
    else:
        try:
            result = load_deck(deck_path)
        except (OSError, UnicodeDecodeError) as exc:
            print_fn(f"Error reading deck: {exc}")
            return 1

    _report_load(result, print_fn)
    if result.is_empty:
        return 1
    if strict and result.rejections:
        print_fn(f"Refusing to start: {len(result.rejections)} malformed line(s).")
        return 1

    session = DeckSession(result.cards)
    print_fn(f"Type {LOAD_COMMAND} PATH to load another deck, :q to quit.")
    try:
        while True:
            _run_card(session, input_fn, print_fn)
    except QuitDrill:
        return 0


def _report_load(result: ParseResult, print_fn: PrintFn) -> None:
    """Print rejected lines and the load outcome."""
    for rejection in result.rejections:
        print_fn(f"Skipped {rejection.reason}: {rejection.text.strip()}")
    if result.is_empty:
        print_fn("Error: no valid flashcards found in the file.")
    else:
        print_fn(f"Loaded {result.count} flashcards.")


def _load_flow(session: DeckSession, path_text: str, print_fn: PrintFn) -> None:
    """Replace the session deck from a file; keep the current deck on failure."""
    if not path_text:
        print_fn("File path is required.")
        return
    try:
        result = load_deck(path_text)
    except (OSError, UnicodeDecodeError) as exc:
        print_fn(f"Error reading deck: {exc}")
        return
    _report_load(result, print_fn)
    if not result.is_empty:
        session.install(result.cards)


def _handle_command(session: DeckSession, text: str, print_fn: PrintFn) -> bool:
    """Run an in-drill command. Return True if the card must be re-rendered."""
    lowered = text.lower()
    if lowered in QUIT_COMMANDS:
        raise QuitDrill()
    parts = text.split(maxsplit=1)
    if parts and parts[0].lower() == LOAD_COMMAND:
        _load_flow(session, parts[1].strip() if len(parts) > 1 else "", print_fn)
        return True
    return False


def _parse_rating(choice: str) -> Rating | None:
    """Map a menu number or rating token to a Rating."""
    if choice in RATING_CHOICES:
        return RATING_CHOICES[choice]
    try:
        return Rating.from_token(choice)
    except ValueError:
        return None


def _render_card(session: DeckSession, print_fn: PrintFn) -> None:
    """Print the current card for its display state."""
    card = session.current()
    state = session.state
    if card is None or state is None:
        print_fn("")
        print_fn("No cards. Load a file to start.")
        return
    if state is CardState.HIDDEN:
        print_fn("")
        print_fn(f"Card {(session.cursor or 0) + 1}/{session.size}")
        print_fn(f"Question: {card.prompt}")
        return
    print_fn(f"Solution: {card.solution}")
    if card.note:
        print_fn(f"Context: {card.note}")


def _run_card(session: DeckSession, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Present the current card, reveal it after an attempt, then advance by rating."""
    _render_card(session, print_fn)
    if session.is_empty:
        command = input_fn("Command: ").strip()
        if not _handle_command(session, command, print_fn):
            print_fn("Invalid command.")
        return

    while True:
        attempt = input_fn("Your answer: ").strip()
        if _handle_command(session, attempt, print_fn):
            return
        if attempt:
            break
        print_fn("Type an answer before showing the solution.")

    session.reveal()
    _render_card(session, print_fn)

    while True:
        choice = input_fn("Rate 1) hard 2) medium 3) easy: ").strip()
        if _handle_command(session, choice, print_fn):
            return
        rating = _parse_rating(choice.lower())
        if rating is not None:
            session.advance(rating)
            return
        print_fn("Invalid rating.")


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
