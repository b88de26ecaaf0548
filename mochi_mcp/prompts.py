"""Шаблон подсказки для составления карточки из произвольного текста."""

from __future__ import annotations

from typing import Optional

DRAFT_FLASHCARD_PROMPT = """Turn the text below into one high-quality flashcard for Mochi.

Rules:
1. Atomic: the card tests exactly one fact or concept.
2. Concise: no filler in the question, the answer states only what was asked.
3. Self-contained: the question carries all context needed to answer it.
4. Format: markdown, front and back separated by a line containing only `---`.
   For definitions and lists prefer a cloze card, wrapping the hidden part in `{{{{...}}}}`.
5. No hints to the answer in the question.

{deck_instruction}

Text:
{text}
"""

_DECK_KNOWN = "Create the card with the `create-card` tool in deck `{deck_id}`."
_DECK_UNKNOWN = (
    "Call `list-decks` to pick the most fitting deck, then create the card with "
    "the `create-card` tool."
)


def draft_flashcard(text: str, deck_id: Optional[str] = None) -> str:
    deck_instruction = (
        _DECK_KNOWN.format(deck_id=deck_id) if deck_id else _DECK_UNKNOWN
    )
    return DRAFT_FLASHCARD_PROMPT.format(
        text=text.strip(), deck_instruction=deck_instruction
    )


__all__ = ["DRAFT_FLASHCARD_PROMPT", "draft_flashcard"]
