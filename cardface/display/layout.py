# layout.py
from __future__ import annotations
from typing import List, Sequence

from cardface.common.cards import Card
from cardface.common.constants import CARDS_PER_ROW
from .sprites import card_sprite, hstack


def rows_of(deck: Sequence[Card], per_row: int = CARDS_PER_ROW) -> List[List[Card]]:
    if per_row < 1:
        raise ValueError(f"per_row must be >= 1, got {per_row}")
    return [list(deck[i:i + per_row]) for i in range(0, len(deck), per_row)]


def format_listing(deck: Sequence[Card], per_row: int = CARDS_PER_ROW) -> str:
    """Compact form, tab separated, one blank line between rows."""
    rows = rows_of(deck, per_row)
    return "\n\n".join("\t".join(c.render_compact() for c in row) for row in rows)


def format_art_grid(deck: Sequence[Card], per_row: int = CARDS_PER_ROW) -> str:
    """Card art, per_row cards side by side, rows stacked with no gap."""
    blocks = [hstack([card_sprite(c) for c in row]) for row in rows_of(deck, per_row)]
    return "\n".join(str(b) for b in blocks)
