# sprites.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from cardface.common.cards import Card
from cardface.common.constants import ART_GAP


@dataclass
class Sprite:
    lines: List[str]

    @property
    def w(self) -> int:
        return max((len(s) for s in self.lines), default=0)

    @property
    def h(self) -> int:
        return len(self.lines)

    def __str__(self) -> str:
        return "\n".join(self.lines)


def card_sprite(card: Card) -> Sprite:
    return Sprite(card.render_card_art().split("\n"))


def hstack(sprites: Sequence[Sprite], gap: str = ART_GAP) -> Sprite:
    """
    Place sprites side by side, top-aligned.
    Shorter sprites are padded with blanks to their own width.
    """
    h = max((s.h for s in sprites), default=0)
    out = []
    for row in range(h):
        out.append(gap.join(s.lines[row].ljust(s.w) if row < s.h else " " * s.w for s in sprites))
    return Sprite(out)
