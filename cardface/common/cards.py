# cardface/common/cards.py
from __future__ import annotations

from enum import Enum
from typing import IO, List, Optional, Sequence, Type, Union

from .constants import (
    MIN_RANK, MAX_RANK, RANKS, FACE_LABELS,
    HEART, DIAMOND, CLUB, SPADE, RED_GLYPHS,
    DEFAULT_RANK, DEFAULT_SUIT, DECK_SUIT_ORDER,
    ART_BORDER,
)
from .logging_utils import get_logger

_log = get_logger("cards")


# -------------------------
# Errors
# -------------------------
class InvalidCardData(ValueError):
    """Raised when a card cannot be built from the given data."""
    pass


class InvalidRank(InvalidCardData):
    pass


class InvalidSuit(InvalidCardData):
    pass


class NullSource(InvalidCardData):
    """Raised when copying from None."""
    pass


def _require(condition: bool, error: Type[InvalidCardData], msg: str) -> None:
    if not condition:
        _log.warning(f"{error.__name__}: {msg}")
        raise error(msg)


# -------------------------
# Suit
# -------------------------
class Suit(Enum):
    HEART = HEART
    DIAMOND = DIAMOND
    CLUB = CLUB
    SPADE = SPADE

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def is_red(self) -> bool:
        return self.value in RED_GLYPHS


SuitLike = Union[Suit, str]


def _is_valid_rank(rank: object) -> bool:
    # bool is an int subclass; True must not pass as an Ace
    return isinstance(rank, int) and not isinstance(rank, bool) and MIN_RANK <= rank <= MAX_RANK


def _as_suit(suit: object) -> Optional[Suit]:
    """Suit member or glyph -> Suit, anything else -> None."""
    if isinstance(suit, Suit):
        return suit
    if isinstance(suit, str):
        try:
            return Suit(suit)
        except ValueError:
            return None
    return None


# -------------------------
# Card
# -------------------------
class Card:
    """
    One playing card. Rank is 1..13 (1=A, 11=J, 12=Q, 13=K), suit is a Suit
    or its glyph.

    Construction raises InvalidCardData on bad input; the setters return
    False instead and leave the card untouched. A Card can never hold an
    invalid rank or suit.
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: int = DEFAULT_RANK, suit: SuitLike = DEFAULT_SUIT) -> None:
        _require(_is_valid_rank(rank), InvalidRank, f"rank must be {MIN_RANK}..{MAX_RANK}, got {rank!r}")
        checked = _as_suit(suit)
        _require(checked is not None, InvalidSuit, f"suit must be one of {[s.glyph for s in Suit]}, got {suit!r}")
        self._rank: int = rank
        self._suit: Suit = checked  # type: ignore[assignment]

    @classmethod
    def from_card(cls, other: Optional[Card]) -> Card:
        """Independent copy of another card."""
        _require(other is not None, NullSource, "cannot copy a card from None")
        _require(isinstance(other, Card), InvalidCardData, f"cannot copy a card from {type(other).__name__}")
        return cls(other.rank, other.suit)  # type: ignore[union-attr]

    def __copy__(self) -> Card:
        return Card.from_card(self)

    def __deepcopy__(self, memo: dict) -> Card:
        return Card.from_card(self)

    # --- accessors ---
    @property
    def rank(self) -> int:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def display_rank(self) -> str:
        return FACE_LABELS.get(self._rank, str(self._rank))

    # --- mutators ---
    def set_rank(self, rank: int) -> bool:
        if not _is_valid_rank(rank):
            _log.debug(f"set_rank rejected {rank!r}, keeping {self._rank}")
            return False
        self._rank = rank
        return True

    def set_suit(self, suit: SuitLike) -> bool:
        checked = _as_suit(suit)
        if checked is None:
            _log.debug(f"set_suit rejected {suit!r}, keeping {self._suit.glyph}")
            return False
        self._suit = checked
        return True

    def set_all(self, rank: int, suit: SuitLike) -> bool:
        """Set both or neither."""
        checked = _as_suit(suit)
        if not _is_valid_rank(rank) or checked is None:
            _log.debug(f"set_all rejected ({rank!r}, {suit!r}), keeping {self}")
            return False
        self._rank = rank
        self._suit = checked
        return True

    # --- rendering ---
    def render_compact(self) -> str:
        return f"{self.display_rank} {self._suit.glyph}"

    def art_lines(self) -> List[str]:
        s = self._suit.glyph
        # two-digit rank takes one of the leading spaces
        pad = " " if self._rank == 10 else "  "
        return [
            ART_BORDER,
            f"|{s}   {s}|",
            f"|{pad}{self.display_rank}  |",
            f"|{s}   {s}|",
            ART_BORDER,
        ]

    def render_card_art(self) -> str:
        """Five lines of ASCII art, no trailing newline."""
        return "\n".join(self.art_lines())

    def print_card(self, file: Optional[IO[str]] = None) -> None:
        print(self.render_card_art(), file=file)

    def __str__(self) -> str:
        return self.render_compact()

    def __repr__(self) -> str:
        return f"Card(rank={self._rank}, suit={self._suit})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank == other._rank and self._suit is other._suit

    # mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]


def build_deck(suits: Sequence[SuitLike] = DECK_SUIT_ORDER) -> List[Card]:
    """All ranks for each suit, in suit order then rank ascending."""
    deck = [Card(r, s) for s in suits for r in RANKS]
    _log.debug(f"built deck of {len(deck)} cards")
    return deck
