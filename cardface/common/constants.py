# cardface/common/constants.py

# Rank bounds (inclusive)
MIN_RANK = 1
MAX_RANK = 13
RANKS = list(range(MIN_RANK, MAX_RANK + 1))

# Face ranks shown as letters; everything else prints as its number
FACE_LABELS = {1: "A", 11: "J", 12: "Q", 13: "K"}

# Suit glyphs (Suit enum values)
HEART = "♥"
DIAMOND = "♦"
CLUB = "♣"
SPADE = "♠"
RED_GLYPHS = {HEART, DIAMOND}

# Default card: A ♥
DEFAULT_RANK = 1
DEFAULT_SUIT = HEART

# Deck layout: suit-major, this suit order, ranks ascending
DECK_SUIT_ORDER = (DIAMOND, HEART, SPADE, CLUB)
DECK_SIZE = len(DECK_SUIT_ORDER) * len(RANKS)  # 52
CARDS_PER_ROW = 13

# Card art geometry
ART_BORDER = "-------"
ART_GAP = " "  # between cards in a grid row
