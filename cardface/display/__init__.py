# cardface/display/__init__.py

from .sprites import Sprite, card_sprite, hstack
from .layout import rows_of, format_listing, format_art_grid

__all__ = [
    "Sprite",
    "card_sprite",
    "hstack",
    "rows_of",
    "format_listing",
    "format_art_grid",
]
