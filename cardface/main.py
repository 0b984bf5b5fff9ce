# cardface/main.py
import sys

from cardface.common.cards import InvalidCardData, build_deck
from cardface.common.logging_utils import setup_logging, get_logger
from cardface.display import format_listing, format_art_grid


log = get_logger("main")


def main() -> int:
    setup_logging()

    try:
        deck = build_deck()
    except InvalidCardData as e:
        # library raises, the driver decides to stop
        log.error(f"Could not build deck: {e}")
        print("ERROR: Bad data given while building the deck. Shutting down...", file=sys.stderr)
        return 1

    log.info(f"Built deck of {len(deck)} cards")

    print(format_listing(deck))
    print()
    print(format_art_grid(deck))
    return 0


if __name__ == "__main__":
    sys.exit(main())
