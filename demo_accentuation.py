#!/usr/bin/env python3
"""
Demo: Lithuanian Accentuation

Accents a single word with the phonology_engine analyzer and prints it.
Requires the analyzer: pip install phonology-engine
"""

import logging
import sys

from src.nlp.accentuation import AccentuationError, get_accentuation


def main():
    """Accent "gera" in the nominative case."""
    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    logger = logging.getLogger("AccentuationDemo")

    try:
        value = get_accentuation("gera", "Vardininkas")
    except AccentuationError as e:
        logger.error(f"✗ Accentuation failed: {e}", exc_info=True)
        return 1

    print(value)
    return 0


if __name__ == '__main__':
    sys.exit(main())
