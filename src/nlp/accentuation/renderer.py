#!/usr/bin/env python3
"""
Accent Renderer

Inserts a single pitch-accent diacritic into a word. Indices count Unicode
code points, which is what Python string indexing uses, so "žodį"[1] is 'o'
regardless of how many bytes 'ž' takes in UTF-8.

Usage:
    from src.nlp.accentuation.renderer import render_accented_word

    render_accented_word("gera", 0, 3)   # 'gerà'
    render_accented_word("žodį", 2, 1)   # 'žõdį'
"""

from logging import getLogger

from src.nlp.accentuation.diacritics import apply_diacritic, get_diacritic_table
from src.nlp.accentuation.errors import IndexOutOfRangeError
from src.nlp.accentuation.types import StressOption

logger = getLogger(__name__)


def render_accented_word(word: str, stress_type: int, index: int) -> str:
    """
    Replace the letter at index with its accented form.

    Every other code point is copied unchanged. The accented form may be two
    code points (letter + combining mark), so the result can be one code
    point longer than the input.

    Args:
        word: Word without stress marks
        stress_type: Pitch-accent class (0, 1 or 2)
        index: Code-point index of the stressed letter

    Returns:
        Word with the diacritic applied

    Raises:
        IndexOutOfRangeError: index is negative or >= len(word)
        InvalidStressTypeError: stress_type is not 0, 1 or 2
        MissingMappingError: letter at index has no form for stress_type
    """
    if index < 0 or index >= len(word):
        raise IndexOutOfRangeError(word, index)

    # Validate the class before touching the word
    get_diacritic_table(stress_type)

    stressed = []
    for i, char in enumerate(word):
        if i == index:
            stressed.append(apply_diacritic(char, stress_type))
        else:
            stressed.append(char)

    result = "".join(stressed)
    logger.debug(f"Rendered '{word}' -> '{result}' (type={stress_type}, index={index})")
    return result


def render_stress_option(word: str, option: StressOption) -> str:
    """Render a word using the placement from an analyzer option."""
    return render_accented_word(word, option.stress_type, option.stressed_letter_index)
