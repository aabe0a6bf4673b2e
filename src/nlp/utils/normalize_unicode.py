r"""
Lithuanian Unicode Normalization Utility

Lithuanian letters with ogonek, dot or macron (ą, ę, ė, į, ų, ū) and the
caron letters (č, š, ž) can be typed either precomposed or as a base letter
plus combining mark. Stress indices count code points, so the two spellings
give different positions:

    "\u017eod\u012f" (precomposed)            -> 4 code points
    "z\u030codi\u0328" (decomposed)           -> 6 code points

Normalizing to NFC before analysis keeps indices aligned with what the
analyzer sees.
"""

import unicodedata


def normalize_word(word: str, nfc: bool = True, lowercase: bool = False) -> str:
    """
    Normalize a word before stress analysis.

    Args:
        word: Word to normalize
        nfc: Compose base letters and combining marks (NFC)
        lowercase: Convert to lowercase

    Returns:
        Normalized word
    """
    if not word:
        return word

    if nfc:
        word = unicodedata.normalize("NFC", word)
    return word.lower() if lowercase else word
