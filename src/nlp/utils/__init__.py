"""
NLP Utils Package

Utilities for Lithuanian text handling.
"""

from .normalize_unicode import normalize_word

__all__ = [
    'normalize_word',
]
