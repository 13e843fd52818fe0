"""Greedy maximal-munch tokenizer for Latin transliteration.

WHY: Latin transliteration spells many Devanagari letters with more than
one character ("bh", "ai", "t" + dot below + "h"). The aksarizer needs
those as single tokens before it can classify them.

HOW: Walk the NFD-normalized input one character at a time, growing a
buffer while ``buffer + char`` is still a known token and emitting the
buffer otherwise. Correctness relies on the prefix invariant checked in
SchemeTables: every prefix of a token is itself a token.

RULES:
- Input is normalized to NFD before splitting
- Case folding is applied only to the lookup, never to emitted tokens
- Characters outside the scheme become single-character tokens
- Empty input yields an empty list
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Collection, List


def tokenize(
    text: str,
    tokens: Collection[str],
    fold: Callable[[str], str] = str.lower,
) -> List[str]:
    """Split Latin text into scheme tokens and single leftover characters.

    Example: ``"Bhārata\\n"`` → ``["Bh", "ā", "r", "a", "t", "a", "\\n"]``
    (with ``ā`` in decomposed form).

    Args:
        text: Latin-script input.
        tokens: The combined token set (consonants, vowels, finals).
        fold: Lookup normalization, ``str.lower`` for case-insensitive
              schemes or the identity for case-sensitive ones.

    Returns:
        Tokens in input order, original case preserved.
    """
    result: List[str] = []
    buffer = ""

    for char in unicodedata.normalize("NFD", text):
        if fold(buffer + char) in tokens:
            buffer += char
        else:
            if buffer:
                result.append(buffer)
            buffer = char

    if buffer:
        result.append(buffer)

    return result
