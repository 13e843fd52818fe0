"""State machines that segment Latin tokens and Devanagari text into aksaras.

WHY: Both scripts encode the same syllable structure in different ways.
Latin spells every vowel and simply juxtaposes cluster consonants.
Devanagari leaves the inherent vowel implicit on a bare consonant, marks
other vowels with a dependent sign, and joins cluster consonants with a
virama. Recovering aksaras from either side is a small finite-state
problem, solved once here so the renderers never deal with it.

HOW: Each aksarizer walks its input once, keeping an AksaraBuilder for the
aksara under construction. Whenever an input unit cannot extend it, the
builder is frozen and pushed to the output (_flush), and the unit either
starts a new aksara or is passed through as a RawToken.

  Latin states:       IDLE → ONSET (consonants read) → RHYME (vowel read)
  Devanagari states:  IDLE → CONSONANT (inherent vowel pending)
                           → VIRAMA (cluster may continue)
                           → VOWEL (awaiting optional final)

RULES:
- Unrecognized units are passed through unchanged, never dropped
- In strict mode every passed-through unit that is not whitespace and not
  allow-listed fires exactly one warning; conversion always continues
- Latin lookups fold case unless the scheme is case-sensitive; the folded
  token is what gets stored in the aksara
- Only the Devanagari side supplies the inherent vowel; a Latin consonant
  at end of input yields an onset-only aksara
- After a virama, an independent vowel closes the onset-only aksara as is
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Iterable, List, Optional

from deva_converter.core.ir import AksaraBuilder, Element, RawToken
from deva_converter.core.tables import SchemeTables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvalidInputReporter:
    """Strict-mode warning policy for passed-through input.

    Attributes:
        strict: Report at all; when False every call is a no-op.
        allow: Units that are never reported.
        on_warning: Callback receiving the warning message. When None the
                    message is logged at WARNING level instead.
    """

    strict: bool = False
    allow: FrozenSet[str] = field(default_factory=frozenset)
    on_warning: Optional[Callable[[str], None]] = None

    def report(self, unit: str, kind: str) -> None:
        if not self.strict or unit in self.allow:
            return
        if any(char.isspace() for char in unit):
            return
        message = "Invalid {} '{}' read".format(kind, unit)
        if self.on_warning is not None:
            self.on_warning(message)
        else:
            logger.warning(message)


_SILENT = InvalidInputReporter()


class LatinState(enum.Enum):
    """Latin aksarizer states."""

    IDLE = 0    # no aksara under construction
    ONSET = 1   # reading onset consonants
    RHYME = 2   # vowel read, ready for a final or the end of the aksara


class DevanagariState(enum.Enum):
    """Devanagari aksarizer states."""

    IDLE = 0       # no aksara under construction
    CONSONANT = 1  # consonant with inherent vowel; ready for vowel, virama, final
    VIRAMA = 2     # virama read; ready for a cluster consonant or end of aksara
    VOWEL = 3      # vowel read; ready for a final or end of aksara


def latin_to_aksara(
    tokens: Iterable[str],
    tables: SchemeTables,
    reporter: InvalidInputReporter = _SILENT,
) -> List[Element]:
    """Assemble Latin tokens into aksaras.

    Example: ``["h", "y", "a", "h\\u0323"]`` → one aksara with onset
    ``("h", "y")``, vowel ``"a"`` and final ``"h\\u0323"``.

    Args:
        tokens: Output of the tokenizer (or an equivalent token list).
        tables: Validated scheme tables.
        reporter: Strict-mode warning policy.

    Returns:
        Aksaras and RawTokens in input order.
    """
    consonants, vowels, finals = tables.consonants, tables.vowels, tables.finals
    elements: List[Element] = []
    current: Optional[AksaraBuilder] = None
    state = LatinState.IDLE

    def _flush() -> None:
        nonlocal current
        if current is not None:
            elements.append(current.build())
            current = None

    def _pass_through(token: str) -> None:
        reporter.report(token, "token")
        elements.append(RawToken(token))

    for token in tokens:
        key = tables.fold(token)

        if state is LatinState.IDLE:
            if key in consonants:
                current = AksaraBuilder(onset=[key])
                state = LatinState.ONSET
            elif key in vowels:
                current = AksaraBuilder(vowel=key)
                state = LatinState.RHYME
            else:
                # a final cannot start an aksara
                _pass_through(token)

        elif state is LatinState.ONSET:
            if key in consonants:
                current.onset.append(key)
            elif key in vowels:
                current.vowel = key
                state = LatinState.RHYME
            else:
                _flush()
                _pass_through(token)
                state = LatinState.IDLE

        elif state is LatinState.RHYME:
            if key in consonants:
                _flush()
                current = AksaraBuilder(onset=[key])
                state = LatinState.ONSET
            elif key in vowels:
                _flush()
                current = AksaraBuilder(vowel=key)
            elif key in finals:
                current.final = key
                _flush()
                state = LatinState.IDLE
            else:
                _flush()
                _pass_through(token)
                state = LatinState.IDLE

    # Finish the aksara under construction
    _flush()

    return elements


def devanagari_to_aksara(
    text: str,
    tables: SchemeTables,
    reporter: InvalidInputReporter = _SILENT,
) -> List[Element]:
    """Assemble Devanagari characters into aksaras.

    Example: ``"बुद्धः"`` → ``[b-u, d-dh-a-ḥ]``, i.e. the second aksara has
    onset ``("d", "dh")``, the inherent vowel and the visarga final.

    Args:
        text: Devanagari input in precomposed form.
        tables: Validated scheme tables (the reverse ones are used).
        reporter: Strict-mode warning policy.

    Returns:
        Aksaras and RawTokens in input order.
    """
    consonants = tables.reverse_consonants
    vowels = tables.reverse_vowels
    diacritics = tables.reverse_diacritics
    finals = tables.reverse_finals
    inherent, virama = tables.inherent, tables.virama

    elements: List[Element] = []
    current: Optional[AksaraBuilder] = None
    state = DevanagariState.IDLE

    def _flush() -> None:
        nonlocal current
        if current is not None:
            elements.append(current.build())
            current = None

    def _pass_through(char: str) -> None:
        reporter.report(char, "character")
        elements.append(RawToken(char))

    for char in text:
        if state is DevanagariState.IDLE:
            if char in consonants:
                current = AksaraBuilder(onset=[consonants[char]])
                state = DevanagariState.CONSONANT
            elif char in vowels:
                current = AksaraBuilder(vowel=vowels[char])
                state = DevanagariState.VOWEL
            else:
                _pass_through(char)

        elif state is DevanagariState.CONSONANT:
            if char == virama:
                state = DevanagariState.VIRAMA
            elif char in diacritics:
                current.vowel = diacritics[char]
                state = DevanagariState.VOWEL
            elif char in vowels:
                current.vowel = inherent
                _flush()
                current = AksaraBuilder(vowel=vowels[char])
                state = DevanagariState.VOWEL
            elif char in consonants:
                current.vowel = inherent
                _flush()
                current = AksaraBuilder(onset=[consonants[char]])
            elif char in finals:
                current.vowel = inherent
                current.final = finals[char]
                _flush()
                state = DevanagariState.IDLE
            else:
                current.vowel = inherent
                _flush()
                _pass_through(char)
                state = DevanagariState.IDLE

        elif state is DevanagariState.VIRAMA:
            if char in consonants:
                current.onset.append(consonants[char])
                state = DevanagariState.CONSONANT
            elif char in vowels:
                # cluster closed by virama before an independent vowel
                _flush()
                current = AksaraBuilder(vowel=vowels[char])
                state = DevanagariState.VOWEL
            else:
                _flush()
                _pass_through(char)
                state = DevanagariState.IDLE

        elif state is DevanagariState.VOWEL:
            if char in finals:
                current.final = finals[char]
                _flush()
                state = DevanagariState.IDLE
            elif char in consonants:
                _flush()
                current = AksaraBuilder(onset=[consonants[char]])
                state = DevanagariState.CONSONANT
            elif char in vowels:
                _flush()
                current = AksaraBuilder(vowel=vowels[char])
            else:
                _flush()
                _pass_through(char)
                state = DevanagariState.IDLE

    # Finish the aksara under construction
    if state is DevanagariState.CONSONANT:
        current.vowel = inherent
    _flush()

    return elements
