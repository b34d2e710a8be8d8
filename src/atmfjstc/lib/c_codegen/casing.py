"""
The identifier casing engine.

There are two ways of casing an identifier:

- The *structured* path (`casify`) works on an identifier that has already been split into lowercase word fragments,
  e.g. ``('my', 'variable', 'name')``. Each fragment is transformed according to its position, then the fragments are
  joined. This is what `Name` nodes use.
- The *free text* path (`casify_text`) works directly on raw text such as ``'myVariable'`` or ``'my`variable'``. Word
  boundaries are recognized on the fly: an explicit boundary marker (`CASE_SEPARATOR`, which is dropped) or any
  upper-case character starts a new chunk.

Both paths produce identical output when the chunks of the free text match the fragments given to the structured path.
In particular, they always agree for text that contains no boundary hints at all.

Case conversion is done character by character using Python's (locale-independent) ``str.upper``/``str.lower``.
"""

import re

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Tuple

from atmfjstc.lib.text_utils import ucfirst


CASE_SEPARATOR = '`'
"""Marks a word boundary inside free text that is to be cased with `casify_text`"""

FRAGMENT_SEPARATOR = '_'
"""Separates the word fragments in the text from which a `Name` is parsed (whitespace also does)"""

PLACEHOLDER_FRAGMENTS = ('invalid', 'name')
"""Substituted for an identifier that has no fragments, so that we never generate an empty identifier"""


class CaseType(Enum):
    FLAT = auto()             # myvariablename
    SCREAMING = auto()        # MYVARIABLENAME
    CAMEL = auto()            # myVariableName
    PASCAL = auto()           # MyVariableName
    SNAKE = auto()            # my_variable_name
    SCREAMING_SNAKE = auto()  # MY_VARIABLE_NAME


class _FragmentCase(Enum):
    LOWER = auto()
    UPPER = auto()
    CAPITALIZE = auto()

    def apply(self, fragment: str) -> str:
        if self == _FragmentCase.UPPER:
            return fragment.upper()
        if self == _FragmentCase.CAPITALIZE:
            return ucfirst(fragment.lower())

        return fragment.lower()

    def apply_head_char(self, char: str) -> str:
        return char.lower() if self == _FragmentCase.LOWER else char.upper()

    def apply_tail_char(self, char: str) -> str:
        return char.upper() if self == _FragmentCase.UPPER else char.lower()


@dataclass(frozen=True)
class _CaseRule:
    first: _FragmentCase
    others: _FragmentCase
    joiner: str


_CASE_RULES = {
    CaseType.FLAT: _CaseRule(_FragmentCase.LOWER, _FragmentCase.LOWER, ''),
    CaseType.SCREAMING: _CaseRule(_FragmentCase.UPPER, _FragmentCase.UPPER, ''),
    CaseType.CAMEL: _CaseRule(_FragmentCase.LOWER, _FragmentCase.CAPITALIZE, ''),
    CaseType.PASCAL: _CaseRule(_FragmentCase.CAPITALIZE, _FragmentCase.CAPITALIZE, ''),
    CaseType.SNAKE: _CaseRule(_FragmentCase.LOWER, _FragmentCase.LOWER, '_'),
    CaseType.SCREAMING_SNAKE: _CaseRule(_FragmentCase.UPPER, _FragmentCase.UPPER, '_'),
}


def split_fragments(text: str, separator: str = FRAGMENT_SEPARATOR) -> Tuple[str, ...]:
    """
    Splits a text into the canonical (lowercase) word fragments of an identifier, at the separator and at whitespace,
    e.g. both ``'MY_HEADER'`` and ``'my header'`` give ``('my', 'header')``.

    Empty fragments are dropped. If no fragments remain (e.g. for ``''`` or ``'___'``), the `PLACEHOLDER_FRAGMENTS`
    are returned instead, so the result is never empty.
    """
    fragments = tuple(
        part.lower() for part in re.split('[' + re.escape(separator) + r'\s]', text) if part != ''
    )

    return fragments if len(fragments) > 0 else PLACEHOLDER_FRAGMENTS


def _split_before_capitals(piece: str) -> Iterable[str]:
    current = ''
    for char in piece:
        if char.isupper() and (current != ''):
            yield current
            current = ''

        current += char

    yield current


def split_cased(text: str, case_type: CaseType) -> Tuple[str, ...]:
    """
    Splits an identifier that was cased according to a given case type back into lowercase word fragments.

    Underscores and boundary markers always separate fragments. For camelCase and PascalCase, a new fragment also
    starts at every upper-case character, even in a piece that is all upper-case (``'XYZ'`` -> ``('x', 'y', 'z')``).
    For the other case types, the case of the characters carries no word boundaries.

    Re-casing the result under the same case type gives back the input, for any output of `casify`.
    """
    fragments = []

    for piece in re.split('[' + re.escape(FRAGMENT_SEPARATOR + CASE_SEPARATOR) + r'\s]', text):
        if piece == '':
            continue

        if case_type in (CaseType.CAMEL, CaseType.PASCAL):
            fragments.extend(fragment.lower() for fragment in _split_before_capitals(piece))
        else:
            fragments.append(piece.lower())

    return tuple(fragments) if len(fragments) > 0 else PLACEHOLDER_FRAGMENTS


def casify(fragments: Iterable[str], case_type: CaseType) -> str:
    """
    Renders a sequence of word fragments as an identifier in the given case type.

    The first fragment and the other fragments each get their own transform (lowercase, uppercase, or capitalize the
    first letter), after which the fragments are joined with either nothing or an underscore, as per the case type.
    An empty sequence renders the `PLACEHOLDER_FRAGMENTS`.
    """
    rule = _CASE_RULES[case_type]

    fragments = tuple(fragments)
    if len(fragments) == 0:
        fragments = PLACEHOLDER_FRAGMENTS

    return rule.joiner.join(
        (rule.first if index == 0 else rule.others).apply(fragment)
        for index, fragment in enumerate(fragments)
    )


def casify_text(text: str, case_type: CaseType) -> str:
    """
    Renders free text as an identifier in the given case type, detecting word boundaries on the fly.

    Three kinds of characters are distinguished: the very first character of the text, the first character of any
    subsequent chunk (a chunk starts after a `CASE_SEPARATOR` or at an upper-case character), and all other characters.
    Each gets the transform selected by the case type. For the snake case types, an underscore is also inserted before
    every chunk after the first.

    Text that yields no characters at all (empty, or made only of boundary markers) renders the `PLACEHOLDER_FRAGMENTS`.
    """
    rule = _CASE_RULES[case_type]

    output = []
    is_first = True
    is_chunk_start = False
    in_first_chunk = True

    for char in text:
        if char == CASE_SEPARATOR:
            is_chunk_start = True
            continue

        if char.isupper():
            is_chunk_start = True

        if is_first:
            output.append(rule.first.apply_head_char(char))
        elif is_chunk_start:
            output.append(rule.joiner)
            output.append(rule.others.apply_head_char(char))
            in_first_chunk = False
        else:
            output.append((rule.first if in_first_chunk else rule.others).apply_tail_char(char))

        is_first = False
        is_chunk_start = False

    if len(output) == 0:
        return casify(PLACEHOLDER_FRAGMENTS, case_type)

    return ''.join(output)
