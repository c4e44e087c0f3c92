"""
Japanese number spelling for Kazuyomi.

Converts non-negative integers to kanji numerals and their spoken kana
readings. Spelling runs in three stages:

1. place_tree: split the number into a sparse tree of place values.
2. render_tree: name every (value, place) pair in kanji and kana.
3. apply_shifts: contract the assembled reading (さんひゃく -> さんびゃく).
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple, Union

from kazuyomi.characters import normalize_digits
from kazuyomi.constants import (
    DIGITS, MAX_DIGITS, MAX_SPELLABLE, PLACE_MAGNITUDES, SHIFTS,
    SMALL_PLACE_LIMIT, place_name, reading_of,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Errors
# ============================================================================

class SpellingError(Exception):
    """Base class for numbers that cannot be spelled out."""


class InvalidInput(SpellingError):
    """Raised when a string is not a plain non-negative decimal number."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"'{text}' is not a number: {reason}")


class UnsupportedMagnitude(SpellingError):
    """Raised when a number is negative or too large to have a name."""

    def __init__(self, number: Union[int, str], reason: str):
        self.number = number
        self.reason = reason
        super().__init__(f"cannot spell {number}: {reason}")


# ============================================================================
# Place Value Tree
# ============================================================================

@dataclass(frozen=True)
class Leaf:
    """A single digit (1-9) standing at a place."""
    digit: int


@dataclass(frozen=True)
class Branch:
    """A multi-digit value at a place, itself split into places."""
    tree: 'PlaceValueTree'


PlaceValue = Union[Leaf, Branch]
PlaceValueTree = Dict[int, PlaceValue]


def place_tree(num: int, places: Sequence[int] = PLACE_MAGNITUDES) -> PlaceValueTree:
    """
    Convert a number to the value held at each named place.

    1234 over the places 0-3 is one 千, two 百, three 十 and four ones.
    A place whose quotient exceeds 9 (only possible at 万 and above) holds
    a nested tree: 123456789 has 1 at place 8 and 2345 at place 4, and
    2345 is split again into 2 千, 3 百, 4 十 and 5.

    Args:
        num: Non-negative integer.
        places: Place magnitudes, largest first.

    Returns:
        Dict of place -> Leaf or Branch, largest place first. Places with
        a zero value are left out, so 0 gives an empty dict.

    Raises:
        UnsupportedMagnitude: If num is negative or above MAX_SPELLABLE.

    Example:
        >>> place_tree(1234)
        {3: Leaf(digit=1), 2: Leaf(digit=2), 1: Leaf(digit=3), 0: Leaf(digit=4)}
    """
    if num < 0:
        raise UnsupportedMagnitude(num, "negative numbers have no spelling")
    if num > MAX_SPELLABLE:
        raise UnsupportedMagnitude(num, f"larger than {MAX_DIGITS} digits")

    tree: PlaceValueTree = {}
    for place in places:
        value, num = divmod(num, 10 ** place)
        if value == 0:
            continue
        tree[place] = Leaf(value) if value <= 9 else Branch(place_tree(value, places))
    return tree


def tree_value(tree: PlaceValueTree) -> int:
    """Sum a place value tree back into the number it was built from."""
    total = 0
    for place, value in tree.items():
        if isinstance(value, Branch):
            total += tree_value(value.tree) * 10 ** place
        else:
            total += value.digit * 10 ** place
    return total


def tree_to_dict(tree: PlaceValueTree) -> Dict[int, Union[int, dict]]:
    """Plain dict form of a tree, e.g. {4: {1: 1}, 0: 5} for 100005."""
    return {
        place: tree_to_dict(value.tree) if isinstance(value, Branch) else value.digit
        for place, value in tree.items()
    }


# ============================================================================
# Naming
# ============================================================================

def _render_value(value: PlaceValue, place: int) -> Tuple[str, str]:
    """Kanji and raw reading of the value standing in front of a place name."""
    if isinstance(value, Branch):
        return render_tree(value.tree)
    # 十 not 一十, but 一万 not 万
    if value.digit == 1 and 1 <= place <= SMALL_PLACE_LIMIT:
        return "", ""
    glyph = DIGITS[value.digit]
    return glyph, reading_of(glyph)


def render_groups(tree: PlaceValueTree) -> List[Tuple[str, str]]:
    """
    Name every top-level place of a tree.

    Args:
        tree: Place value tree from place_tree().

    Returns:
        List of (kanji, raw reading) pairs, largest place first. An empty
        tree gives the standalone zero.
    """
    if not tree:
        return [(DIGITS[0], reading_of(DIGITS[0]))]

    groups = []
    for place in sorted(tree, reverse=True):
        kanji, reading = _render_value(tree[place], place)
        name = place_name(place)
        if name:
            kanji += name
            reading += reading_of(name)
        groups.append((kanji, reading))
    return groups


def render_tree(tree: PlaceValueTree) -> Tuple[str, str]:
    """
    Render a place value tree as kanji and its unshifted kana reading.

    Example:
        >>> render_tree(place_tree(300))
        ('三百', 'さんひゃく')
    """
    groups = render_groups(tree)
    return (
        "".join(kanji for kanji, _ in groups),
        "".join(reading for _, reading in groups),
    )


# ============================================================================
# Euphonic Shifts
# ============================================================================

def apply_shifts(reading: str, shifts: Sequence[Tuple[str, str]] = SHIFTS) -> str:
    """
    Apply euphonic contractions to an assembled reading.

    Every rule is applied once, in order, as a literal replacement.

    Args:
        reading: Concatenated kana reading.
        shifts: Ordered (pattern, replacement) pairs.

    Returns:
        Spoken reading.

    Example:
        >>> apply_shifts("はちひゃく")
        'はっぴゃく'
    """
    for pattern, replacement in shifts:
        reading = reading.replace(pattern, replacement)
    return reading


# ============================================================================
# Input Handling
# ============================================================================

_DIGITS_PATTERN = re.compile(r"[0-9]+")


def sanitize(text: str) -> int:
    """
    Parse a number typed by a user.

    Whitespace anywhere in the text is ignored and full-width digits are
    accepted. Anything else (signs, decimal points, letters) is rejected.

    Args:
        text: Raw input, e.g. "1 000 000".

    Returns:
        Parsed integer.

    Raises:
        InvalidInput: If no digits remain or a non-digit is present.
        UnsupportedMagnitude: If the number has too many digits to spell.
    """
    if text is None:
        raise InvalidInput("", "no input")

    compact = normalize_digits("".join(str(text).split()))
    if not compact:
        raise InvalidInput(text, "empty string")
    if not _DIGITS_PATTERN.fullmatch(compact):
        raise InvalidInput(text, "only decimal digits are allowed")

    significant = compact.lstrip("0")
    if len(significant) > MAX_DIGITS:
        raise UnsupportedMagnitude(f"{len(significant)}-digit number",
                                   f"larger than {MAX_DIGITS} digits")
    return int(compact)


# ============================================================================
# Spelling
# ============================================================================

class Spelling(NamedTuple):
    """A number with its kanji spelling and spoken reading."""
    number: int
    kanji: str
    reading: str


def spell_number(num: int) -> Spelling:
    """
    Spell out an integer.

    Shifts are applied within each top-level group so that a place name
    never contracts with the group after it (一億百 is いちおくひゃく).

    Args:
        num: Non-negative integer up to MAX_SPELLABLE.

    Returns:
        Spelling of num.

    Raises:
        UnsupportedMagnitude: If num is out of range.

    Example:
        >>> spell_number(12345)
        Spelling(number=12345, kanji='一万二千三百四十五', reading='いちまんにせんさんびゃくよんじゅうご')
    """
    groups = render_groups(place_tree(num))
    kanji = "".join(k for k, _ in groups)
    reading = "".join(apply_shifts(r) for _, r in groups)
    return Spelling(num, kanji, reading)


def spell_full(text: str) -> Optional[Spelling]:
    """Spell out a typed number, or None if it cannot be spelled."""
    try:
        return spell_number(sanitize(text))
    except SpellingError as e:
        logger.debug(f"Not spelling {text!r}: {e}")
        return None


def spell(text: str) -> Optional[str]:
    """
    Spell out a typed number in kanji.

    Example:
        >>> spell("10000")
        '一万'
        >>> spell("12a") is None
        True
    """
    result = spell_full(text)
    return result.kanji if result else None


def spell_reading(text: str) -> Optional[str]:
    """
    Spoken kana reading of a typed number.

    Example:
        >>> spell_reading("600")
        'ろっぴゃく'
    """
    result = spell_full(text)
    return result.reading if result else None
