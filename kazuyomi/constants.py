"""
Numeral tables for Kazuyomi.

This module provides a single source of truth for:
- Digit kanji and the standalone zero
- Place names from 十 up to 無量大数 (10^68)
- Kana readings of every digit and place name
- The ordered euphonic shift rules applied to assembled readings

All other modules should import from here to avoid duplication.
Nothing in this module is mutated after import.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple


# ============================================================================
# Digits
# ============================================================================

# ゼロ is only ever used on its own; it is never combined with a place name.
DIGITS: Mapping[int, str] = MappingProxyType({
    0: 'ゼロ',
    1: '一',
    2: '二',
    3: '三',
    4: '四',
    5: '五',
    6: '六',
    7: '七',
    8: '八',
    9: '九',
})

ZERO_READING = 'ぜろ'


# ============================================================================
# Places
# ============================================================================
# Below 万 every power of ten has a name. From 万 upwards names change
# every four digits.

PLACES: Mapping[int, Optional[str]] = MappingProxyType({
    0: None,
    1: '十',
    2: '百',
    3: '千',
    4: '万',
    8: '億',
    12: '兆',
    16: '京',
    20: '垓',
    24: '秭',
    28: '穣',
    32: '溝',
    36: '澗',
    40: '正',
    44: '載',
    48: '極',
    52: '恒河沙',
    56: '阿僧祇',
    60: '那由他',
    64: '不可思議',
    68: '無量大数',
})

# Largest first, the order the decomposer walks them in
PLACE_MAGNITUDES: Tuple[int, ...] = tuple(sorted(PLACES, reverse=True))

MAX_PLACE = PLACE_MAGNITUDES[0]

# 一 is dropped before 十, 百 and 千 but kept before 万 and above
SMALL_PLACE_LIMIT = 3

# Largest grouping step between two named places
GROUP_SIZE = 4

# Up to 9999 of the largest place can be spelled: 九千九百九十九無量大数...
MAX_DIGITS = MAX_PLACE + GROUP_SIZE
MAX_SPELLABLE = 10 ** MAX_DIGITS - 1


# ============================================================================
# Readings
# ============================================================================

READINGS: Mapping[str, str] = MappingProxyType({
    '一': 'いち',
    '二': 'に',
    '三': 'さん',
    '四': 'よん',
    '五': 'ご',
    '六': 'ろく',
    '七': 'なな',
    '八': 'はち',
    '九': 'きゅう',
    '十': 'じゅう',
    '百': 'ひゃく',
    '千': 'せん',
    '万': 'まん',
    '億': 'おく',
    '兆': 'ちょう',
    '京': 'けい',
    '垓': 'がい',
    '秭': 'じょ',
    '穣': 'じょう',
    '溝': 'こう',
    '澗': 'かん',
    '正': 'せい',
    '載': 'さい',
    '極': 'ごく',
    '恒河沙': 'ごうがしゃ',
    '阿僧祇': 'あそうぎ',
    '那由他': 'なゆた',
    '不可思議': 'ふかしぎ',
    '無量大数': 'むりょうたいすう',
})


# ============================================================================
# Euphonic Shifts
# ============================================================================
# Applied in this order, one literal replacement pass per rule.
# e.g. さんひゃく -> さんびゃく, はちせん -> はっせん, じゅうちょう -> じゅっちょう

SHIFTS: Tuple[Tuple[str, str], ...] = (
    ('さんひ', 'さんび'),
    ('さんせ', 'さんぜ'),
    ('ちち', 'っち'),
    ('ちけ', 'っけ'),
    ('ちひ', 'っぴ'),
    ('くひ', 'っぴ'),
    ('うほ', 'っぽ'),
    ('じゅうち', 'じゅっち'),
    ('じゅうひ', 'じゅっぴ'),
    ('ちせ', 'っせ'),
    ('じゅうせ', 'じゅっせ'),
    ('じゅうけ', 'じゅっけ'),
    ('くけ', 'っけ'),
)


def place_name(place: int) -> Optional[str]:
    """Get the name of a place magnitude, None for the ones place."""
    return PLACES[place]


def reading_of(glyph: str) -> str:
    """Get the standalone kana reading of a digit or place glyph."""
    if glyph == DIGITS[0]:
        return ZERO_READING
    return READINGS[glyph]
