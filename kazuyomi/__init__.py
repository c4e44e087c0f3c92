"""
Kazuyomi: Japanese number speller
Spells out integers in kanji numerals up to 無量大数 (10^68), with readings.
"""

from typing import Optional

__version__ = "0.1.0"


def spell(text: str) -> Optional[str]:
    """
    Spell out a number in kanji numerals.

    This is the main high-level API.

    Args:
        text: Number as typed, e.g. "12345" or "1 000". Spaces are ignored.

    Returns:
        Kanji spelling, or None if the text is not a spellable number.

    Example:
        >>> import kazuyomi
        >>> kazuyomi.spell("12345")
        '一万二千三百四十五'
    """
    from kazuyomi.numbers import spell as _spell
    return _spell(text)


def read(text: str, script: str = "hiragana") -> Optional[str]:
    """
    Spoken reading of a number.

    Args:
        text: Number as typed.
        script: 'hiragana', 'katakana' or 'romaji'.

    Returns:
        Reading with euphonic changes applied, or None for invalid input.

    Example:
        >>> import kazuyomi
        >>> kazuyomi.read("300")
        'さんびゃく'
        >>> kazuyomi.read("300", script="romaji")
        'sanbyaku'
    """
    from kazuyomi.numbers import spell_reading
    from kazuyomi.characters import convert_script

    reading = spell_reading(text)
    if reading is None:
        return None
    return convert_script(reading, script)
