"""
Character handling and kana conversion for Kazuyomi.

Provides the kana tables used to present numeral readings in hiragana,
katakana or Hepburn romaji, and the width normalization applied to
numeric input before it is spelled out.
"""

from typing import Dict, List

# ============================================================================
# Kana Character Tables
# ============================================================================

# Sokuon (gemination marker)
SOKUON_CHARACTERS = {"sokuon": "っッ"}

# Small kana modifiers and long vowel marker
MODIFIER_CHARACTERS = {
    "+a": "ぁァ", "+i": "ぃィ", "+u": "ぅゥ", "+e": "ぇェ", "+o": "ぉォ",
    "+ya": "ゃャ", "+yu": "ゅュ", "+yo": "ょョ", "+wa": "ゎヮ",
    "long_vowel": "ー"
}

# Main kana table
KANA_CHARACTERS = {
    "a": "あア",     "i": "いイ",     "u": "うウ",     "e": "えエ",     "o": "おオ",
    "ka": "かカ",    "ki": "きキ",    "ku": "くク",    "ke": "けケ",    "ko": "こコ",
    "sa": "さサ",    "shi": "しシ",   "su": "すス",    "se": "せセ",    "so": "そソ",
    "ta": "たタ",    "chi": "ちチ",   "tsu": "つツ",   "te": "てテ",    "to": "とト",
    "na": "なナ",    "ni": "にニ",    "nu": "ぬヌ",    "ne": "ねネ",    "no": "のノ",
    "ha": "はハ",    "hi": "ひヒ",    "fu": "ふフ",    "he": "へヘ",    "ho": "ほホ",
    "ma": "まマ",    "mi": "みミ",    "mu": "むム",    "me": "めメ",    "mo": "もモ",
    "ya": "やヤ",                     "yu": "ゆユ",                     "yo": "よヨ",
    "ra": "らラ",    "ri": "りリ",    "ru": "るル",    "re": "れレ",    "ro": "ろロ",
    "wa": "わワ",    "wi": "ゐヰ",                     "we": "ゑヱ",    "wo": "をヲ",
    "n": "んン",
    # Voiced consonants (dakuten)
    "ga": "がガ",    "gi": "ぎギ",    "gu": "ぐグ",    "ge": "げゲ",    "go": "ごゴ",
    "za": "ざザ",    "ji": "じジ",    "zu": "ずズ",    "ze": "ぜゼ",    "zo": "ぞゾ",
    "da": "だダ",    "dji": "ぢヂ",   "dzu": "づヅ",   "de": "でデ",    "do": "どド",
    "ba": "ばバ",    "bi": "びビ",    "bu": "ぶブ",    "be": "べベ",    "bo": "ぼボ",
    "pa": "ぱパ",    "pi": "ぴピ",    "pu": "ぷプ",    "pe": "ぺペ",    "po": "ぽポ",
    "vu": "ゔヴ",
}

# Combined character table
ALL_CHARACTERS = {
    **SOKUON_CHARACTERS,
    **MODIFIER_CHARACTERS,
    **KANA_CHARACTERS
}

# ============================================================================
# Character Class Mapping
# ============================================================================

# Build character -> class mapping
CHAR_CLASS_HASH: Dict[str, str] = {}
for char_class, chars in ALL_CHARACTERS.items():
    for char in chars:
        CHAR_CLASS_HASH[char] = char_class


def get_char_class(char: str) -> str:
    """
    Get the character class for a kana character.

    Args:
        char: A single character.

    Returns:
        Character class name (e.g., 'ka', 'shi', 'sokuon') or the character itself.
    """
    return CHAR_CLASS_HASH.get(char, char)


# ============================================================================
# Character Width Normalization
# ============================================================================

FULL_WIDTH_DIGITS = "０１２３４５６７８９"
HALF_WIDTH_DIGITS = "0123456789"

_DIGIT_NORM_MAP = str.maketrans(FULL_WIDTH_DIGITS, HALF_WIDTH_DIGITS)


def normalize_digits(text: str) -> str:
    """Convert full-width digits (０-９) to ASCII digits."""
    return text.translate(_DIGIT_NORM_MAP)


# ============================================================================
# Kana Conversion
# ============================================================================

def as_hiragana(text: str) -> str:
    """
    Convert katakana to hiragana.

    Args:
        text: Text to convert.

    Returns:
        Text with katakana converted to hiragana.
    """
    result = []
    for char in text:
        char_class = CHAR_CLASS_HASH.get(char)
        if char_class:
            # Hiragana is the first character in the pair
            result.append(ALL_CHARACTERS[char_class][0])
        else:
            result.append(char)

    return ''.join(result)


def as_katakana(text: str) -> str:
    """
    Convert hiragana to katakana.

    Args:
        text: Text to convert.

    Returns:
        Text with hiragana converted to katakana.
    """
    result = []
    for char in text:
        char_class = CHAR_CLASS_HASH.get(char)
        if char_class:
            # Katakana is the last character in the pair
            result.append(ALL_CHARACTERS[char_class][-1])
        else:
            result.append(char)

    return ''.join(result)


# ============================================================================
# Romanization
# ============================================================================

# Stems that absorb the y of a following small ゃ/ゅ/ょ (しゃ -> sha, not shya)
_PALATAL_STEMS = {"sh": "sh", "ch": "ch", "j": "j", "dj": "j"}

# Classes after which ん is written n' (まんいち -> man'ichi)
_N_APOSTROPHE_NEXT = ("a", "i", "u", "e", "o", "ya", "yu", "yo")


def _yoon(base: str, modifier: str) -> str:
    """Join an i-row class with a small ya/yu/yo, e.g. ki + +yo -> kyo."""
    vowel = modifier[-1]
    stem = base[:-1]
    if stem in _PALATAL_STEMS:
        return _PALATAL_STEMS[stem] + vowel
    return stem + "y" + vowel


def _geminate_romaji(syllable: str) -> str:
    """Double the leading consonant for a preceding sokuon (っち -> tchi)."""
    if syllable.startswith("ch"):
        return "t" + syllable
    if syllable[:1] in "aeiou":
        return syllable
    return syllable[0] + syllable


def romanize_kana(kana: str) -> str:
    """
    Romanize kana using simplified Hepburn.

    Long vowels are written out (きゅう -> kyuu) rather than with macrons.

    Args:
        kana: Hiragana or katakana text.

    Returns:
        Romanized text. Characters outside the kana tables pass through.

    Example:
        >>> romanize_kana("いっちょう")
        'itchou'
        >>> romanize_kana("ろっぴゃく")
        'roppyaku'
    """
    parts: List[str] = []
    geminate_next = False
    i = 0

    while i < len(kana):
        cc = get_char_class(kana[i])

        if cc == "sokuon":
            geminate_next = True
            i += 1
            continue

        next_cc = get_char_class(kana[i + 1]) if i + 1 < len(kana) else None

        if cc in KANA_CHARACTERS and cc.endswith("i") and next_cc in ("+ya", "+yu", "+yo"):
            syllable = _yoon(cc, next_cc)
            i += 2
        elif cc == "long_vowel":
            syllable = parts[-1][-1] if parts else ""
            i += 1
        elif cc == "n" and next_cc in _N_APOSTROPHE_NEXT:
            syllable = "n'"
            i += 1
        else:
            syllable = cc
            i += 1

        if geminate_next and syllable:
            syllable = _geminate_romaji(syllable)
            geminate_next = False

        parts.append(syllable)

    return ''.join(parts)


def convert_script(kana: str, script: str = "hiragana") -> str:
    """
    Render a hiragana reading in the requested script.

    Args:
        kana: Reading in hiragana.
        script: One of 'hiragana', 'katakana', 'romaji'.

    Returns:
        Converted reading.

    Raises:
        ValueError: If the script is unknown.
    """
    if script == "hiragana":
        return as_hiragana(kana)
    if script == "katakana":
        return as_katakana(kana)
    if script == "romaji":
        return romanize_kana(kana)
    raise ValueError(f"Unknown script: {script}")


SCRIPTS = ("hiragana", "katakana", "romaji")
