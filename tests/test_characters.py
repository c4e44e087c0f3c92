"""
Tests for characters.py - kana conversion and romanization.
"""

import pytest

from kazuyomi.characters import (
    as_hiragana, as_katakana, convert_script, normalize_digits, romanize_kana,
)


class TestKanaConversion:
    """Tests for hiragana/katakana conversion."""

    def test_as_katakana(self):
        assert as_katakana("いっちょう") == "イッチョウ"

    def test_as_hiragana(self):
        assert as_hiragana("ゼロ") == "ぜろ"

    def test_non_kana_untouched(self):
        assert as_katakana("一万") == "一万"


class TestNormalizeDigits:
    """Tests for normalize_digits."""

    def test_full_width(self):
        assert normalize_digits("０１２３４５６７８９") == "0123456789"

    def test_mixed(self):
        assert normalize_digits("1２3") == "123"


class TestRomanize:
    """Tests for romanize_kana."""

    @pytest.mark.parametrize("kana,expected", [
        ("ご", "go"),
        ("ぜろ", "zero"),
        ("きゅう", "kyuu"),
        ("さんびゃく", "sanbyaku"),
        ("ろっぴゃく", "roppyaku"),
        ("はっせん", "hassen"),
        ("いっちょう", "itchou"),
        ("じゅっけい", "jukkei"),
        ("じょ", "jo"),
        ("ごうがしゃ", "gougasha"),
        ("むりょうたいすう", "muryoutaisuu"),
        ("イッチョウ", "itchou"),
        ("いちまんいち", "ichiman'ichi"),
        ("はんよう", "han'you"),
    ])
    def test_romanize(self, kana, expected):
        assert romanize_kana(kana) == expected


class TestConvertScript:
    """Tests for convert_script."""

    def test_scripts(self):
        assert convert_script("はっせん", "hiragana") == "はっせん"
        assert convert_script("はっせん", "katakana") == "ハッセン"
        assert convert_script("はっせん", "romaji") == "hassen"

    def test_unknown_script(self):
        with pytest.raises(ValueError):
            convert_script("はっせん", "braille")
