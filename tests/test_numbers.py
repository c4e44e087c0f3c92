"""
Tests for numbers.py - Japanese number spelling.
"""

import random

import pytest

from kazuyomi.constants import DIGITS, MAX_SPELLABLE, PLACES, SHIFTS
from kazuyomi.numbers import (
    Branch, InvalidInput, Leaf, Spelling, UnsupportedMagnitude,
    apply_shifts, place_tree, render_groups, render_tree, sanitize,
    spell, spell_full, spell_number, spell_reading, tree_to_dict, tree_value,
)


def _sample_numbers():
    """Fixed sample of numbers across every grouping level."""
    rng = random.Random(1234)
    numbers = list(range(0, 200)) + [9999, 10000, 10001, 99999999, 10 ** 8]
    for digits in range(1, 73):
        numbers.append(rng.randrange(10 ** (digits - 1), 10 ** digits))
    numbers.append(MAX_SPELLABLE)
    return numbers


# =============================================================================
# Input sanitizing
# =============================================================================


class TestSanitize:
    """Tests for sanitize."""

    def test_plain_digits(self):
        assert sanitize("12345") == 12345

    def test_interior_whitespace(self):
        """Spaces between digits are ignored."""
        assert sanitize("1 2 3") == 123

    def test_surrounding_whitespace(self):
        assert sanitize("  42\t\n") == 42

    def test_ideographic_space(self):
        assert sanitize("1　0") == 10

    def test_full_width_digits(self):
        assert sanitize("１２３") == 123

    def test_leading_zeros(self):
        assert sanitize("007") == 7
        assert sanitize("0" * 100 + "5") == 5

    def test_beyond_fixed_width(self):
        """Values past 64 bits stay exact."""
        assert sanitize("1" + "0" * 68) == 10 ** 68

    @pytest.mark.parametrize("text", ["", "   ", "12a", "-5", "3.14", "+7", "1,000", "五"])
    def test_invalid(self, text):
        with pytest.raises(InvalidInput) as exc_info:
            sanitize(text)
        assert exc_info.value.text == text

    def test_none(self):
        with pytest.raises(InvalidInput):
            sanitize(None)

    def test_too_many_digits(self):
        with pytest.raises(UnsupportedMagnitude):
            sanitize("1" + "0" * 72)


# =============================================================================
# Decomposer
# =============================================================================


class TestPlaceTree:
    """Tests for place_tree and tree_value."""

    def test_zero_is_empty(self):
        assert place_tree(0) == {}

    def test_small_number(self):
        assert place_tree(1234) == {3: Leaf(1), 2: Leaf(2), 1: Leaf(3), 0: Leaf(4)}

    def test_zero_places_omitted(self):
        assert place_tree(1005) == {3: Leaf(1), 0: Leaf(5)}

    def test_nested_group(self):
        """Four-digit values at 万 and above become a sub-tree."""
        expected = {
            8: Leaf(1),
            4: Branch({3: Leaf(2), 2: Leaf(3), 1: Leaf(4), 0: Leaf(5)}),
            3: Leaf(6),
            2: Leaf(7),
            1: Leaf(8),
            0: Leaf(9),
        }
        assert place_tree(123456789) == expected

    def test_largest_place_first(self):
        tree = place_tree(123456789)
        assert list(tree) == sorted(tree, reverse=True)

    def test_tree_to_dict(self):
        assert tree_to_dict(place_tree(100005)) == {4: {1: 1}, 0: 5}

    @pytest.mark.parametrize("n", _sample_numbers())
    def test_reconstructs_number(self, n):
        assert tree_value(place_tree(n)) == n

    @pytest.mark.parametrize("n", _sample_numbers())
    def test_sparse_and_shallow(self, n):
        """Every entry is nonzero and sub-trees only hold digits."""
        for place, value in place_tree(n).items():
            assert place in PLACES
            if isinstance(value, Branch):
                assert value.tree
                for sub_value in value.tree.values():
                    assert isinstance(sub_value, Leaf)
                    assert 1 <= sub_value.digit <= 9
            else:
                assert 1 <= value.digit <= 9

    def test_negative_rejected(self):
        with pytest.raises(UnsupportedMagnitude):
            place_tree(-1)

    def test_above_largest_place_rejected(self):
        with pytest.raises(UnsupportedMagnitude):
            place_tree(MAX_SPELLABLE + 1)


# =============================================================================
# Namer
# =============================================================================


class TestKanji:
    """Tests for the kanji spelling."""

    @pytest.mark.parametrize("n", range(10))
    def test_single_digits(self, n):
        assert spell(str(n)) == DIGITS[n]

    def test_zero_glyph(self):
        assert spell("0") == "ゼロ"

    @pytest.mark.parametrize("n", range(10, 100))
    def test_tens_drop_one(self, n):
        """一 is left out before 十 only when the tens digit is 1."""
        tens, ones = divmod(n, 10)
        kanji = spell(str(n))
        prefix = "十" if tens == 1 else DIGITS[tens] + "十"
        assert kanji.startswith(prefix)
        assert kanji == prefix + (DIGITS[ones] if ones else "")

    @pytest.mark.parametrize("n,expected", [
        (10, "十"),
        (11, "十一"),
        (100, "百"),
        (123, "百二十三"),
        (1000, "千"),
        (1005, "千五"),
        (10000, "一万"),
        (10001, "一万一"),
        (20010, "二万十"),
        (100000, "十万"),
        (100005, "十万五"),
        (110000, "十一万"),
        (1000000, "百万"),
        (10000000, "千万"),
        (30000000, "三千万"),
        (12345, "一万二千三百四十五"),
        (123456789, "一億二千三百四十五万六千七百八十九"),
        (10 ** 8, "一億"),
        (10 ** 12, "一兆"),
        (10 ** 15, "千兆"),
        (10 ** 16, "一京"),
        (10 ** 52, "一恒河沙"),
        (10 ** 64, "一不可思議"),
        (10 ** 68, "一無量大数"),
        (100000100, "一億百"),
    ])
    def test_spelling(self, n, expected):
        assert spell(str(n)) == expected

    def test_one_kept_before_man(self):
        assert spell("10000") == "一万"
        assert spell("10000").startswith("一")

    def test_largest_number(self):
        kanji = spell(str(MAX_SPELLABLE))
        assert kanji.startswith("九千九百九十九無量大数")
        assert kanji.endswith("万九千九百九十九")

    def test_every_place_name(self):
        for place, name in PLACES.items():
            if place >= 4:
                assert spell(str(10 ** place)) == "一" + name

    def test_render_tree(self):
        assert render_tree(place_tree(300)) == ("三百", "さんひゃく")

    def test_render_groups(self):
        groups = render_groups(place_tree(100000100))
        assert groups == [("一億", "いちおく"), ("百", "ひゃく")]

    def test_render_empty_tree(self):
        assert render_tree({}) == ("ゼロ", "ぜろ")


# =============================================================================
# Phonetic rewriter
# =============================================================================


class TestShifts:
    """Tests for apply_shifts."""

    def test_juuchi(self):
        assert apply_shifts("じゅうちょう") == "じゅっちょう"

    @pytest.mark.parametrize("pattern,replacement", SHIFTS)
    def test_each_rule(self, pattern, replacement):
        assert apply_shifts(pattern) == replacement

    @pytest.mark.parametrize("pattern,replacement", SHIFTS)
    def test_rule_does_not_retrigger(self, pattern, replacement):
        assert pattern not in replacement

    def test_pass_through(self):
        assert apply_shifts("にじゅうご") == "にじゅうご"

    def test_custom_rules(self):
        assert apply_shifts("abc", [("b", "x"), ("x", "y")]) == "ayc"


class TestReading:
    """Tests for the spoken reading."""

    @pytest.mark.parametrize("n,expected", [
        (0, "ぜろ"),
        (1, "いち"),
        (4, "よん"),
        (9, "きゅう"),
        (10, "じゅう"),
        (100, "ひゃく"),
        (300, "さんびゃく"),
        (600, "ろっぴゃく"),
        (800, "はっぴゃく"),
        (1000, "せん"),
        (3000, "さんぜん"),
        (8000, "はっせん"),
        (10000, "いちまん"),
        (3000000, "さんびゃくまん"),
        (30000000, "さんぜんまん"),
        (12345, "いちまんにせんさんびゃくよんじゅうご"),
        (10 ** 12, "いっちょう"),
        (10 ** 13, "じゅっちょう"),
        (8 * 10 ** 12, "はっちょう"),
        (10 ** 16, "いっけい"),
        (6 * 10 ** 16, "ろっけい"),
        (8 * 10 ** 16, "はっけい"),
        (10 ** 17, "じゅっけい"),
        (10 ** 18, "ひゃっけい"),
        (10 ** 68, "いちむりょうたいすう"),
    ])
    def test_reading(self, n, expected):
        assert spell_reading(str(n)) == expected

    def test_no_shift_across_groups(self):
        """億 followed by 百 is not contracted."""
        assert spell_reading("100000100") == "いちおくひゃく"


# =============================================================================
# Orchestrator
# =============================================================================


class TestSpell:
    """Tests for spell, spell_reading, spell_full and spell_number."""

    @pytest.mark.parametrize("text", ["", "12a", "-5", "3.14"])
    def test_invalid_gives_nothing(self, text):
        assert spell(text) is None
        assert spell_reading(text) is None
        assert spell_full(text) is None

    def test_too_large_gives_nothing(self):
        assert spell("1" + "0" * 72) is None

    def test_whitespace(self):
        assert spell("1 2 3") == "百二十三"

    def test_deterministic(self):
        text = "98765432109876543210"
        assert spell(text) == spell(text)
        assert spell_reading(text) == spell_reading(text)

    def test_spell_full(self):
        assert spell_full("8000") == Spelling(8000, "八千", "はっせん")

    def test_spell_number(self):
        result = spell_number(12345)
        assert result.number == 12345
        assert result.kanji == "一万二千三百四十五"
        assert result.reading == "いちまんにせんさんびゃくよんじゅうご"

    def test_spell_number_out_of_range(self):
        with pytest.raises(UnsupportedMagnitude):
            spell_number(-3)

    def test_package_api(self):
        import kazuyomi

        assert kazuyomi.spell("10000") == "一万"
        assert kazuyomi.read("300") == "さんびゃく"
        assert kazuyomi.read("300", script="katakana") == "サンビャク"
        assert kazuyomi.read("abc") is None
