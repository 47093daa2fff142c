"""Unit tests for input masks.

Tests cover:
- Literal extraction and stripping
- Filling complete and partial values
- Masks without literals and overlong input
"""

from formfields.masking import apply_mask, mask_literals, strip_mask


class TestMaskLiterals:
    """Test extraction and removal of mask literals."""

    def test_literals_of_date_mask(self):
        """Should return every non-slot character in order."""
        assert mask_literals("__.__.____ __:__") == ".. :"

    def test_strip_removes_only_literals(self):
        """Should remove separators and keep the typed characters."""
        assert strip_mask("26.12.2000 10:30", "__.__.____ __:__") == "261220001030"

    def test_strip_with_regex_special_literal(self):
        """Should treat literals such as + as plain characters."""
        assert strip_mask("+7999", "+_______________") == "7999"

    def test_strip_without_literals_is_identity(self):
        """Should leave the value untouched when the mask has no literals."""
        assert strip_mask("a.b", "____") == "a.b"
        assert strip_mask("a.b", "") == "a.b"


class TestApplyMask:
    """Test filling mask slots."""

    def test_complete_value(self):
        """Should insert every literal when all slots are filled."""
        assert apply_mask("26122000", "__.__.____") == "26.12.2000"

    def test_partial_value_is_cut_at_first_empty_slot(self):
        """Should keep the literal before the first unfilled slot."""
        assert apply_mask("2612", "__.__.____") == "26.12."

    def test_already_masked_value_is_stable(self):
        """Should return a fully masked value unchanged."""
        assert apply_mask("00:1A:2B:3C:4D:5E", "__:__:__:__:__:__") == "00:1A:2B:3C:4D:5E"

    def test_extra_characters_are_dropped(self):
        """Should ignore input beyond the number of slots."""
        assert apply_mask("123456", "__:__") == "12:34"

    def test_only_literals_gives_empty_string(self):
        """Should return an empty string when nothing but literals was typed."""
        assert apply_mask("+", "+_______________") == ""

    def test_leading_literal(self):
        """Should prepend a leading literal to the typed digits."""
        assert apply_mask("79999999999", "+_______________") == "+79999999999"
