"""
Tests for the validation module.

Covers: mask_key.

Copyright (c) 2026 Snapp'
Author: Yannis Duvignau (yduvignau@snapp.fr)
"""

from peekme_cli.validation import mask_key


class TestMaskKey:
    """Tests for the mask_key helper."""

    def test_long_key(self):
        assert mask_key("abcdefgh1234") == "***1234"

    def test_exactly_five_chars(self):
        assert mask_key("abcde") == "***bcde"

    def test_four_chars(self):
        assert mask_key("abcd") == "***"

    def test_empty_key(self):
        assert mask_key("") == "***"
