"""
Tests for the composite field codecs.

These tests verify resolution and squeeze-set encoding, decoding and toggling.
"""

import pytest

from sensorio.core.codecs import (
    COMMON_SQUEEZES,
    decode_resolution,
    decode_squeezes,
    encode_resolution,
    encode_squeezes,
    parse_decimal,
    toggle_squeeze,
)


class TestResolutionCodec:
    """Tests for the "W x H" resolution codec."""
    
    def test_encode_uses_single_spaces(self):
        """Test that encoding pads the separator with one space on each side."""
        assert encode_resolution("4096", "2160") == "4096 x 2160"
    
    @pytest.mark.parametrize("width,height", [("4096", "2160"), ("0", "0"), ("1920", "1080")])
    def test_decode_inverts_encode(self, width, height):
        """Test that decoding an encoded pair returns the same pair."""
        assert decode_resolution(encode_resolution(width, height)) == (width, height)
    
    def test_decode_zero(self):
        """Test decoding the default resolution."""
        assert decode_resolution("0 x 0") == ("0", "0")
    
    def test_decode_without_spaces(self):
        """Test that missing spaces around the separator are tolerated."""
        assert decode_resolution("640x480") == ("640", "480")
    
    def test_decode_missing_components_default_to_zero(self):
        """Test that absent or empty halves decode to "0"."""
        assert decode_resolution("") == ("0", "0")
        assert decode_resolution(None) == ("0", "0")
        assert decode_resolution("1920") == ("1920", "0")
        assert decode_resolution(" x 1080") == ("0", "1080")


class TestSqueezeCodec:
    """Tests for the ';'-joined squeeze set codec."""
    
    def test_decode_drops_empty_tokens(self):
        """Test that empty tokens are removed on decode."""
        assert decode_squeezes("1.5;;2.0;") == ["1.5", "2.0"]
        assert decode_squeezes("") == []
    
    def test_codec_preserves_manual_order(self):
        """Test that decode/encode never re-sorts manually entered text."""
        assert decode_squeezes("2.0;1.5") == ["2.0", "1.5"]
        assert encode_squeezes(["2.0", "1.5"]) == "2.0;1.5"
    
    def test_toggle_sorts_ascending_regardless_of_order(self):
        """Test that toggled additions end up in ascending numeric order."""
        assert toggle_squeeze(toggle_squeeze("", "1.3"), "1.25") == "1.25;1.3"
        assert toggle_squeeze(toggle_squeeze("", "1.25"), "1.3") == "1.25;1.3"
    
    def test_toggle_numeric_not_lexical(self):
        """Test that ordering is numeric (1.8 before 1.33 lexically, after numerically)."""
        assert toggle_squeeze("1.8", "1.33") == "1.33;1.8"
    
    def test_toggle_removes_present_token(self):
        """Test that toggling a present token removes it and keeps the rest as is."""
        assert toggle_squeeze("2.0;1.5;1.3", "1.5") == "2.0;1.3"
        assert toggle_squeeze("1.5", "1.5") == ""
    
    def test_toggle_add_normalizes_manual_order(self):
        """Test that adding a token sorts a manually ordered set."""
        assert toggle_squeeze("2.0;1.5", "1.3") == "1.3;1.5;2.0"
    
    def test_toggle_add_drops_repeated_tokens(self):
        """Test that a hand-typed repeated token collapses when a ratio is added."""
        assert toggle_squeeze("1.3;1.3", "1.25") == "1.25;1.3"
        assert toggle_squeeze("2.0;1.5;2.0", "1.3") == "1.3;1.5;2.0"
    
    def test_common_squeezes_are_ascending(self):
        """Test that the preset palette is already in toggle order."""
        assert sorted(COMMON_SQUEEZES, key=float) == COMMON_SQUEEZES


class TestParseDecimal:
    """Tests for lenient number parsing."""
    
    def test_plain_numbers(self):
        assert parse_decimal("36.00") == 36.0
        assert parse_decimal("-1.5") == -1.5
    
    def test_leading_number_with_trailing_text(self):
        """Test that trailing units are ignored."""
        assert parse_decimal("10.5mm") == 10.5
    
    def test_non_numeric_is_zero(self):
        """Test that empty, missing and non-numeric text parse as 0."""
        assert parse_decimal("") == 0.0
        assert parse_decimal(None) == 0.0
        assert parse_decimal("abc") == 0.0
        assert parse_decimal("nan") == 0.0
