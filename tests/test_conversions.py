"""Tests for RGB format conversions of packed colors."""

import numpy as np
import pytest

from iptcolor import (
    ColorParseError,
    from_abgr8888,
    from_hex,
    from_rgba,
    from_rgba8888,
    in_gamut_packed,
    to_abgr8888,
    to_hex,
    to_rgba,
    to_rgba8888,
)
from iptcolor.conversions import blue_int, decode_linear, green_int, red_int
from iptcolor.defaults import RGB_OUTPUT_SCALE
from iptcolor.gamut import centered_in_gamut
from iptcolor.ipt import ipt_to_srgb, srgb_to_ipt
from iptcolor.packing import alpha_int
from iptcolor.transfer import forward_gamma


class TestRoundTrip:
    """RGBA8888 -> packed -> linear RGB."""

    def test_quantized_roundtrip(self):
        """Byte quantization of the IPT lanes keeps linear RGB close."""
        levels = range(0, 256, 17)
        for r in levels:
            for g in levels:
                for b in levels:
                    word = from_rgba8888(r << 24 | g << 16 | b << 8 | 0xFF)
                    expected = [forward_gamma(c / 255.0) for c in (r, g, b)]
                    np.testing.assert_allclose(decode_linear(word), expected, atol=0.025)

    def test_float_roundtrip_bytes(self):
        """Without lane quantization, display bytes come back within one step.

        Channels near zero sit on the steep part of the square root, so they
        only come back within a few steps.
        """
        levels = range(0, 256, 17)
        for r in levels:
            for g in levels:
                for b in levels:
                    back = ipt_to_srgb(*srgb_to_ipt(r / 255.0, g / 255.0, b / 255.0))
                    for got, want in zip(back, (r, g, b)):
                        limit = 1 if want >= 34 else 4
                        assert abs(round(got * 255.0) - want) <= limit

    def test_teal_float_path(self):
        """(0, 127, 127) comes back within one step on every channel, and is in gamut."""
        ipt = srgb_to_ipt(0.0, 127 / 255.0, 127 / 255.0)
        back = ipt_to_srgb(*ipt)
        for got, want in zip(back, (0, 127, 127)):
            assert abs(int(got * RGB_OUTPUT_SCALE) - want) <= 1
        assert centered_in_gamut(*ipt)

    def test_teal_packed(self):
        """(0, 127, 127) comes back within one step on green and blue, and is displayable."""
        word = from_rgba8888(0x007F7FFF)
        assert abs(green_int(word) - 127) <= 1
        assert abs(blue_int(word) - 127) <= 1
        assert decode_linear(word)[0] == pytest.approx(0.0, abs=0.025)
        assert in_gamut_packed(word)

    def test_black_and_white(self):
        black = from_rgba8888(0x000000FF)
        white = from_rgba8888(0xFFFFFFFF)
        assert black & 0xFF == 0
        assert white & 0xFF == 0xFF
        assert red_int(black) == 0
        assert red_int(white) >= 250


class TestAlpha:
    def test_opaque_widened_to_255(self):
        assert to_rgba8888(from_rgba8888(0x808080FF)) & 0xFF == 0xFF

    def test_transparent(self):
        word = from_rgba8888(0x80808000)
        assert alpha_int(word) == 0
        assert to_rgba8888(word) & 0xFF == 0

    def test_odd_alpha_rounds_down(self):
        assert alpha_int(from_rgba8888(0x80808081)) == 0x80

    def test_float_alpha(self):
        assert to_rgba(from_rgba(0.5, 0.5, 0.5, 1.0))[3] == 1.0
        assert to_rgba(from_rgba(0.5, 0.5, 0.5, 0.0))[3] == 0.0


class TestFormats:
    def test_abgr_matches_rgba(self):
        """Same color in either byte order gives the same packed word."""
        assert from_abgr8888(0xFF332211) == from_rgba8888(0x112233FF)

    def test_abgr_output_is_byte_swapped(self):
        word = from_rgba8888(0xD2691DFF)
        rgba = to_rgba8888(word)
        abgr = to_abgr8888(word)
        assert abgr & 0xFF == rgba >> 24 & 0xFF
        assert abgr >> 8 & 0xFF == rgba >> 16 & 0xFF
        assert abgr >> 16 & 0xFF == rgba >> 8 & 0xFF

    def test_float_input_close_to_int_input(self):
        word_f = from_rgba(0xD2 / 255, 0x69 / 255, 0x1D / 255)
        word_i = from_rgba8888(0xD2691DFF)
        for shift in (0, 8, 16):
            assert abs((word_f >> shift & 0xFF) - (word_i >> shift & 0xFF)) <= 1

    def test_to_rgba_in_unit_range(self, sample_words):
        for word in sample_words:
            for c in to_rgba(word):
                assert 0.0 <= c <= 1.0


class TestHex:
    def test_parse_with_and_without_hash(self):
        assert from_hex("#FF7F00") == from_rgba8888(0xFF7F00FF)
        assert from_hex("ff7f00") == from_rgba8888(0xFF7F00FF)

    def test_parse_with_alpha(self):
        assert from_hex("FF7F0080") == from_rgba8888(0xFF7F0080)

    def test_wrong_length(self):
        with pytest.raises(ColorParseError):
            from_hex("#12345")

    def test_not_hex(self):
        with pytest.raises(ColorParseError) as excinfo:
            from_hex("GGHHII")
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_to_hex_format(self):
        text = to_hex(from_hex("#3088B8"))
        assert len(text) == 8
        assert text == text.upper()
        assert text.endswith("FF")
