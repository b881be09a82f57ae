"""Tests for random in-gamut color generation."""

import logging
import random

import pytest

from iptcolor.errors import SamplingExhaustedError
from iptcolor.gamut import in_gamut
from iptcolor.packing import IPTColor, alpha_int
from iptcolor.sampling import estimate_gamut_fraction, random_color, random_packed


class _ConstantRng:
    """Returns the same value forever."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class TestRandomColor:
    def test_ten_thousand_draws_in_gamut(self, rng):
        for _ in range(10000):
            color = random_color(rng)
            assert in_gamut(*color.ipt)
            assert color.alpha == 1.0

    def test_stdlib_random(self):
        color = random_color(random.Random(3))
        assert isinstance(color, IPTColor)
        assert in_gamut(*color.ipt)

    def test_reproducible(self):
        a = random_color(random.Random(11))
        b = random_color(random.Random(11))
        assert a == b

    def test_gray_accepted_first_try(self):
        color = random_color(_ConstantRng(0.5), max_attempts=1)
        assert color == IPTColor(0.5, 0.5, 0.5, 1.0)

    def test_exhausted(self, caplog):
        caplog.set_level(logging.DEBUG, logger="iptcolor.sampling")
        with pytest.raises(SamplingExhaustedError):
            random_color(_ConstantRng(1.0), max_attempts=5)
        assert "5 attempts" in caplog.text

    def test_packed(self, rng):
        word = random_packed(rng)
        assert alpha_int(word) == 254


class TestGamutFraction:
    def test_fraction_in_range(self, rng):
        fraction = estimate_gamut_fraction(rng, 2000)
        assert 0.0 < fraction < 1.0

    def test_rejects_empty_sample(self, rng):
        with pytest.raises(ValueError):
            estimate_gamut_fraction(rng, 0)
