"""Tests for gamut testing and limiting."""

import numpy as np
import pytest

from iptcolor.defaults import LIMIT_STEPS
from iptcolor.gamut import (
    centered_in_gamut,
    desaturate_centered,
    in_gamut,
    in_gamut_packed,
    limit_packed,
    limit_to_gamut,
    limit_to_gamut_arrays,
    pack_limited,
)
from iptcolor.ipt import to_centered
from iptcolor.packing import IPTColor, alpha_int, decode_centered, pack, pack_centered


GRAY_LANES = 0x7F7F00


def _strict_desaturate(i, p, t):
    """The limiter ladder with no tolerance on the gamut test."""
    p2, t2 = p, t
    for attempt in range(LIMIT_STEPS - 1, -1, -1):
        if centered_in_gamut(i, p2, t2, tolerance=0.0):
            break
        progress = attempt / LIMIT_STEPS
        p2, t2 = p * progress, t * progress
    return p2, t2


def _in_gamut_points(rng, count):
    points = []
    while len(points) < count:
        i, p, t = rng.random(3)
        if in_gamut(i, p, t):
            points.append((float(i), float(p), float(t)))
    return points


class TestInGamut:
    """Test the gamut membership check."""

    def test_neutral_axis_in_gamut(self):
        """Every intensity with neutral chroma is displayable, white included."""
        for i in np.linspace(0.0, 1.0, 256):
            assert in_gamut(float(i), 0.5, 0.5)

    def test_extreme_chroma_out_of_gamut(self):
        assert not in_gamut(0.5, 1.0, 1.0)
        assert not in_gamut(0.5, 0.0, 0.0)

    def test_intensity_outside_range(self):
        assert not in_gamut(1.2, 0.5, 0.5)
        assert not in_gamut(-0.2, 0.5, 0.5)

    def test_strict_tolerance(self):
        """Without slack, white sits just outside because of matrix rounding."""
        assert in_gamut(1.0, 0.5, 0.5)
        assert not in_gamut(1.0, 0.5, 0.5, tolerance=0.0)

    def test_vectorized_matches_scalar(self, rng):
        pts = rng.random((200, 3))
        mask = in_gamut(pts[:, 0], pts[:, 1], pts[:, 2])
        assert mask.dtype == bool
        for row, expected in zip(pts, mask):
            assert in_gamut(float(row[0]), float(row[1]), float(row[2])) == expected

    def test_centered_form(self):
        assert centered_in_gamut(0.5, 0.0, 0.0)
        assert not centered_in_gamut(0.5, 1.0, 1.0)

    def test_packed(self):
        assert in_gamut_packed(pack(0.5, 0.5, 0.5))
        assert not in_gamut_packed(pack(0.5, 1.0, 1.0))


class TestLimitToGamut:
    """Test chroma-reducing gamut limiting."""

    def test_saturated_midtone(self):
        """Maximal chroma at mid intensity: intensity and alpha survive, result in gamut."""
        result = limit_to_gamut(0.5, 1.0, 1.0, 1.0)
        assert isinstance(result, IPTColor)
        assert result.intensity == 0.5
        assert result.alpha == 1.0
        assert in_gamut(*result.ipt)

    def test_idempotent_on_in_gamut(self, rng):
        for i, p, t in _in_gamut_points(rng, 200):
            result = limit_to_gamut(i, p, t)
            np.testing.assert_allclose(result.ipt, (i, p, t), atol=1e-12)

    def test_neutral_untouched(self):
        for i in np.linspace(0.0, 1.0, 64):
            result = limit_to_gamut(float(i), 0.5, 0.5)
            assert result.ipt == (float(i), 0.5, 0.5)

    def test_never_increases_chroma(self, rng):
        pts = rng.random((300, 3))
        for i, p, t in pts:
            result = limit_to_gamut(float(i), float(p), float(t))
            before = np.hypot(to_centered(p), to_centered(t))
            after = np.hypot(to_centered(result.protan), to_centered(result.tritan))
            assert after <= before + 1e-12

    def test_always_in_gamut(self, rng):
        pts = rng.random((300, 3))
        for i, p, t in pts:
            result = limit_to_gamut(float(i), float(p), float(t))
            assert in_gamut(*result.ipt)

    def test_keeps_hue_direction(self):
        """Chroma is scaled uniformly, so the P:T ratio is kept."""
        result = limit_to_gamut(0.5, 1.0, 0.75)
        p = to_centered(result.protan)
        t = to_centered(result.tritan)
        assert p == pytest.approx(2.0 * t)

    def test_clamps_inputs(self):
        result = limit_to_gamut(1.5, 0.5, 0.5, 2.0)
        assert result.intensity == 1.0
        assert result.alpha == 1.0


class TestLimitPacked:
    def test_in_gamut_unchanged(self):
        word = pack(0.5, 0.5, 0.5, 1.0)
        assert limit_packed(word) == word

    def test_out_of_gamut_keeps_intensity_and_alpha(self):
        word = pack(0.5, 1.0, 1.0, 0.5)
        result = limit_packed(word)
        assert result & 0xFF == word & 0xFF
        assert result & 0xFE000000 == word & 0xFE000000
        assert (result >> 8 & 0xFF) < 0xFF
        assert (result >> 16 & 0xFF) < 0xFF

    def test_lands_in_gamut_as_stored(self):
        result = limit_packed(pack(0.6, 0.0, 1.0, 1.0))
        assert in_gamut_packed(result)

    def test_random_words_in_gamut_as_stored(self, rng):
        """Each limited word passes the default test, unless the scan reached gray."""
        for word in rng.integers(0, 2 ** 32, size=3000):
            result = limit_packed(int(word))
            assert in_gamut_packed(result) or result & 0xFFFF00 == GRAY_LANES

    def test_never_increases_lane_chroma(self, rng):
        for word in rng.integers(0, 2 ** 32, size=500):
            word = int(word)
            _, p0, t0 = decode_centered(word)
            _, p1, t1 = decode_centered(limit_packed(word))
            assert abs(p1) <= abs(p0)
            assert abs(t1) <= abs(t0)


class TestPackLimited:
    def test_in_gamut_matches_pack_centered(self):
        assert pack_limited(0.5, 0.1, -0.1, 1.0) == pack_centered(0.5, 0.1, -0.1, 1.0)

    def test_in_gamut_as_stored(self, rng):
        for i, p, t in rng.random((1000, 3)):
            word = pack_limited(float(i), float(p) * 2.0 - 1.0, float(t) * 2.0 - 1.0)
            assert in_gamut_packed(word) or word & 0xFFFF00 == GRAY_LANES
            assert word & 0xFF == int(float(i) * 255)
            assert alpha_int(word) == 254

    def test_clamps(self):
        word = pack_limited(2.0, 0.0, 0.0, -1.0)
        assert word & 0xFF == 0xFF
        assert alpha_int(word) == 0


class TestStrictBoundary:
    """GAMUT_TOLERANCE only changes where the limiter stops right at the boundary."""

    def test_matches_strict_scan_outside_tolerance_band(self, rng):
        differing = 0
        for i, p, t in rng.random((2000, 3)):
            i, p, t = float(i), to_centered(float(p)), to_centered(float(t))
            loose = desaturate_centered(i, p, t)
            strict = _strict_desaturate(i, p, t)
            if loose == strict:
                continue
            differing += 1
            assert centered_in_gamut(i, *loose)
            assert not centered_in_gamut(i, *loose, tolerance=0.0)
            assert abs(strict[0]) <= abs(loose[0])
            assert abs(strict[1]) <= abs(loose[1])
        assert differing < 100


class TestLimitArrays:
    """Vectorized limiter agrees with the scalar one."""

    def test_matches_scalar(self, rng):
        pts = rng.random((200, 3))
        i, p, t = limit_to_gamut_arrays(pts[:, 0], pts[:, 1], pts[:, 2])
        for k, (ri, rp, rt) in enumerate(pts):
            expected = limit_to_gamut(float(ri), float(rp), float(rt))
            np.testing.assert_allclose((i[k], p[k], t[k]), expected.ipt, atol=1e-9)

    def test_all_in_gamut(self, rng):
        pts = rng.random((500, 3))
        i, p, t = limit_to_gamut_arrays(pts[:, 0], pts[:, 1], pts[:, 2])
        assert np.all(in_gamut(i, p, t))

    def test_torch(self, rng):
        torch = pytest.importorskip('torch')
        pts = rng.random((100, 3))
        pts_t = torch.from_numpy(pts)
        i_t, p_t, t_t = limit_to_gamut_arrays(pts_t[:, 0], pts_t[:, 1], pts_t[:, 2])
        i, p, t = limit_to_gamut_arrays(pts[:, 0], pts[:, 1], pts[:, 2])
        assert isinstance(p_t, torch.Tensor)
        np.testing.assert_allclose(p_t.numpy(), p, atol=1e-9)
        np.testing.assert_allclose(t_t.numpy(), t, atol=1e-9)
        np.testing.assert_allclose(i_t.numpy(), i, atol=1e-12)
