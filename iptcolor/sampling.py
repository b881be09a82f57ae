"""Random in-gamut IPT colors by rejection sampling.

``rng`` can be anything with a ``random()`` method returning floats in
[0, 1): ``random.Random``, ``numpy.random.Generator``, or a seeded stub in
tests. Draws are uniform over the in-gamut region of the IPT unit cube.
"""

import logging

from .errors import SamplingExhaustedError
from .gamut import in_gamut
from .packing import IPTColor

logger = logging.getLogger(__name__)


def random_color(rng, max_attempts: int | None = None) -> IPTColor:
    """Draw a uniformly random opaque color inside the gamut.

    Rejection sampling over [0, 1]^3; roughly a quarter to a third of the cube
    is in gamut, so a handful of draws is typical.

    Args:
        rng: Source of uniform floats via ``rng.random()``
        max_attempts: Give up after this many rejected draws (None = never)

    Raises:
        SamplingExhaustedError: If ``max_attempts`` draws all fell outside
    """
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        i = float(rng.random())
        p = float(rng.random())
        t = float(rng.random())
        if in_gamut(i, p, t):
            return IPTColor(i, p, t, 1.0)
    logger.debug("No in-gamut color after %d attempts", attempts)
    raise SamplingExhaustedError(f"No in-gamut color found in {max_attempts} attempts")


def random_packed(rng, max_attempts: int | None = None) -> int:
    """random_color() as a packed word."""
    return random_color(rng, max_attempts).pack()


def estimate_gamut_fraction(rng, samples: int = 10000) -> float:
    """Fraction of the IPT unit cube that lies inside the gamut.

    The reciprocal is the expected number of draws random_color() needs.
    """
    if samples <= 0:
        raise ValueError(f"samples must be positive, got {samples}")
    hits = 0
    for _ in range(samples):
        if in_gamut(float(rng.random()), float(rng.random()), float(rng.random())):
            hits += 1
    return hits / samples
