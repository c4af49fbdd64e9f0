import logging
import time

import numpy as np

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1_000_000


def count_inside(rng, samples):
    x = rng.uniform(-1.0, 1.0, samples)
    y = rng.uniform(-1.0, 1.0, samples)
    return int(np.count_nonzero(x * x + y * y <= 1.0))


def monte_carlo_pi(total_samples, seed=None, chunk_size=CHUNK_SIZE):
    """Estimate pi from the fraction of random points in [-1, 1]^2 that land in the unit circle.

    A fresh generator is built for every call. Without an explicit seed it is
    seeded from the wall clock in whole seconds, so two runs started within the
    same second see the same samples.

    ``total_samples`` must be at least 1; zero samples divides by zero.
    """
    if seed is None:
        seed = int(time.time())
    logger.debug("Monte Carlo seed: %d", seed)
    rng = np.random.default_rng(seed)

    chunks, remainder = divmod(total_samples, chunk_size)

    inside = 0
    for _ in range(chunks):
        inside += count_inside(rng, chunk_size)
    if remainder:
        inside += count_inside(rng, remainder)

    return 4.0 * inside / total_samples
