import logging

logger = logging.getLogger(__name__)

MACHIN_EXTRA_DIGITS = 2
TERM_CUTOFF = 1e-15


def arctan_series(x, max_terms):
    """Taylor series of arctan(x) for |x| < 1.

    Returns the sum and the number of terms actually added. The loop stops
    after ``max_terms`` terms or once the power term drops to TERM_CUTOFF.
    """
    total = 0.0
    term = x
    x_squared = x * x
    i = 0
    while i < max_terms and abs(term) > TERM_CUTOFF:
        if i % 2 == 0:
            total += term / (2 * i + 1)
        else:
            total -= term / (2 * i + 1)
        term *= x_squared
        i += 1
    return total, i


def machin_pi(precision):
    # pi/4 = 4*arctan(1/5) - arctan(1/239)
    max_terms = 10 ** (precision + MACHIN_EXTRA_DIGITS)

    arctan_1_5, terms_1_5 = arctan_series(1.0 / 5.0, max_terms)
    arctan_1_239, terms_1_239 = arctan_series(1.0 / 239.0, max_terms)
    logger.debug(
        "Machin terms used: %d for arctan(1/5), %d for arctan(1/239), bound %d",
        terms_1_5, terms_1_239, max_terms,
    )

    return 4 * (4 * arctan_1_5 - arctan_1_239)
