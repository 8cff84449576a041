"""composer.py - build wide fixed-weight values out of two half-width ones.

A width-W value with k ones is a high half with h ones next to a low half with
k - h ones. Picking h and then filling both halves recursively bottoms out in
the byte table after at most four halvings (128 -> 64 -> 32 -> 16 -> 8).

How h is picked decides the output distribution:

    "exact"    h is drawn with weight C(W/2, h) * C(W/2, k - h), i.e. in
               proportion to how many full values have that split. Every one
               of the C(W, k) values is then equally likely.
    "uniform"  h is drawn uniformly from its feasible range. Always produces
               the right weight, but over-represents values whose ones are
               lopsided between the halves (e.g. 0xFF00 for W=16, k=8).
"""

from functools import lru_cache
import logging

from popbits.sampling.byte_sampler import sample_byte
from popbits.sampling.byte_table import BYTE_BITS
from popbits.sampling.errors import InvalidRequest
from popbits.utils.bit_tools import binomial

logger = logging.getLogger(__name__)

SPLIT_STRATEGIES = ("exact", "uniform")


def split_bounds(width, k):
    """Feasible popcounts for the high half: [max(0, k - W/2), min(k, W/2)]."""
    half = width // 2
    return max(0, k - half), min(k, half)


@lru_cache(maxsize=None)
def split_weights(width, k):
    """Number of width-bit values with k ones for each feasible high-half popcount.

    Returns:
        tuple of (h, count) pairs; the counts sum to C(width, k)
    """
    half = width // 2
    lo, hi = split_bounds(width, k)
    return tuple((h, binomial(half, h) * binomial(half, k - h)) for h in range(lo, hi + 1))


def draw_split(source, width, k, split="exact"):
    """Choose the popcount of the high half."""
    lo, hi = split_bounds(width, k)
    if split == "uniform":
        return source.randint(lo, hi)
    if split != "exact":
        raise InvalidRequest(f"unknown split strategy {split!r}, expected one of {SPLIT_STRATEGIES}",
                             width=width, popcount=k)
    if lo == hi:
        return lo
    weights = split_weights(width, k)
    r = source.randbelow(sum(count for _, count in weights))
    for h, count in weights:
        if r < count:
            return h
        r -= count
    raise AssertionError("draw ran past the last split weight")


def compose(source, width, k, split="exact"):
    """Random width-bit value with exactly k ones.

    Args:
        source: RandomSource, borrowed for this call
        width: 8, 16, 32, 64 or 128
        k: popcount, already validated to lie in [0, width]
        split: "exact" or "uniform", see module docstring

    Returns:
        int in [0, 2**width)
    """
    if split not in SPLIT_STRATEGIES:
        raise InvalidRequest(f"unknown split strategy {split!r}, expected one of {SPLIT_STRATEGIES}",
                             width=width, popcount=k)
    if width == BYTE_BITS:
        return sample_byte(source, k)
    if k == 0:
        return 0
    if k == width:
        return (1 << width) - 1

    half = width // 2
    high_k = draw_split(source, width, k, split=split)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("width %d, popcount %d: high half gets %d, low half %d", width, k, high_k, k - high_k)

    high = compose(source, half, high_k, split=split)
    low = compose(source, half, k - high_k, split=split)
    return (high << half) | low
