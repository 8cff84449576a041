"""generate.py - public entry point for fixed-weight sampling.

Example:
    >>> from popbits.sampling.generate import generate
    >>> x = generate(32, 11, rng=1234)
    >>> bin(x).count("1")
    11
"""

from dataclasses import dataclass
import numbers

from popbits.sampling.byte_sampler import sample_byte
from popbits.sampling.byte_table import BYTE_BITS
from popbits.sampling.composer import SPLIT_STRATEGIES, compose
from popbits.sampling.errors import InvalidRequest
from popbits.sampling.random_source import as_random_source

SUPPORTED_WIDTHS = (8, 16, 32, 64, 128)


def validate_request(width, popcount):
    """Raise InvalidRequest unless `popcount` ones fit in a supported `width`."""
    if isinstance(width, bool) or not isinstance(width, numbers.Integral) or width not in SUPPORTED_WIDTHS:
        raise InvalidRequest(f"unsupported width {width!r}, expected one of {SUPPORTED_WIDTHS}",
                             width=width, popcount=popcount)
    if isinstance(popcount, bool) or not isinstance(popcount, numbers.Integral):
        raise InvalidRequest(f"popcount must be an int, got {type(popcount).__name__}",
                             width=width, popcount=popcount)
    if not 0 <= popcount <= width:
        raise InvalidRequest(f"popcount {popcount} out of range [0, {width}]",
                             width=width, popcount=popcount)


@dataclass(frozen=True)
class SampleRequest:
    """A validated (width, popcount) pair."""

    width: int
    popcount: int

    def __post_init__(self):
        validate_request(self.width, self.popcount)

    @property
    def max_value(self):
        return (1 << self.width) - 1

    def sample(self, rng=None, split="exact"):
        return generate(self.width, self.popcount, rng=rng, split=split)


def generate(width, popcount, rng=None, split="exact"):
    """Random `width`-bit unsigned integer with exactly `popcount` bits set.

    Args:
        width: one of SUPPORTED_WIDTHS
        popcount: int in [0, width]
        rng: anything `as_random_source` accepts (None, int seed,
            random.Random, numpy Generator, torch Generator, RandomSource)
        split: "exact" (uniform over all qualifying values) or "uniform"
            (legacy half-split rule)

    Returns:
        python int in [0, 2**width)

    Raises:
        InvalidRequest: unsupported width, bad popcount or unknown split
    """
    validate_request(width, popcount)
    if split not in SPLIT_STRATEGIES:
        raise InvalidRequest(f"unknown split strategy {split!r}, expected one of {SPLIT_STRATEGIES}",
                             width=width, popcount=popcount)
    width, popcount = int(width), int(popcount)
    source = as_random_source(rng)
    if width == BYTE_BITS:
        return sample_byte(source, popcount)
    return compose(source, width, popcount, split=split)


def gen_bits(rng, width, popcount):
    """`generate` with the generator first, for call sites that thread an rng through."""
    return generate(width, popcount, rng=rng)


def generate_u8(popcount, rng=None):
    return generate(8, popcount, rng=rng)


def generate_u16(popcount, rng=None):
    return generate(16, popcount, rng=rng)


def generate_u32(popcount, rng=None):
    return generate(32, popcount, rng=rng)


def generate_u64(popcount, rng=None):
    return generate(64, popcount, rng=rng)


def generate_u128(popcount, rng=None):
    return generate(128, popcount, rng=rng)
