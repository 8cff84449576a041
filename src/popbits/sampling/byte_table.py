"""byte_table.py - every byte value, grouped by how many bits it has set."""

from types import MappingProxyType

from popbits.sampling.errors import InvalidRequest
from popbits.utils.bit_tools import kbits

BYTE_BITS = 8


def build_table(n=BYTE_BITS):
    """Partition all n-bit values by weight.

    Returns:
        read-only mapping {k: tuple of values with weight k}, each tuple sorted
    """
    return MappingProxyType({k: tuple(kbits(n, k)) for k in range(n + 1)})


POPCOUNT_TABLE = build_table()


def lookup(k):
    """All byte values with exactly k set bits."""
    if isinstance(k, bool) or not isinstance(k, int) or not 0 <= k <= BYTE_BITS:
        raise InvalidRequest(f"byte popcount must be an int in [0, {BYTE_BITS}], got {k!r}",
                             width=BYTE_BITS, popcount=k)
    return POPCOUNT_TABLE[k]
