from popbits.sampling.byte_table import BYTE_BITS, lookup


def sample_byte(source, k):
    """Draw a byte with exactly k set bits, uniformly over the C(8, k) choices.

    Args:
        source: RandomSource, borrowed for this call
        k: popcount in [0, 8]
    """
    values = lookup(k)
    if k == 0:
        return 0x00
    if k == BYTE_BITS:
        return 0xFF
    return values[source.randbelow(len(values))]
