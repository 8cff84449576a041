import numpy as np


def kbits(n, k):
    """Generate integer form for all length-n bitstrings of weight k.

    Values come out in increasing numeric order (Gosper's hack: each step
    moves to the next larger integer with the same number of ones).

    Args:
        n, k: integers, 0 <= k <= n

    Returns:
        Generator over the C(n, k) integers below 2**n with exactly k ones.
    """
    if k == 0:
        yield 0
        return
    limit = 1 << n
    val = (1 << k) - 1
    while val < limit:
        yield val
        minbit = val & -val  # rightmost 1 bit
        fillbit = (val + minbit) & ~val  # rightmost 0 to the left of that bit
        val = val + minbit | (fillbit // (minbit << 1)) - 1


def popcount(x):
    """Hamming weight of a non-negative integer of any size."""
    return bin(x).count("1")


def binomial(n, k):
    """Exact C(n, k), zero outside 0 <= k <= n."""
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    out = 1
    for i in range(1, k + 1):
        out = out * (n - k + i) // i
    return out


def ints_to_bits(nums, n):
    """Convert an integer array to its binary repr.

    Column i holds bit i of each value. Values wider than 63 bits need an
    object array; those are unpacked with python ints.

    Returns:
        (m, n) boolean array
    """
    nums = np.asarray(nums)
    if nums.dtype == object or n > 63:
        return np.array([[(int(x) >> i) & 1 for i in range(n)] for x in nums], dtype=bool).reshape(-1, n)
    nums = nums.astype(np.uint64)
    shifts = np.arange(n, dtype=np.uint64)
    return ((nums[:, None] >> shifts) & np.uint64(1)).astype(bool)


def bits_to_ints(bits):
    """Inverse of `ints_to_bits`: each row of 0/1 (bit i in column i) to an integer."""
    bits = np.asarray(bits)
    m, n = bits.shape  # each row is a binary string
    if n > 63:
        out = np.empty(m, dtype=object)
        for row in range(m):
            out[row] = sum(1 << i for i in range(n) if bits[row, i])
        return out
    a = np.left_shift(np.uint64(1), np.arange(n, dtype=np.uint64))
    return (bits.astype(np.uint64) * a).sum(axis=1, dtype=np.uint64)
