from math import comb

import pytest

from popbits.sampling import byte_table
from popbits.sampling.errors import InvalidRequest


def test_table_partitions_all_bytes_by_weight():
    seen = []
    for k in range(9):
        entry = byte_table.lookup(k)
        assert len(entry) == comb(8, k)
        assert len(set(entry)) == len(entry)
        assert all(bin(v).count("1") == k for v in entry)
        seen.extend(entry)
    assert sorted(seen) == list(range(256))


def test_extreme_entries():
    assert byte_table.lookup(0) == (0x00,)
    assert byte_table.lookup(8) == (0xFF,)
    assert byte_table.lookup(1) == (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        byte_table.POPCOUNT_TABLE[3] = (1, 2, 3)
    assert isinstance(byte_table.lookup(3), tuple)


@pytest.mark.parametrize("k", [-1, 9, 2.0, True, "3", None])
def test_lookup_rejects_out_of_range(k):
    with pytest.raises(InvalidRequest):
        byte_table.lookup(k)
