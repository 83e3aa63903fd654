import pytest

from algokit.bits import count_set_bits


def test_zero_and_all_ones():
    assert count_set_bits(0) == 0
    assert count_set_bits(-1) == 32


@pytest.mark.parametrize("shift", range(32))
def test_single_bit(shift):
    assert count_set_bits(1 << shift) == 1


@pytest.mark.parametrize("value", [0, 1, 7, 12345, 0x0F0F0F0F, 2**31 - 1, -5])
def test_complement_sums_to_word_width(value):
    assert count_set_bits(value) + count_set_bits(~value) == count_set_bits(-1)


@pytest.mark.parametrize("low, high", [(0b1010, 0b0101 << 8), (3, 3 << 20), (255, 255 << 24)])
def test_disjoint_bits_add(low, high):
    assert count_set_bits(low | high) == count_set_bits(low) + count_set_bits(high)