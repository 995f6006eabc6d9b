import random

import pytest

from minnowtcp.wrapping_integers import Wrap32

UINT32_MAX = (1 << 32) - 1
INT32_MAX = (1 << 31) - 1


def test_low_adjacent_seqnos_compare():
    assert (Wrap32(3) != Wrap32(1)) is True
    assert (Wrap32(3) == Wrap32(1)) is False


def test_random_comparisons():
    rd = random.Random(20240601)
    for _ in range(32768):
        n = rd.getrandbits(32)
        diff = rd.getrandbits(8)
        m = (n + diff) & UINT32_MAX
        assert (Wrap32(n) == Wrap32(m)) == (n == m)
        assert (Wrap32(n) != Wrap32(m)) == (n != m)


def test_addition_wraps_around():
    assert Wrap32(UINT32_MAX) + 1 == Wrap32(0)
    assert Wrap32(10) + 5 == Wrap32(15)


def test_wrap_uses_low_32_bits():
    assert Wrap32.wrap(3 * (1 << 32) + 17, Wrap32(15)) == Wrap32(32)
    assert Wrap32.wrap(0, Wrap32(19)) == Wrap32(19)


@pytest.mark.parametrize(
    "value, zero_point, checkpoint, expected",
    [
        (1, 0, 0, 1),
        (1, 0, UINT32_MAX, (1 << 32) + 1),
        (UINT32_MAX - 1, 0, 3 * (1 << 32), 3 * (1 << 32) - 2),
        (UINT32_MAX - 10, 0, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 10, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 0, 0, UINT32_MAX),
        (16, 16, 0, 0),
        (15, 16, 0, UINT32_MAX),
        (0, INT32_MAX, 0, INT32_MAX + 2),
        (UINT32_MAX, INT32_MAX, 0, 1 << 31),
        (UINT32_MAX, 1 << 31, 0, UINT32_MAX >> 1),
        (0, 1, 1, UINT32_MAX),
    ],
)
def test_unwrap_cases(value, zero_point, checkpoint, expected):
    assert Wrap32(value).unwrap(Wrap32(zero_point), checkpoint) == expected


@pytest.mark.parametrize("n", [0, 1])
def test_unwrap_small_values_near_zero(n):
    for checkpoint in range(0, 100000, 97):
        assert Wrap32.wrap(n, Wrap32(19)).unwrap(Wrap32(19), checkpoint) == n


@pytest.mark.parametrize(
    "n", [UINT32_MAX - 1, UINT32_MAX, UINT32_MAX + 1, UINT32_MAX + 2]
)
def test_unwrap_near_first_wrap(n):
    for checkpoint in range(UINT32_MAX - 100000, UINT32_MAX + 100000, 211):
        assert Wrap32.wrap(n, Wrap32(19)).unwrap(Wrap32(19), checkpoint) == n


@pytest.mark.parametrize(
    "n",
    [2 * UINT32_MAX - 1, 2 * UINT32_MAX, 2 * UINT32_MAX + 1, 2 * UINT32_MAX + 2],
)
def test_unwrap_near_second_wrap(n):
    for checkpoint in range(2 * UINT32_MAX - 100000, 2 * UINT32_MAX + 100000, 211):
        assert Wrap32.wrap(n, Wrap32(19)).unwrap(Wrap32(19), checkpoint) == n


@pytest.mark.parametrize("base", [UINT32_MAX, 2 * UINT32_MAX])
def test_unwrap_offsets_around_checkpoint(base):
    for i in range(-100000, 100000, 97):
        assert Wrap32.wrap(base + i, Wrap32(19)).unwrap(Wrap32(19), base) == base + i