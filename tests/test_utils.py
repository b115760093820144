import pytest

from capcache.utils.utils import gcd


@pytest.mark.parametrize(
    "nums, expected",
    [
        ((), 0),
        ((12,), 0),
        ((12, 18), 6),
        ((10, 50, 50, 10), 10),
        ((7, 13), 1),
        ((8, 0), 0),
        ((0, 8, 4), 0),
        ((48, 36, 24), 12),
    ],
)
def test_gcd(nums, expected):
    assert gcd(*nums) == expected
