from functools import reduce


def _gcd_pair(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    while b != 0:
        a, b = b, a % b
    return a


def gcd(*nums: int) -> int:
    """Greatest common divisor of all numbers.

    Returns 0 when fewer than two numbers are given, or when a zero shows up
    in the reduction (a zero weight has no meaningful common step).

    Args:
        *nums: Non-negative integers

    Returns:
        The greatest common divisor, or 0
    """
    if len(nums) < 2:
        return 0

    return reduce(_gcd_pair, nums[1:], nums[0])
