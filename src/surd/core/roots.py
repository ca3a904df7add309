"""Exact roots and perfect powers of arbitrary-precision integers."""

import typing

from sympy import integer_nthroot
from sympy.ntheory import perfect_power

from surd.core.exceptions import ZeroRootError


def nth_root(x: int, n: int) -> typing.Optional[int]:
    """Compute the exact `n`-th root of `x`, if there is one.

    Parameters
    ----------
    x : int
        The non-negative radicand.

    n : int
        The degree of the root.

    Returns
    -------
    int or `None`
        The integer `r` such that `r**n == x`, or `None` if `x` is not a
        perfect `n`-th power.

    Raises
    ------
    ZeroRootError
        `n` is zero.
    """
    if n == 0:
        raise ZeroRootError
    if n < 0:
        raise ValueError(f"Root degree must be positive, not {n}")
    if x < 0:
        raise ValueError(f"Can't take an exact root of negative value {x}")
    root, exact = integer_nthroot(x, n)
    return int(root) if exact else None


def is_perfect_power(x: int) -> bool:
    """True if `|x|` is `b**k` for some integer `b` and some `k >= 2`.

    Zero and one are perfect powers of themselves.
    """
    x = abs(x)
    if x <= 1:
        return True
    return perfect_power(x) is not False
