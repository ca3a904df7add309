"""Exact powers of rational values with rational exponents.

Raising a rational base to a rational exponent produces a number when the
relevant roots are exact, and otherwise a coefficient times a radical. The
branch conventions are:

* the even root of a negative value is the root of its magnitude times the
  imaginary unit, so that `(-1)^(1/2) == I`;
* the odd root of a negative value is real, so that `(-8)^(1/3) == -2`.
"""

import logging
import typing

from surd.core import native
from surd.core import numeric
from surd.core import symbolic
from surd.core.exceptions import DivisionByZero, ExponentTooLarge


_logger = logging.getLogger(__name__)


def rpowrat(
    base: numeric.Integer,
    exponent: numeric.Rational,
) -> symbolic.Result:
    """Compute `base ** exponent` for a whole-number base.

    Parameters
    ----------
    base : `~numeric.Integer`
        The value to raise to a power.

    exponent : `~numeric.Rational`
        The canonical exponent `p/q`.

    Returns
    -------
    `~numeric.Number`, `~symbolic.Pow`, or `~symbolic.Mul`
        The exact value, if the `q`-th root of `base` is exact; otherwise the
        product of an exact coefficient and a radical of `base` (or of its
        magnitude) with an exponent between 0 and 1.

    Raises
    ------
    ExponentTooLarge
        `q` does not fit the native root-degree type.
    """
    p, q = exponent.numerator, exponent.denominator
    if not native.fits_root_degree(q):
        raise ExponentTooLarge(q)
    if base.is_negative():
        root = (-base).nth_root(q)
        if root is not None:
            if q % 2 == 0:
                return numeric.I ** p * root ** p
            return (-root) ** p
    else:
        root = base.nth_root(q)
        if root is not None:
            return root ** p
    # Split p/q into quot + rem/q with 0 < rem < q. Since p and q are coprime,
    # so are rem and q.
    quot, rem = divmod(p, q)
    coefficient = base ** quot
    surd = numeric.Rational(rem, q)
    factors = {}
    if base.is_negative() and q == 2:
        # The square root of a negative value is I times the square root of
        # its magnitude, so no radical of a negative value appears.
        coefficient = coefficient * numeric.I
        magnitude = -base
        if not magnitude.is_one():
            factors[magnitude] = surd
    else:
        factors[base] = surd
    _logger.debug(
        "%s^(%s) has no exact root: coefficient %s, radicals %s",
        base, exponent, coefficient, factors,
    )
    return symbolic.Mul.from_dict(coefficient, factors)


def powrat(
    base: numeric.Rational,
    exponent: numeric.Rational,
) -> symbolic.Result:
    """Compute `base ** exponent` for a fractional base.

    With `base == N/D`, this computes `N**exponent * D**(-exponent)`.
    """
    num, den = base.get_num_den()
    return symbolic.mul(rpowrat(num, exponent), rpowrat(den, -exponent))


Exponentiable = typing.Union[int, numeric.Integer, numeric.Rational]


def power(base: Exponentiable, exponent: Exponentiable) -> symbolic.Result:
    """Compute `base ** exponent` exactly.

    Parameters
    ----------
    base : int, `~numeric.Integer`, or `~numeric.Rational`
        The value to raise to a power.

    exponent : int, `~numeric.Integer`, or `~numeric.Rational`
        The power. Any `numbers.Rational` value is also acceptable.

    Returns
    -------
    `~numeric.Number`, `~symbolic.Pow`, or `~symbolic.Mul`
        The exact result.

    Raises
    ------
    DivisionByZero
        `base` is zero and `exponent` is negative.

    ExponentTooLarge
        The denominator of `exponent` does not fit the native root-degree
        type.

    TypeError
        Either argument is not an exact real value.
    """
    b, e = (numeric.number(i) for i in (base, exponent))
    if not (isinstance(b, numeric.Real) and isinstance(e, numeric.Real)):
        raise TypeError(
            f"Can't compute {base!r} ** {exponent!r} exactly"
        ) from None
    if isinstance(e, numeric.Integer):
        return b ** e
    if b.is_zero():
        if e.is_negative():
            raise DivisionByZero(
                f"Can't raise zero to negative power {e}"
            ) from None
        return numeric.Integer(0)
    if isinstance(b, numeric.Integer):
        return rpowrat(b, e)
    return powrat(b, e)
