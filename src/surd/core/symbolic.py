"""Symbolic products of numeric powers.

This module provides the small part of a symbolic expression system that
exact exponentiation needs: a power node with a numeric base and a rational
exponent, and a product node with a numeric coefficient and a mapping from
base to exponent.
"""

import abc
import types
import typing

from surd.core import numeric


class Part(abc.ABC):
    """Base class for immutable parts of a symbolic result."""

    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(
            f"Can't set {name!r} on immutable {type(self).__qualname__}"
        ) from None

    @abc.abstractmethod
    def __eq__(self, other) -> bool:
        pass

    @abc.abstractmethod
    def __hash__(self) -> int:
        pass


class Pow(Part):
    """A numeric base raised to a symbolic exponent.

    The engine creates instances for radicals that have no exact value, such as
    `2^(1/2)`. Instances do not evaluate or simplify themselves.
    """

    __slots__ = ('_base', '_exponent')

    def __init__(self, base: numeric.Number, exponent: numeric.Real) -> None:
        object.__setattr__(self, '_base', base)
        object.__setattr__(self, '_exponent', exponent)

    @property
    def base(self) -> numeric.Number:
        """The value raised to a power."""
        return self._base

    @property
    def exponent(self) -> numeric.Real:
        """The power to which `base` is raised."""
        return self._exponent

    def __eq__(self, other) -> bool:
        if isinstance(other, Pow):
            return (
                self._base == other._base
                and self._exponent == other._exponent
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Pow, self._base, self._exponent))

    def __str__(self) -> str:
        base = f"({self._base})" if self._base.is_negative() else str(self._base)
        if isinstance(self._exponent, numeric.Rational):
            return f"{base}^({self._exponent})"
        return f"{base}^{self._exponent}"

    def __repr__(self) -> str:
        return f"Pow({self._base!r}, {self._exponent!r})"


Factors = typing.Mapping[numeric.Number, numeric.Real]


class Mul(Part):
    """A numeric coefficient times a product of powers.

    Use `Mul.from_dict` to create the simplest result for a coefficient and a
    collection of factors.
    """

    __slots__ = ('_coefficient', '_factors')

    def __init__(self, coefficient: numeric.Number, factors: Factors) -> None:
        object.__setattr__(self, '_coefficient', coefficient)
        frozen = types.MappingProxyType(dict(factors))
        object.__setattr__(self, '_factors', frozen)

    @classmethod
    def from_dict(cls, coefficient: numeric.Number, factors: Factors):
        """Create the canonical product of `coefficient` and `factors`.

        Parameters
        ----------
        coefficient : `~numeric.Number`
            The numerical part of the product.

        factors : mapping
            A mapping from each base to its exponent.

        Returns
        -------
        `~numeric.Number`, `~symbolic.Pow`, or `~symbolic.Mul`
            The coefficient alone if it is zero or if there are no factors,
            a single power if the coefficient is 1 and there is one factor,
            and an instance of this class otherwise.
        """
        if coefficient.is_zero():
            return numeric.Integer(0)
        if not factors:
            return coefficient
        if coefficient.is_one() and len(factors) == 1:
            [(base, exponent)] = factors.items()
            return Pow(base, exponent)
        return cls(coefficient, factors)

    @property
    def coefficient(self) -> numeric.Number:
        """The numerical coefficient."""
        return self._coefficient

    @property
    def factors(self) -> Factors:
        """A read-only mapping from base to exponent."""
        return self._factors

    def __eq__(self, other) -> bool:
        if isinstance(other, Mul):
            return (
                self._coefficient == other._coefficient
                and dict(self._factors) == dict(other._factors)
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Mul, self._coefficient, frozenset(self._factors.items())))

    def __str__(self) -> str:
        powers = [str(Pow(b, e)) for b, e in self._factors.items()]
        c = self._coefficient
        if c.is_one():
            return '*'.join(powers)
        if c.is_minus_one():
            return '-' + '*'.join(powers)
        coefficient = str(c)
        if ' ' in coefficient:
            coefficient = f"({coefficient})"
        return '*'.join([coefficient, *powers])

    def __repr__(self) -> str:
        return f"Mul({self._coefficient!r}, {dict(self._factors)!r})"


Result = typing.Union[numeric.Number, Pow, Mul]


def decompose(this: Result) -> typing.Tuple[numeric.Number, typing.Dict]:
    """Split `this` into a numerical coefficient and a dict of factors."""
    if isinstance(this, numeric.Number):
        return this, {}
    if isinstance(this, Pow):
        return numeric.Integer(1), {this.base: this.exponent}
    if isinstance(this, Mul):
        return this.coefficient, dict(this.factors)
    raise TypeError(f"Can't decompose {this!r}") from None


def mul(a: Result, b: Result) -> Result:
    """Symbolically compute a * b.

    Coefficients multiply and exponents of identical bases add. A factor whose
    total exponent is an integer becomes part of the coefficient.
    """
    coefficient, factors = decompose(a)
    other, extra = decompose(b)
    coefficient = coefficient * other
    for base, exponent in extra.items():
        if base not in factors:
            factors[base] = exponent
            continue
        total = factors.pop(base) + exponent
        if isinstance(total, numeric.Integer):
            coefficient = coefficient * base ** total
        else:
            factors[base] = total
    return Mul.from_dict(coefficient, factors)


I = numeric.I
