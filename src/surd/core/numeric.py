"""Exact numeric kinds: whole numbers, canonical fractions, and Gaussian
rationals.

The kinds form a closed family. Every operation returns its result in the
simplest kind that represents it exactly: a fraction whose denominator reduces
to one becomes an `Integer`, and a complex value whose imaginary part is zero
becomes its real part.
"""

import abc
import enum
import fractions
import numbers
import operator
import typing

from surd.core import algebraic
from surd.core import native
from surd.core import roots
from surd.core.exceptions import (
    DivisionByZero,
    UnsupportedComparison,
    ZeroRootError,
)


class TypeID(enum.IntEnum):
    """Tags that distinguish numeric kinds in hashes and orderings."""

    INTEGER = 1
    RATIONAL = 2
    COMPLEX = 3


class Number(algebraic.Ordered):
    """Abstract base class for exact numeric values.

    Instances are immutable: concrete subclasses set their slots once, in
    `__init__`, through `object.__setattr__`.
    """

    __slots__ = ()

    type_id: TypeID = None

    def __setattr__(self, name, value):
        raise AttributeError(
            f"Can't set {name!r} on immutable {type(self).__qualname__}"
        ) from None

    def __delattr__(self, name):
        raise AttributeError(
            f"Can't delete {name!r} from immutable {type(self).__qualname__}"
        ) from None

    @abc.abstractmethod
    def is_zero(self) -> bool:
        """True if this value is 0."""

    @abc.abstractmethod
    def is_one(self) -> bool:
        """True if this value is 1."""

    @abc.abstractmethod
    def is_minus_one(self) -> bool:
        """True if this value is -1."""

    @abc.abstractmethod
    def is_positive(self) -> bool:
        """True if this value is real and greater than 0."""

    @abc.abstractmethod
    def is_negative(self) -> bool:
        """True if this value is real and less than 0."""

    def is_complex(self) -> bool:
        """True if this value has a non-zero imaginary part."""
        return False

    @abc.abstractmethod
    def powint(self, n: 'Integer') -> 'Number':
        """Raise this value to an integer power."""

    def __pow__(self, other):
        """Called for self ** other, with an integral exponent."""
        if isinstance(other, Integer):
            return self.powint(other)
        if isinstance(other, int):
            return self.powint(Integer(other))
        return NotImplemented

    def __pos__(self):
        return self

    def __sub__(self, other):
        other = number(other)
        if other is None:
            return NotImplemented
        return self + -other

    def __rsub__(self, other):
        other = number(other)
        if other is None:
            return NotImplemented
        return other + -self

    @abc.abstractmethod
    def __neg__(self) -> 'Number':
        pass

    @abc.abstractmethod
    def __eq__(self, other) -> bool:
        pass

    @abc.abstractmethod
    def __hash__(self) -> int:
        pass


class Real(Number):
    """Base class for the real numeric kinds.

    Arithmetic between real kinds passes through `fractions.Fraction`, whose
    results are always in lowest terms, and converts back with
    `Rational.from_fraction`.
    """

    __slots__ = ()

    @abc.abstractmethod
    def as_fraction(self) -> fractions.Fraction:
        """This value as a standard-library fraction."""

    def powint(self, n: 'Integer') -> Number:
        exponent = int(n)
        if exponent < 0 and self.is_zero():
            raise DivisionByZero(
                f"Can't raise zero to negative power {exponent}"
            ) from None
        return Rational.from_fraction(self.as_fraction() ** exponent)

    def __abs__(self):
        return Rational.from_fraction(abs(self.as_fraction()))

    def __neg__(self):
        return Rational.from_fraction(-self.as_fraction())

    def __add__(self, other):
        other = number(other)
        if not isinstance(other, Real):
            return NotImplemented
        return Rational.from_fraction(self.as_fraction() + other.as_fraction())

    __radd__ = __add__

    def __mul__(self, other):
        other = number(other)
        if not isinstance(other, Real):
            return NotImplemented
        return Rational.from_fraction(self.as_fraction() * other.as_fraction())

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = number(other)
        if not isinstance(other, Real):
            return NotImplemented
        if other.is_zero():
            raise DivisionByZero(f"Can't divide {self} by zero") from None
        return Rational.from_fraction(self.as_fraction() / other.as_fraction())

    def __rtruediv__(self, other):
        other = number(other)
        if not isinstance(other, Real):
            return NotImplemented
        return other / self


class Integer(Real):
    """A whole number of arbitrary size."""

    __slots__ = ('_value',)

    type_id = TypeID.INTEGER

    def __init__(self, value: typing.SupportsIndex) -> None:
        object.__setattr__(self, '_value', operator.index(value))

    @property
    def value(self) -> int:
        """The underlying integer."""
        return self._value

    @property
    def numerator(self) -> int:
        return self._value

    @property
    def denominator(self) -> int:
        return 1

    def as_fraction(self) -> fractions.Fraction:
        return fractions.Fraction(self._value)

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    def is_minus_one(self) -> bool:
        return self._value == -1

    def is_positive(self) -> bool:
        return self._value > 0

    def is_negative(self) -> bool:
        return self._value < 0

    def nth_root(self, n: int) -> typing.Optional['Integer']:
        """The exact `n`-th root of this value, or `None`.

        A negative value has an exact root only for odd `n`, in which case the
        root is negative.

        Raises
        ------
        ZeroRootError
            `n` is zero.
        ValueError
            `n` is negative.
        """
        root = _signed_root(self._value, n)
        return None if root is None else Integer(root)

    def is_perfect_power(self) -> bool:
        """True if the magnitude of this value is a perfect power."""
        return roots.is_perfect_power(self._value)

    def compare(self, other) -> int:
        if isinstance(other, Integer):
            return _sign(self._value - other._value)
        if isinstance(other, Rational):
            return -other.compare(self)
        raise UnsupportedComparison(self, other)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, Integer):
            return self._value == other._value
        if isinstance(other, Number):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return native.hash_combine(self.type_id, native.truncate(self._value))

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Integer({self._value})"


class Rational(Real):
    """An exact fraction in canonical form.

    The numerator carries the sign, the denominator is greater than one, and
    the two are coprime. A fraction whose denominator would be one is an
    `Integer` instead, so instances of this class never equal a whole number.

    Calling the class directly trusts the caller to pass a canonical pair. Use
    `Rational.from_two_ints` for arbitrary numerator-denominator pairs.
    """

    __slots__ = ('_num', '_den')

    type_id = TypeID.RATIONAL

    def __init__(self, numerator: int, denominator: int) -> None:
        object.__setattr__(self, '_num', int(numerator))
        object.__setattr__(self, '_den', int(denominator))
        if __debug__ and native.check_canonical():
            assert self.is_canonical(), (
                f"{numerator}/{denominator} is not in canonical form"
            )

    @classmethod
    def from_reduced(cls, numerator: int, denominator: int=1) -> Real:
        """Create a value from a numerator and denominator in lowest terms.

        The caller guarantees that the pair is coprime and that `denominator`
        is positive. The result is an `Integer` when `denominator` is 1.
        """
        if denominator == 1:
            return Integer(numerator)
        return cls(numerator, denominator)

    @classmethod
    def from_fraction(cls, value: fractions.Fraction) -> Real:
        """Create a value from a standard-library fraction."""
        return cls.from_reduced(value.numerator, value.denominator)

    @classmethod
    def from_two_ints(
        cls,
        numerator: typing.Union[int, Integer],
        denominator: typing.Union[int, Integer],
    ) -> Real:
        """Create a value from an arbitrary numerator and denominator.

        Parameters
        ----------
        numerator : int or `~numeric.Integer`
            The numerator, which may share factors with `denominator`.

        denominator : int or `~numeric.Integer`
            The non-zero denominator, which may be negative.

        Returns
        -------
        `~numeric.Rational` or `~numeric.Integer`
            The reduced value, as an `~numeric.Integer` if the reduced
            denominator is 1.

        Raises
        ------
        DivisionByZero
            `denominator` is zero.
        """
        n, d = (_as_int(i) for i in (numerator, denominator))
        if d == 0:
            raise DivisionByZero(
                f"Can't create a rational from {n}/{d}"
            ) from None
        # n/d may not be in lowest terms, so this reduces it
        return cls.from_fraction(fractions.Fraction(n, d))

    @property
    def numerator(self) -> int:
        """The signed numerator."""
        return self._num

    @property
    def denominator(self) -> int:
        """The positive denominator."""
        return self._den

    def get_num_den(self) -> typing.Tuple[Integer, Integer]:
        """The numerator and denominator as whole-number values."""
        return Integer(self._num), Integer(self._den)

    def as_fraction(self) -> fractions.Fraction:
        return fractions.Fraction(self._num, self._den)

    def is_canonical(self) -> bool:
        """True if this instance holds the canonical pair for its value.

        This reduces the stored pair independently and compares the result
        with what is stored. It exists for assertions and tests.
        """
        if self._den <= 1:
            return False
        reduced = fractions.Fraction(self._num, self._den)
        if reduced.denominator == 1:
            return False
        return (
            reduced.numerator == self._num
            and reduced.denominator == self._den
        )

    def is_zero(self) -> bool:
        return False

    def is_one(self) -> bool:
        return False

    def is_minus_one(self) -> bool:
        return False

    def is_positive(self) -> bool:
        return self._num > 0

    def is_negative(self) -> bool:
        return self._num < 0

    def nth_root(self, n: int) -> typing.Optional[Real]:
        """The exact `n`-th root of this value, or `None`.

        The value has an exact root iff both its numerator and its denominator
        do. A negative value has an exact root only for odd `n`.

        Raises
        ------
        ZeroRootError
            `n` is zero.
        """
        if n == 0:
            raise ZeroRootError
        num = _signed_root(self._num, n)
        if num is None:
            return None
        den = _signed_root(self._den, n)
        if den is None:
            return None
        # Exact roots of coprime integers are coprime, and den > 1 has a root
        # greater than one, so the pair is already canonical.
        return type(self)(num, den)

    def is_perfect_power(self, is_expected: bool=False) -> bool:
        """True if the magnitude of this value is a perfect power.

        Parameters
        ----------
        is_expected : bool, default=False
            Whether the caller expects a perfect power. If not, this method
            first tests the smaller of the numerator and denominator, which
            rejects most values cheaply. The hint only affects how quickly
            this method arrives at its answer.
        """
        num, den = self._num, self._den
        if num == 0:
            return True
        if num == 1:
            return roots.is_perfect_power(den)
        if not is_expected:
            smaller = den if abs(num) > den else num
            if not roots.is_perfect_power(smaller):
                return False
        # Since num and den are coprime, num * den is a perfect k-th power iff
        # both num and den are.
        return roots.is_perfect_power(num * den)

    def compare(self, other) -> int:
        if isinstance(other, Rational):
            if self._num == other._num and self._den == other._den:
                return 0
            return _sign(self._num * other._den - other._num * self._den)
        if isinstance(other, Integer):
            # den > 1 and gcd(num, den) == 1, so this is never zero
            return _sign(self._num - other.value * self._den)
        raise UnsupportedComparison(self, other)

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational):
            return self._num == other._num and self._den == other._den
        if isinstance(other, Number):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        # Only the low-order bits of each part contribute, so very large
        # values may collide.
        seed = native.hash_combine(self.type_id, native.truncate(self._num))
        return native.hash_combine(seed, native.truncate(self._den))

    def __str__(self) -> str:
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"


class Complex(Number):
    """A Gaussian rational: a complex value with exact real parts.

    Instances always have a non-zero imaginary part. Use `Complex.from_parts`
    to create a value that may turn out to be real.
    """

    __slots__ = ('_re', '_im')

    type_id = TypeID.COMPLEX

    def __init__(self, real: Real, imag: Real) -> None:
        object.__setattr__(self, '_re', real)
        object.__setattr__(self, '_im', imag)

    @classmethod
    def from_parts(cls, real, imag) -> Number:
        """Create the simplest value with the given real and imaginary parts."""
        re, im = (number(i) for i in (real, imag))
        if not (isinstance(re, Real) and isinstance(im, Real)):
            raise TypeError(
                f"Complex parts must be real, not {real!r} and {imag!r}"
            ) from None
        if im.is_zero():
            return re
        return cls(re, im)

    @property
    def real(self) -> Real:
        """The real part."""
        return self._re

    @property
    def imag(self) -> Real:
        """The imaginary part."""
        return self._im

    def conjugate(self) -> 'Complex':
        return Complex(self._re, -self._im)

    def is_zero(self) -> bool:
        return False

    def is_one(self) -> bool:
        return False

    def is_minus_one(self) -> bool:
        return False

    def is_positive(self) -> bool:
        return False

    def is_negative(self) -> bool:
        return False

    def is_complex(self) -> bool:
        return True

    def powint(self, n: 'Integer') -> Number:
        exponent = int(n)
        base = self if exponent >= 0 else 1 / self
        result, exponent = Integer(1), abs(exponent)
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def compare(self, other) -> int:
        raise UnsupportedComparison(self, other)

    def __neg__(self):
        return Complex(-self._re, -self._im)

    def __add__(self, other):
        other = number(other)
        if other is None:
            return NotImplemented
        re, im = _parts(other)
        return Complex.from_parts(self._re + re, self._im + im)

    __radd__ = __add__

    def __mul__(self, other):
        other = number(other)
        if other is None:
            return NotImplemented
        a, b = self._re, self._im
        c, d = _parts(other)
        return Complex.from_parts(a*c - b*d, a*d + b*c)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = number(other)
        if other is None:
            return NotImplemented
        if other.is_zero():
            raise DivisionByZero(f"Can't divide {self} by zero") from None
        if isinstance(other, Real):
            return Complex.from_parts(self._re / other, self._im / other)
        return self * other.conjugate() / _norm(other)

    def __rtruediv__(self, other):
        other = number(other)
        if other is None:
            return NotImplemented
        return other * self.conjugate() / _norm(self)

    def __eq__(self, other) -> bool:
        if isinstance(other, Complex):
            return self._re == other._re and self._im == other._im
        if isinstance(other, Number):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        seed = native.hash_combine(self.type_id, hash(self._re))
        return native.hash_combine(seed, hash(self._im))

    def __str__(self) -> str:
        im = abs(self._im)
        if im.is_one():
            imag = 'I'
        elif isinstance(im, Rational):
            imag = f"({im})*I"
        else:
            imag = f"{im}*I"
        negative = self._im.is_negative()
        if self._re.is_zero():
            return f"-{imag}" if negative else imag
        return f"{self._re} {'-' if negative else '+'} {imag}"

    def __repr__(self) -> str:
        return f"Complex({self._re!r}, {self._im!r})"


I = Complex(Integer(0), Integer(1))
"""The imaginary unit."""


def number(value) -> typing.Optional[Number]:
    """Convert `value` to a numeric kind, if possible.

    Returns `value` unchanged if it is already a `~numeric.Number`, the
    equivalent exact value if it is a rational number in the sense of
    `numbers.Rational` (e.g., `int` or `fractions.Fraction`), and `None`
    otherwise.
    """
    if isinstance(value, Number):
        return value
    if isinstance(value, numbers.Rational):
        return Rational.from_two_ints(value.numerator, value.denominator)
    return None


def _as_int(value) -> int:
    """Extract a Python integer from a whole-number operand."""
    if isinstance(value, Integer):
        return value.value
    if isinstance(value, int):
        return value
    raise TypeError(f"Expected a whole number, not {value!r}") from None


def _signed_root(x: int, n: int) -> typing.Optional[int]:
    """Exact `n`-th root of a possibly negative integer."""
    if x >= 0:
        return roots.nth_root(x, n)
    root = roots.nth_root(-x, n)
    return None if root is None or n % 2 == 0 else -root


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def _parts(value: Number) -> typing.Tuple[Real, Real]:
    """The real and imaginary parts of any numeric kind."""
    if isinstance(value, Complex):
        return value.real, value.imag
    return value, Integer(0)


def _norm(value: Complex) -> Real:
    """The squared magnitude of a complex value."""
    return value.real * value.real + value.imag * value.imag
