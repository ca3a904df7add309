class DivisionByZero(ZeroDivisionError):
    """A denominator or a divisor is zero."""


class ZeroRootError(ValueError):
    """Requested the zeroth root of a value."""

    def __str__(self) -> str:
        return "Can't find the zeroth root"


class ExponentTooLarge(OverflowError):
    """The degree of a root does not fit the native width."""

    def __init__(self, degree: int) -> None:
        self.degree = degree

    def __str__(self) -> str:
        return f"Root degree {self.degree} exceeds the native width"


class UnsupportedComparison(TypeError):
    """Requested the relative order of incompatible numeric kinds."""

    def __init__(self, this, other) -> None:
        self.kinds = (type(this).__qualname__, type(other).__qualname__)

    def __str__(self) -> str:
        return "Can't order {} with respect to {}".format(*self.kinds)
