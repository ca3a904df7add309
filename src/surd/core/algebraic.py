import abc
import typing


class Ordered(abc.ABC):
    """Abstract base class for objects with a total order.

    Concrete implementations of this class must define `compare`, which
    returns -1, 0, or 1 when `self` is less than, equal to, or greater than
    `other`, and which raises an exception for operands it can't order.

    This class defines the four ordering operators (`__lt__`, `__le__`,
    `__gt__`, and `__ge__`) in terms of `compare`. It deliberately leaves
    `__eq__` to subclasses, since equality may be stricter than the order
    (e.g., a value need not equal an object of another kind that it orders
    equally with).
    """

    __slots__ = ()

    @abc.abstractmethod
    def compare(self, other) -> int:
        """Three-way comparison of self and other."""
        pass

    def __lt__(self, other) -> bool:
        """True if self < other."""
        return self._ordered(other, lambda c: c < 0)

    def __le__(self, other) -> bool:
        """True if self <= other."""
        return self._ordered(other, lambda c: c <= 0)

    def __gt__(self, other) -> bool:
        """True if self > other."""
        return self._ordered(other, lambda c: c > 0)

    def __ge__(self, other) -> bool:
        """True if self >= other."""
        return self._ordered(other, lambda c: c >= 0)

    def _ordered(self, other, test: typing.Callable[[int], bool]):
        """Helper for the ordering operators."""
        if not isinstance(other, Ordered):
            return NotImplemented
        return test(self.compare(other))
