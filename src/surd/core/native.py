"""Fixed-width integer limits of the host platform.

Arbitrary-precision values occasionally have to pass through a fixed-width
channel: the degree of an n-th root, and the words that go into a hash. The
widths come from the `[kernel]` section of `surd.ini` and are interpreted as
numpy integer types.
"""

import functools
import logging
import typing

import numpy

import surd


_logger = logging.getLogger(__name__)


class Settings(typing.NamedTuple):
    """Kernel settings read from the environment."""

    root_degree: numpy.iinfo
    hashing: numpy.iinfo
    check_canonical: bool


def _integer_info(name: str, kind: str) -> numpy.iinfo:
    """Look up a numpy integer type by name and require its kind."""
    try:
        dtype = numpy.dtype(name)
    except TypeError:
        raise ValueError(f"Unknown integer type {name!r}") from None
    if dtype.kind != kind:
        raise ValueError(
            f"Expected a {'signed' if kind == 'i' else 'unsigned'}"
            f" integer type, not {name!r}"
        ) from None
    return numpy.iinfo(dtype)


@functools.lru_cache(maxsize=None)
def settings() -> Settings:
    """The current kernel settings."""
    env = surd.Environment('kernel')
    loaded = Settings(
        root_degree=_integer_info(env['root_degree_type'], 'u'),
        hashing=_integer_info(env['hash_type'], 'i'),
        check_canonical=env.getboolean('check_canonical'),
    )
    _logger.debug(
        "kernel settings from %s: root degree <= %d, %d-bit hashing",
        env.path, loaded.root_degree.max, loaded.hashing.bits,
    )
    return loaded


@functools.lru_cache(maxsize=None)
def check_canonical() -> bool:
    """True if already-reduced fractions should be verified on creation."""
    return settings().check_canonical


def reset() -> None:
    """Discard cached settings so that the next access re-reads them."""
    settings.cache_clear()
    check_canonical.cache_clear()


def fits_root_degree(n: int) -> bool:
    """True if `n` is a representable n-th root degree."""
    info = settings().root_degree
    return info.min <= n <= info.max


def truncate(n: int) -> int:
    """Keep the low-order bits of `n` that fit the signed hash type.

    The magnitude is masked and the sign restored, so values that differ only
    in their high-order bits map to the same word.
    """
    mask = int(settings().hashing.max)
    return -(-n & mask) if n < 0 else n & mask


def hash_combine(seed: int, value: int) -> int:
    """Mix `value` into `seed`, wrapping at the unsigned hash width."""
    bits = settings().hashing.bits
    mask = (1 << bits) - 1
    seed &= mask
    mixed = seed ^ ((value & mask) + 0x9e3779b9 + (seed << 6) + (seed >> 2))
    return mixed & mask
