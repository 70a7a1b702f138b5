"""Integer utilities and bit arrays.

This file is part of bvint, available under the MIT license.

Bit arrays are one-dimensional numpy arrays of dtype bool, stored
most significant bit first: index 0 holds the highest place value,
and index n-1 holds the 1s place. The helpers here convert between
bit arrays and python integers, and pad or trim them at the high end.

Also provides small utilities for integers:
  bitmask(n): n 1s
  clog2(x): ceiling of log2(x), for x >= 1
  from_int_width(i): the width chosen when converting i to bits
"""

import typing

import numpy as np

from .utils import PreconditionError


def bitmask(n: int) -> int:
    """Produces a bitmask of n 1s.

    >>> bitmask(0)
    0
    >>> bin(bitmask(5))
    '0b11111'
    """
    return ~(-1 << n)


def clog2(x: int) -> int:
    """Ceiling of log2(x), computed exactly on integers.

    >>> [clog2(x) for x in range(1, 10)]
    [0, 1, 2, 2, 3, 3, 3, 3, 4]
    >>> clog2(1 << 200)
    200
    >>> clog2((1 << 200) + 1)
    201
    """
    if x < 1:
        raise PreconditionError('clog2: expected a positive integer, got {}'.format(repr(x)))
    return (x - 1).bit_length()


def from_int_width(i: int) -> int:
    """Number of bits used to represent i when converting it to a bit array.

    Zero gets a single bit. Anything else gets ceil(log2(i)) + 1 bits,
    which leaves a leading 0 unless i is a power of two.

    >>> [from_int_width(i) for i in (0, 1, 2, 3, 4, 5, 8, 9)]
    [1, 1, 2, 3, 3, 4, 4, 5]
    """
    if i == 0:
        return 1
    else:
        return clog2(i) + 1


def int_to_bits(i: int) -> np.ndarray:
    """Convert a non-negative integer to a bit array.

    >>> int_to_bits(0).tolist()
    [False]
    >>> int_to_bits(5).tolist()
    [False, True, False, True]
    >>> int_to_bits(4).tolist()
    [True, False, False]
    """
    if i < 0:
        raise PreconditionError('cannot convert negative integer {} to unsigned bits'.format(repr(i)))

    n = from_int_width(i)
    bits = np.zeros(n, dtype=bool)
    # fill from the 1s place upward
    for k in range(n - 1, -1, -1):
        bits[k] = i % 2 == 1
        i = i >> 1
    return bits


def bits_to_int(bits: typing.Iterable) -> int:
    """Fold a bit array, most significant bit first, back into an integer.

    >>> bits_to_int([0, 1, 0, 1])
    5
    >>> bits_to_int([True] * 70) == bitmask(70)
    True
    """
    t = 0
    for b in bits:
        t = t * 2 + (1 if b else 0)
    return t


def as_bits(seq) -> np.ndarray:
    """Copy a sequence of bools or 0/1 values into a fresh bit array.

    >>> as_bits([1, 0, True]).tolist()
    [True, False, True]
    >>> as_bits([])
    Traceback (most recent call last):
        ...
    bvint.core.utils.PreconditionError: bit sequence must not be empty
    """
    if not hasattr(seq, '__len__'):
        seq = list(seq)
    a = np.array(seq)
    if a.ndim != 1:
        raise PreconditionError('expected a one-dimensional bit sequence, got shape {}'.format(a.shape))
    if a.size == 0:
        raise PreconditionError('bit sequence must not be empty')
    if a.dtype != np.bool_:
        if not (a.dtype.kind in 'iub' and np.isin(a, (0, 1)).all()):
            raise PreconditionError('bit sequence must contain only 0/1 values, got {}'.format(repr(seq)))
        a = a.astype(bool)
    return a


def zero_extend(bits: np.ndarray, n: int) -> np.ndarray:
    """Pad a bit array with leading zeros up to width n.
    Returns a new array; never truncates.

    >>> zero_extend(int_to_bits(3), 5).tolist()
    [False, False, False, True, True]
    """
    pad = n - bits.size
    if pad <= 0:
        return bits.copy()
    return np.concatenate((np.zeros(pad, dtype=bool), bits))


def trim_leading(bits: np.ndarray) -> np.ndarray:
    """Drop leading zeros, keeping at least one bit.

    >>> trim_leading(as_bits([0, 0, 1, 0])).tolist()
    [True, False]
    >>> trim_leading(as_bits([0, 0, 0])).tolist()
    [False]
    """
    nz = np.flatnonzero(bits)
    if nz.size == 0:
        return np.zeros(1, dtype=bool)
    return bits[nz[0]:].copy()


def bits_to_str(bits: np.ndarray) -> str:
    """Render a bit array as '0b' followed by its digits in storage order.

    >>> bits_to_str(as_bits([0, 1, 1]))
    '0b011'
    """
    return '0b' + ''.join('1' if b else '0' for b in bits)
