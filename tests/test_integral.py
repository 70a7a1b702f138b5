import doctest

import numpy as np
import pytest

from bvint.core import integral
from bvint.core.utils import PreconditionError


def test_doctests():
    failures, tests = doctest.testmod(integral)
    assert tests > 0
    assert failures == 0


def test_clog2_rejects_zero():
    with pytest.raises(PreconditionError):
        integral.clog2(0)


def test_widths_match_bit_length_except_powers_of_two():
    for i in range(1, 1025):
        if i & (i - 1) == 0:
            assert integral.from_int_width(i) == i.bit_length()
        else:
            assert integral.from_int_width(i) == i.bit_length() + 1


def test_int_to_bits_large():
    i = (1 << 130) + 12345
    bits = integral.int_to_bits(i)
    assert bits.dtype == np.bool_
    assert bits.size == 132
    assert not bits[0]
    assert integral.bits_to_int(bits) == i


def test_int_to_bits_negative():
    with pytest.raises(PreconditionError):
        integral.int_to_bits(-3)


@pytest.mark.parametrize("seq", [
    [[1, 0], [0, 1]],
    [0, 2, 1],
    [0.0, 1.0],
    ["1", "0"],
])
def test_as_bits_rejects(seq):
    with pytest.raises(PreconditionError):
        integral.as_bits(seq)


def test_as_bits_accepts_generators_and_arrays():
    assert integral.as_bits(b for b in (1, 1, 0)).tolist() == [True, True, False]
    src = np.array([1, 0, 1], dtype=np.uint8)
    out = integral.as_bits(src)
    assert out.dtype == np.bool_
    assert out.tolist() == [True, False, True]


def test_as_bits_copies():
    src = np.array([True, False])
    out = integral.as_bits(src)
    src[1] = True
    assert out.tolist() == [True, False]


def test_zero_extend_never_truncates():
    bits = integral.as_bits([1, 0, 1])
    out = integral.zero_extend(bits, 2)
    assert out.tolist() == [True, False, True]
    assert out is not bits
