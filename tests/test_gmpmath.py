import pytest

from bvint import UInt
from bvint.arithmetic import uint
from bvint.core import gmpmath
from bvint.core.ops import OP


def test_model_widths():
    assert gmpmath.compute(OP.add, 5, 4, 3, 3) == (8, 4)
    assert gmpmath.compute(OP.add, 7, 3, 1, 1) == (8, 4)
    assert gmpmath.compute("sub", 3, 3, 5, 4) == (0, 1)
    assert gmpmath.compute("mul", 5, 4, 3, 3) == (15, 9)
    assert gmpmath.compute("neg", 5, 4) == (11, 4)
    assert gmpmath.compute("or", 1, 3, 24, 5) == (1, 3)
    assert gmpmath.compute("and", 31, 5, 5, 3) == (5, 5)
    assert gmpmath.from_int_width(0) == 1
    assert gmpmath.from_int_width(4) == 3
    assert gmpmath.from_int_width(5) == 4


def test_model_needs_operands():
    with pytest.raises(ValueError):
        gmpmath.compute(OP.add, 5, 4)
    with pytest.raises(ValueError):
        gmpmath.compute("sqrt", 5, 4)


@pytest.mark.parametrize("op", list(OP))
def test_engine_agrees_with_model(op, rng):
    binary = op != OP.neg
    for _ in range(60):
        x = rng.getrandbits(rng.randint(1, 40))
        y = rng.getrandbits(rng.randint(1, 40))
        a = UInt(x)
        b = UInt(y)
        assert a.length == gmpmath.from_int_width(x)
        if binary:
            result = uint.compute(op, a, b)
            assert gmpmath.check(op, result, a, b)
        else:
            result = uint.compute(op, a)
            assert gmpmath.check(op, result, a)


@pytest.mark.parametrize("op", list(OP))
def test_engine_agrees_with_model_on_wrapped_bits(op, rng):
    # operands with arbitrary leading zeros, not just the widths from_int picks
    for _ in range(60):
        a = UInt([rng.getrandbits(1) for _ in range(rng.randint(1, 24))])
        b = UInt([rng.getrandbits(1) for _ in range(rng.randint(1, 24))])
        if op == OP.neg:
            assert gmpmath.check(op, uint.compute(op, a), a)
        else:
            assert gmpmath.check(op, uint.compute(op, a, b), a, b)


def test_check_detects_mismatch():
    a = UInt(5)
    b = UInt(3)
    assert not gmpmath.check(OP.add, UInt([1, 0, 0, 0, 0]), a, b)
    assert not gmpmath.check(OP.add, UInt(9), a, b)
