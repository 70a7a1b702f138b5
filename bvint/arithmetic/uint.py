"""Unsigned integers stored as explicit bit vectors.

A UInt holds a numpy bool array, most significant bit first. Unlike
python ints, the width of the array is part of the value: every operation
has a fixed policy for the width of its result.

  and, or, xor: keep the width of the first operand
  add: compute at max width + 1, then drop one leading 0 if present
  sub: compute at max width, floor underflow to 0b0, trim to minimal width
  negate: two's complement within the current width
  mul: Booth's algorithm, 2n-1 bits where n = max width + 1, never trimmed

The methods of UInt mutate the instance in place. The module-level
functions of the same names (and the operators) work on a copy of the
first operand and return it. Whether the second operand may be widened
as a side effect is decided by the operands policy of the context.
"""

import sys
import operator

import numpy as np

from ..core import integral
from ..core.ops import OP, op_arity, to_op
from .evalctx import UIntCtx, default_ctx


def _trace(ctx, level, msg):
    if ctx.verbosity >= level:
        print(msg, file=sys.stderr, flush=True)


# bit-serial building blocks on equal-width bit arrays

def _ripple_add(x, y):
    """Ripple-carry addition, 1s place first. Returns (sum, carry out)."""
    s = np.zeros(x.size, dtype=bool)
    carry = False
    for k in range(x.size - 1, -1, -1):
        b1 = bool(x[k])
        b2 = bool(y[k])
        s[k] = b1 ^ b2 ^ carry
        carry = (b1 and b2) or (carry and (b1 ^ b2))
    return s, carry

def _ripple_sub(x, y):
    """Borrow-chain subtraction, 1s place first. Returns (difference, borrow out)."""
    d = np.zeros(x.size, dtype=bool)
    borrow = False
    for k in range(x.size - 1, -1, -1):
        b1 = bool(x[k])
        b2 = bool(y[k])
        d[k] = b1 ^ b2 ^ borrow
        borrow = ((not b1) and (b2 or borrow)) or (borrow and b2)
    return d, borrow

def _negate(bits):
    """Two's complement negation in place, within the width of bits."""
    np.logical_not(bits, out=bits)
    carry = True
    for k in range(bits.size - 1, -1, -1):
        b = bool(bits[k])
        bits[k] = b ^ carry
        carry = b and carry
        if not carry:
            break

def _shift_right(a, q):
    """Arithmetic right shift of the register pair a:q, in place.
    Returns the bit shifted out of the bottom of q.
    """
    q_1 = bool(q[-1])
    q[1:] = q[:-1]
    q[0] = a[-1]
    # a[0] is the sign bit and stays where it is
    a[1:] = a[:-1]
    return q_1

def _booth(q, m, ctx):
    """Booth's multiplication of two n-bit registers.

    Both q (the multiplier) and m (the multiplicand) must have a leading 0,
    so that the signed algorithm sees them as non-negative. After n steps
    the product sits in the 2n-bit register a:q; its top bit is always 0,
    and is dropped to give 2n-1 bits.
    """
    n = q.size
    a = np.zeros(n, dtype=bool)
    q = q.copy()
    neg_m = m.copy()
    _negate(neg_m)
    q_1 = False

    for step in range(n):
        pair = (bool(q[-1]), q_1)
        if pair == (True, False):
            a, _ = _ripple_add(a, neg_m)
            action = 'A-M'
        elif pair == (False, True):
            a, _ = _ripple_add(a, m)
            action = 'A+M'
        else:
            action = 'nop'
        q_1 = _shift_right(a, q)
        if ctx.verbosity >= 2:
            _trace(ctx, 2, '  booth {:d}: {:d}{:d} {:3} A={} Q={} Q-1={:d}'.format(
                step, pair[0], pair[1], action,
                integral.bits_to_str(a), integral.bits_to_str(q), q_1))

    return np.concatenate((a[1:], q))


class UInt(object):
    """Unsigned integer as a bit vector, most significant bit first.

    Construct from a non-negative integer, from another UInt (copy),
    or from a sequence of bools or 0/1 values. Storage is never shared
    with the argument.
    """

    _ctx : UIntCtx = default_ctx

    def __init__(self, x, ctx=None):
        if isinstance(x, UInt):
            self._bits = x._bits.copy()
            if ctx is None:
                ctx = x._ctx
        elif x is None or isinstance(x, (str, bytes, bytearray, float)):
            raise TypeError('cannot construct {} from {}'.format(type(self).__name__, repr(x)))
        elif hasattr(x, '__iter__'):
            self._bits = integral.as_bits(x)
        else:
            try:
                i = operator.index(x)
            except TypeError:
                raise TypeError('cannot construct {} from {}'.format(type(self).__name__, repr(x))) from None
            self._bits = integral.int_to_bits(i)

        if ctx is not None:
            if not isinstance(ctx, UIntCtx):
                raise TypeError('expected a UIntCtx, got {}'.format(repr(ctx)))
            self._ctx = ctx

    @classmethod
    def from_int(cls, i, ctx=None):
        return cls(operator.index(i), ctx=ctx)

    @classmethod
    def from_bits(cls, bits, ctx=None):
        return cls(integral.as_bits(bits), ctx=ctx)

    @property
    def bits(self):
        """Copy of the bits, as a numpy bool array. Index 0 is the most significant bit."""
        return self._bits.copy()

    @property
    def length(self):
        """Number of bits, always at least 1."""
        return self._bits.size

    @property
    def ctx(self):
        """Context controlling operand handling and tracing."""
        return self._ctx

    @ctx.setter
    def ctx(self, ctx):
        if not isinstance(ctx, UIntCtx):
            raise TypeError('expected a UIntCtx, got {}'.format(repr(ctx)))
        self._ctx = ctx

    def copy(self):
        return type(self)(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def to_int(self):
        return integral.bits_to_int(self._bits)

    def __int__(self):
        return self.to_int()

    def __len__(self):
        return self._bits.size

    def __str__(self):
        return integral.bits_to_str(self._bits)

    def __repr__(self):
        if self._ctx == default_ctx:
            return '{}({})'.format(type(self).__name__, str(self))
        else:
            return '{}({}, ctx={})'.format(type(self).__name__, str(self), repr(self._ctx))

    def __eq__(self, other):
        if isinstance(other, UInt):
            return self._bits.size == other._bits.size and bool(np.array_equal(self._bits, other._bits))
        return NotImplemented

    # mutable, so not hashable
    __hash__ = None

    def _check_operand(self, u, name):
        if not isinstance(u, UInt):
            raise TypeError('{}: expected a {}, got {}'.format(name, type(self).__name__, repr(u)))

    def _trace_op(self, name, before, u=None):
        if u is None:
            _trace(self._ctx, 1, '{} {} -> {}'.format(name, before, str(self)))
        else:
            _trace(self._ctx, 1, '{} {} {} -> {}'.format(name, before, u, str(self)))

    # alignment

    def align(self, u):
        """Pad whichever of self and u is shorter with leading zeros,
        so both have the same width. Always mutates both.
        """
        self._check_operand(u, 'align')
        n = max(self._bits.size, u._bits.size)
        self._bits = integral.zero_extend(self._bits, n)
        u._bits = integral.zero_extend(u._bits, n)

    # logical operations, lined up at the 1s place

    def and_(self, u):
        """Bitwise AND in place. u is treated as if padded with zeros,
        so any bits of self above the width of u are cleared.
        """
        self._check_operand(u, 'and')
        before = str(self)
        m = min(self._bits.size, u._bits.size)
        self._bits[-m:] &= u._bits[-m:]
        if self._bits.size > m:
            self._bits[:-m] = False
        self._trace_op('and', before, u)

    def or_(self, u):
        """Bitwise OR in place. Bits of self above the width of u are unchanged."""
        self._check_operand(u, 'or')
        before = str(self)
        m = min(self._bits.size, u._bits.size)
        self._bits[-m:] |= u._bits[-m:]
        self._trace_op('or', before, u)

    def xor(self, u):
        """Bitwise XOR in place. Bits of self above the width of u are unchanged."""
        self._check_operand(u, 'xor')
        before = str(self)
        m = min(self._bits.size, u._bits.size)
        self._bits[-m:] ^= u._bits[-m:]
        self._trace_op('xor', before, u)

    # arithmetic

    def add(self, u):
        """Ripple-carry addition in place.

        Both operands are extended to max width + 1 to make room for the
        carry out; if the top bit of the sum is 0 it is dropped again.
        Under the ALIAS policy u keeps the extended width.
        """
        self._check_operand(u, 'add')
        before = str(self)
        n = max(self._bits.size, u._bits.size) + 1
        x = integral.zero_extend(self._bits, n)
        y = integral.zero_extend(u._bits, n)
        s, _ = _ripple_add(x, y)
        if not s[0]:
            s = s[1:].copy()
        self._bits = s
        if not self._ctx.copy_operands and u is not self:
            u._bits = y
        self._trace_op('add', before, u)

    def negate(self):
        """Two's complement negation in place, keeping the current width."""
        before = str(self)
        _negate(self._bits)
        self._trace_op('negate', before)

    def sub(self, u):
        """Borrow-chain subtraction in place.

        Never negative: if u is larger than self, the result is 0b0.
        Otherwise leading zeros are trimmed down to a single bit.
        Under the ALIAS policy u keeps the common (max) width.
        """
        self._check_operand(u, 'sub')
        before = str(self)
        n = max(self._bits.size, u._bits.size)
        x = integral.zero_extend(self._bits, n)
        y = integral.zero_extend(u._bits, n)
        d, borrow = _ripple_sub(x, y)
        if borrow:
            _trace(self._ctx, 1, 'sub: underflow, result floored to 0')
            self._bits = np.zeros(1, dtype=bool)
        else:
            self._bits = integral.trim_leading(d)
        if not self._ctx.copy_operands and u is not self:
            u._bits = y
        self._trace_op('sub', before, u)

    def mul(self, u):
        """Booth's multiplication in place, self as multiplier and u as multiplicand.
        The result has 2n-1 bits, where n is the max width + 1.
        """
        self._check_operand(u, 'mul')
        before = str(self)
        n = max(self._bits.size, u._bits.size) + 1
        q = integral.zero_extend(self._bits, n)
        m = integral.zero_extend(u._bits, n)
        self._bits = _booth(q, m, self._ctx)
        self._trace_op('mul', before, u)

    # operators: the plain forms copy self, the augmented forms mutate it

    def __and__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        return and_(self, other)

    def __iand__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        self.and_(other)
        return self

    def __or__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        return or_(self, other)

    def __ior__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        self.or_(other)
        return self

    def __xor__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        return xor(self, other)

    def __ixor__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        self.xor(other)
        return self

    def __add__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        return add(self, other)

    def __iadd__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        self.add(other)
        return self

    def __sub__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        return sub(self, other)

    def __isub__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        self.sub(other)
        return self

    def __mul__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        return mul(self, other)

    def __imul__(self, other):
        if not isinstance(other, UInt):
            return NotImplemented
        self.mul(other)
        return self

    def __neg__(self):
        return negate(self)


# copy-returning forms

def clone(u):
    return UInt(u)

def to_int(u):
    return u.to_int()

def align(a, b):
    """Align a and b to a common width. Mutates both, returns neither."""
    a.align(b)

def _copy_first(a, ctx):
    if not isinstance(a, UInt):
        raise TypeError('expected a UInt, got {}'.format(repr(a)))
    return UInt(a, ctx=ctx)

def and_(a, b, ctx=None):
    result = _copy_first(a, ctx)
    result.and_(b)
    return result

def or_(a, b, ctx=None):
    result = _copy_first(a, ctx)
    result.or_(b)
    return result

def xor(a, b, ctx=None):
    result = _copy_first(a, ctx)
    result.xor(b)
    return result

def add(a, b, ctx=None):
    result = _copy_first(a, ctx)
    result.add(b)
    return result

def sub(a, b, ctx=None):
    result = _copy_first(a, ctx)
    result.sub(b)
    return result

def negate(a, ctx=None):
    result = _copy_first(a, ctx)
    result.negate()
    return result

def mul(a, b, ctx=None):
    result = _copy_first(a, ctx)
    result.mul(b)
    return result


_op_fns = {
    OP.and_: and_,
    OP.or_: or_,
    OP.xor: xor,
    OP.add: add,
    OP.sub: sub,
    OP.neg: negate,
    OP.mul: mul,
}

def compute(op, *args, ctx=None):
    """Apply the copy-returning form of op (an OP, its value, or a name) to args."""
    op = to_op(op)
    if len(args) != op_arity[op]:
        raise ValueError('{} takes {:d} operands, got {:d}'.format(op.name, op_arity[op], len(args)))
    return _op_fns[op](*args, ctx=ctx)
