"""Reference model of the bit vector operations,
implemented with GMP as a backend.

Every operation is described here on plain integers: given the values
and widths of the operands, compute the value and width the bit vector
implementation is expected to produce. This is used to cross-check
results, not to compute them.
"""


import gmpy2 as gmp

from .ops import OP, op_arity, to_op


def mpz_width(x):
    """Number of bits needed to write x, at least 1."""
    return max(1, gmp.bit_length(gmp.mpz(x)))


def from_int_width(i):
    i = gmp.mpz(i)
    if i == 0:
        return 1
    else:
        return gmp.bit_length(i - 1) + 1


def compute(op, a, alen, b=None, blen=None):
    """Compute the (value, width) pair produced by op.

    a and b are the operand values, alen and blen are the widths of the
    bit vectors holding them. Values are returned as gmpy2 mpz.
    """
    op = to_op(op)
    a = gmp.mpz(a)
    if op_arity[op] == 2:
        if b is None or blen is None:
            raise ValueError('{} needs two operands'.format(op.name))
        b = gmp.mpz(b)
        maxlen = max(alen, blen)

    if op == OP.and_:
        return a & b, alen
    elif op == OP.or_:
        return a | gmp.f_mod_2exp(b, alen), alen
    elif op == OP.xor:
        return a ^ gmp.f_mod_2exp(b, alen), alen
    elif op == OP.add:
        s = a + b
        if s >> maxlen:
            return s, maxlen + 1
        else:
            return s, maxlen
    elif op == OP.sub:
        if a < b:
            return gmp.mpz(0), 1
        d = a - b
        return d, mpz_width(d)
    elif op == OP.neg:
        return gmp.f_mod_2exp(-a, alen), alen
    elif op == OP.mul:
        n = maxlen + 1
        return a * b, 2 * n - 1
    else:
        raise ValueError('unsupported operation {}'.format(repr(op)))


def check(op, result, *operands):
    """Does a result bit vector agree with the model?

    The operands must be the values as they were before the operation ran;
    anything with int() and len() will do.
    """
    args = []
    for x in operands:
        args.append(int(x))
        args.append(len(x))
    value, width = compute(op, *args)
    return int(result) == value and len(result) == width
