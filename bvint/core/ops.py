"""Standard operation codes and operand policies."""

from enum import IntEnum, unique

@unique
class OP(IntEnum):
    and_ = 0
    or_ = 1
    xor = 2
    add = 3
    sub = 4
    neg = 5
    mul = 6

# number of operands each operation consumes
op_arity = {
    OP.and_: 2,
    OP.or_: 2,
    OP.xor: 2,
    OP.add: 2,
    OP.sub: 2,
    OP.neg: 1,
    OP.mul: 2,
}

op_names = {
    'and': OP.and_,
    'or': OP.or_,
    'xor': OP.xor,
    'add': OP.add,
    '+': OP.add,
    'sub': OP.sub,
    '-': OP.sub,
    'neg': OP.neg,
    'negate': OP.neg,
    'mul': OP.mul,
    '*': OP.mul,
}

def to_op(x):
    """Look up an OP code from an OP, its integer value, or a name."""
    if isinstance(x, str):
        try:
            return op_names[x.strip().lower()]
        except KeyError:
            raise ValueError('unknown operation {}'.format(repr(x))) from None
    try:
        return OP(x)
    except ValueError:
        raise ValueError('unknown operation {}'.format(repr(x))) from None

class OperandPolicy(IntEnum):
    """What binary operations may do to their second operand.
    COPY never touches it. ALIAS lets add and sub widen it in place,
    with leading zeros, to the width they computed at.
    """
    COPY = 0
    ALIAS = 1
