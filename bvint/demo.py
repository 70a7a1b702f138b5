"""Small demonstration: build two values and print their sum, difference and product."""

import sys

from .core import gmpmath
from .core.ops import OP
from .arithmetic import evalctx, uint


def show(name, x, file=None):
    print('{}: {} = {:d}'.format(name, str(x), int(x)), file=file or sys.stdout)

def demo(a_int, b_int, ctx=None, check=False, file=None):
    """Print a, b, a + b, a - b and a * b.
    If check is set, compare each result against the gmpy2 model;
    returns the number of mismatches.
    """
    a = uint.UInt(a_int, ctx=ctx)
    b = uint.UInt(b_int, ctx=ctx)
    show('a', a, file=file)
    show('b', b, file=file)

    mismatches = 0
    for name, op in [('a + b', OP.add), ('a - b', OP.sub), ('a * b', OP.mul)]:
        # fresh operands, so aliasing policies can't leak between results
        x, y = a.copy(), b.copy()
        result = uint.compute(op, x, y)
        show(name, result, file=file)
        if check and not gmpmath.check(op, result, a, b):
            expected, width = gmpmath.compute(op, int(a), len(a), int(b), len(b))
            print('  MISMATCH: expected {:d} in {:d} bits'.format(int(expected), width),
                  file=sys.stderr, flush=True)
            mismatches += 1

    return mismatches


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('a', type=int, nargs='?', default=5,
                        help='first operand')
    parser.add_argument('b', type=int, nargs='?', default=3,
                        help='second operand')
    parser.add_argument('--check', action='store_true',
                        help='cross-check results against gmpy2')
    parser.add_argument('--alias', action='store_true',
                        help='let add and sub widen their second operand in place')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='trace operations to stderr; repeat to trace multiplication steps')
    args = parser.parse_args(argv)

    if args.a < 0 or args.b < 0:
        parser.error('operands must be non-negative')

    ctx = evalctx.uint_ctx(
        operands='alias' if args.alias else 'copy',
        verbosity=args.verbose,
    )

    mismatches = demo(args.a, args.b, ctx=ctx, check=args.check)
    if mismatches:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
