from .core import utils, ops, integral, gmpmath
from .arithmetic import evalctx, uint

UInt = uint.UInt
UIntCtx = evalctx.UIntCtx
uint_ctx = evalctx.uint_ctx

OP = ops.OP
OperandPolicy = ops.OperandPolicy

BVIntError = utils.BVIntError
PreconditionError = utils.PreconditionError
