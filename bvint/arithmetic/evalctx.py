"""Evaluation context information, shared across operations."""

from ..core import utils
from ..core.ops import OperandPolicy


copy_synonyms = {'copy', 'clone', 'isolate', 'isolated', 'value'}
alias_synonyms = {'alias', 'aliased', 'share', 'shared', 'inplace', 'mutate'}

operand_policies = {}
operand_policies.update((k, OperandPolicy.COPY) for k in copy_synonyms)
operand_policies.update((k, OperandPolicy.ALIAS) for k in alias_synonyms)


def to_policy(x):
    if isinstance(x, OperandPolicy):
        return x
    elif isinstance(x, str):
        try:
            return operand_policies[x.strip().lower()]
        except KeyError:
            raise ValueError('unknown operand policy {}'.format(repr(x))) from None
    else:
        try:
            return OperandPolicy(x)
        except ValueError:
            raise ValueError('unknown operand policy {}'.format(repr(x))) from None


class EvalCtx(object):
    """Generic context for holding properties."""

    # this placeholder should never have anything put in it
    props = utils.ImmutableDict()

    def __init__(self, props=None):
        self.props = {}
        if props:
            self._update_props(props)

    def _update_props(self, props):
        self.props.update(props)

    def _import_fields(self, ctx):
        pass

    def __repr__(self):
        args = []
        if len(self.props) > 0:
            args.append('props=' + repr(self.props))
        return '{}({})'.format(type(self).__name__, ', '.join(args))

    _reserved_fields = {'props'}

    def __str__(self):
        fields = ['    ' + str(k) + ': ' + str(v) for k, v in self.__dict__.items() if k not in self._reserved_fields]
        props = ['    ' + str(k) + ': ' + str(v) for k, v in self.props.items()]
        if len(props) > 0:
            fields.append('  props:')
        return '\n'.join([
            type(self).__name__ + ':',
            *fields,
            *props
        ])

    def let(self, props=None):
        """Create a new context, updated with any provided properties."""
        cls = type(self)
        newctx = cls.__new__(cls)
        newctx._import_fields(self)

        if props:
            newctx.props = self.props.copy()
            newctx._update_props(props)
        else:
            # share the dictionary
            newctx.props = self.props

        return newctx


class UIntCtx(EvalCtx):
    """Context for bit vector unsigned integer arithmetic.

    operands: what binary operations may do to their second operand
    verbosity: 0 is silent, 1 traces each operation to stderr,
      2 also traces every step of multiplication
    """

    operands = OperandPolicy.COPY
    verbosity = 0

    def __init__(self, props=None, operands=None, verbosity=None):
        # explicit arguments take precedence over props
        super().__init__(props=props)
        self._update_fields(
            self.operands if operands is None else operands,
            self.verbosity if verbosity is None else verbosity,
        )

    def _update_fields(self, operands, verbosity):
        verbosity = int(verbosity)
        if verbosity < 0:
            raise ValueError('verbosity must be non-negative, got {}'.format(repr(verbosity)))
        self.operands = to_policy(operands)
        self.verbosity = verbosity

    def _update_props(self, props):
        if 'operands' in props or 'verbosity' in props:
            self._update_fields(
                props.get('operands', self.operands),
                props.get('verbosity', self.verbosity),
            )
        super()._update_props(props)

    def _import_fields(self, ctx):
        self.operands = ctx.operands
        self.verbosity = ctx.verbosity

    @property
    def copy_operands(self):
        return self.operands == OperandPolicy.COPY

    def __eq__(self, other):
        if isinstance(other, UIntCtx):
            return self.operands == other.operands and self.verbosity == other.verbosity
        return NotImplemented

    def __hash__(self):
        return hash((type(self), self.operands, self.verbosity))

    def __repr__(self):
        args = []
        if self.operands != type(self).operands:
            args.append('operands=' + repr(self.operands.name.lower()))
        if self.verbosity != type(self).verbosity:
            args.append('verbosity=' + repr(self.verbosity))
        if len(self.props) > 0:
            args.append('props=' + repr(self.props))
        return '{}({})'.format(type(self).__name__, ', '.join(args))


used_ctxs = {}
def uint_ctx(operands=OperandPolicy.COPY, verbosity=0):
    operands = to_policy(operands)
    try:
        return used_ctxs[(operands, verbosity)]
    except KeyError:
        ctx = UIntCtx(operands=operands, verbosity=verbosity)
        used_ctxs[(operands, verbosity)] = ctx
        return ctx

default_ctx = uint_ctx()
