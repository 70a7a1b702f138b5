import pytest

from bvint.arithmetic import evalctx
from bvint.arithmetic.evalctx import EvalCtx, UIntCtx
from bvint.core.ops import OperandPolicy


@pytest.mark.parametrize("name, policy", [
    ("copy", OperandPolicy.COPY),
    ("Clone", OperandPolicy.COPY),
    (" isolate ", OperandPolicy.COPY),
    ("alias", OperandPolicy.ALIAS),
    ("inplace", OperandPolicy.ALIAS),
    ("SHARED", OperandPolicy.ALIAS),
    (1, OperandPolicy.ALIAS),
    (OperandPolicy.COPY, OperandPolicy.COPY),
])
def test_policy_synonyms(name, policy):
    assert evalctx.to_policy(name) == policy


@pytest.mark.parametrize("bad", ["borrow", 7])
def test_unknown_policy(bad):
    with pytest.raises(ValueError):
        evalctx.to_policy(bad)


def test_defaults():
    ctx = UIntCtx()
    assert ctx.operands == OperandPolicy.COPY
    assert ctx.copy_operands
    assert ctx.verbosity == 0
    assert repr(ctx) == "UIntCtx()"
    assert ctx == evalctx.default_ctx


def test_props_and_kwargs():
    ctx = UIntCtx(props={"operands": "alias", "verbosity": "2"})
    assert ctx.operands == OperandPolicy.ALIAS
    assert ctx.verbosity == 2
    assert not ctx.copy_operands

    ctx = UIntCtx(props={"operands": "alias"}, operands="copy")
    assert ctx.operands == OperandPolicy.COPY


def test_negative_verbosity():
    with pytest.raises(ValueError):
        UIntCtx(verbosity=-1)


def test_let_makes_a_new_context():
    ctx = UIntCtx()
    loud = ctx.let(props={"verbosity": 2})
    assert loud.verbosity == 2
    assert ctx.verbosity == 0
    assert loud.props == {"verbosity": 2}
    assert ctx.props == {}

    same = ctx.let()
    assert same == ctx
    assert same is not ctx


def test_interning():
    assert evalctx.uint_ctx("alias") is evalctx.uint_ctx(OperandPolicy.ALIAS)
    assert evalctx.uint_ctx() is evalctx.default_ctx
    assert evalctx.uint_ctx("alias") is not evalctx.uint_ctx("alias", verbosity=1)


def test_str_lists_fields():
    text = str(UIntCtx(operands="alias", props={"note": "x"}))
    assert text.startswith("UIntCtx:")
    assert "operands" in text
    assert "note: x" in text


def test_class_props_placeholder_is_immutable():
    with pytest.raises(ValueError):
        EvalCtx.props["x"] = 1
    with pytest.raises(ValueError):
        EvalCtx.props.update(x=1)
