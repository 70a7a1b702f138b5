import random

import pytest

from bvint.arithmetic import evalctx


def pytest_addoption(parser):
    parser.addoption(
        "--exhaustive-bound",
        type=int,
        default=48,
        help="Upper bound (exclusive) for exhaustive operand sweeps",
    )


@pytest.fixture
def bound(request):
    """Operands in exhaustive sweeps range over [0, bound)."""
    return request.config.getoption("--exhaustive-bound")


@pytest.fixture
def rng():
    """Seeded generator, so random sweeps are reproducible."""
    return random.Random(0x5EED)


@pytest.fixture
def alias_ctx():
    return evalctx.uint_ctx(operands="alias")


@pytest.fixture
def copy_ctx():
    return evalctx.uint_ctx(operands="copy")
