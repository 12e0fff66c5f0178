# scalar_aad/ops/arithmetic.py
import numpy as np

from ..config import get_config
from ..core.node import Node
from ..core.registry import Op


def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Node) else Node(x)


def _apply(op, *operands):
    """
    Generic primitive builder:
      - wraps plain numbers as constant leaves
      - computes the output value with the operator's forward rule
      - returns a new node tagged with `op`, operands in argument order
    Operands themselves are left untouched.
    """
    operands = tuple(_as_node(x) for x in operands)
    with np.errstate(all=get_config().fp_errors):
        out_val = op.forward(*(p.value for p in operands))
    return Node(out_val, op=op, operands=operands)


def add(x, y):
    return _apply(Op("add"), x, y)


def mul(x, y):
    return _apply(Op("mul"), x, y)


def pow(x, exponent):
    """
    Power with an exponent fixed at construction:
      out.value = x.value ** exponent

    Any float exponent is accepted, including negative and fractional ones;
    0 ** -1 or a negative base with a fractional exponent produce inf/NaN
    instead of raising (see EngineConfig.fp_errors).
    """
    if isinstance(exponent, Node):
        raise TypeError("pow exponent must be a number, not a Node")
    if isinstance(exponent, bool) or not isinstance(exponent, (int, float, np.integer, np.floating)):
        raise TypeError(f"pow exponent must be a real number, got {type(exponent)}")
    return _apply(Op("pow", exponent), x)


# Derived operations: composed from primitives, so their gradients flow
# entirely through the add/mul/pow rules and the extra constant leaves.
def neg(x):
    return mul(x, Node(-1.0))


def sub(x, y):
    return add(x, neg(y))


def div(x, y):
    return mul(x, pow(y, -1.0))
