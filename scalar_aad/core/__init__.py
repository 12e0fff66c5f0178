# scalar_aad/core/__init__.py

"""
Core public API for the scalar AAD package.

Exports:
    Node          : Scalar graph vertex (value, gradient, operator, operands).
    leaf          : Create a user-owned input node.
    Op, OPERATORS : Operator tags and the registry of forward/backward rules.
    topo_sort     : Dependency-ordered list of nodes reachable from a root.
    backward      : Run a single reverse pass to accumulate gradients.
    zero_grad     : Reset every reachable gradient to zero.
    grad, grads   : Convenience: derivatives of plain Python functions.
    value         : Convenience: extract the forward value of a Node.
"""

from .errors import AADError, NodeBusyError, CyclicGraphError
from .node import Node, leaf
from .registry import Op, OpRule, OPERATORS
from .graph import topo_sort
from .engine import backward, zero_grad
from .seeds import grad, grads, grads_list, value

__all__ = [
    "AADError", "NodeBusyError", "CyclicGraphError",
    "Node", "leaf",
    "Op", "OpRule", "OPERATORS",
    "topo_sort",
    "backward", "zero_grad",
    "grad", "grads", "grads_list", "value",
]
