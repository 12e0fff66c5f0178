# scalar_aad/core/node.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import NodeBusyError

_SCALAR_TYPES = (int, float, np.integer, np.floating)


def _as_float(val) -> np.float64:
    # Only real numeric scalars are accepted; bool is an int but never meant here
    if isinstance(val, bool) or not isinstance(val, _SCALAR_TYPES):
        raise TypeError(
            f"Node only accepts real numeric scalars (int, float, numpy number), "
            f"but got {type(val)}"
        )
    try:
        return np.float64(val)
    except OverflowError:
        raise ValueError(f"{val!r} is out of float64 range") from None


class Node:
    """
    One scalar vertex of the computation graph.

    Attributes
    ----------
    value : np.float64
        Forward value, computed eagerly when the node is built. Read-only:
        gradients are always evaluated at the values captured at construction.
    gradient : np.float64
        Accumulated partial derivative of a downstream root w.r.t. this node.
        Starts at 0.0 and only ever grows by addition during a backward pass.
    op : Op | None
        Operator that produced the node; None for leaves.
    operands : tuple[Node, ...]
        Direct predecessors in the order given at construction. Backward rules
        index them positionally.
    name : Optional[str]
        Optional debug/pretty-print name.

    The operand relation must stay acyclic. Nodes are shared by reference:
    every downstream node that consumes this one keeps it alive.
    """

    __slots__ = ("_value", "_gradient", "_op", "_operands", "_busy", "name")

    def __init__(self, value, *, op=None, operands: Sequence[Node] = (),
                 name: Optional[str] = None):
        operands = tuple(operands)
        for p in operands:
            if not isinstance(p, Node):
                raise TypeError(f"operands must be Node instances, got {type(p)}")
        arity = 0 if op is None else op.arity
        if len(operands) != arity:
            tag = "leaf" if op is None else op.tag
            raise ValueError(
                f"{tag} expects {arity} operand(s), got {len(operands)}"
            )

        self._value = _as_float(value)
        self._gradient = np.float64(0.0)
        self._op = op
        self._operands: Tuple[Node, ...] = operands
        self._busy = False
        self.name = name

    def __repr__(self):
        tag = "leaf" if self._op is None else str(self._op)
        return (f"Node(value={float(self._value)!r}, gradient={float(self._gradient)!r}, "
                f"op={tag}, name={self.name!r})")

    # ------------------------------------------------------------------ #
    # exclusive access
    # ------------------------------------------------------------------ #
    @contextmanager
    def exclusive(self):
        """
        Hold exclusive access to this node's mutable fields.

        Must wrap a single read-modify-write step and never span a traversal.
        Re-entering while held raises NodeBusyError instead of interleaving
        two writers.
        """
        if self._busy:
            raise NodeBusyError(f"{self!r} is already held for exclusive access")
        self._busy = True
        try:
            yield self
        finally:
            self._busy = False

    def accumulate(self, delta) -> None:
        """gradient += delta, as one exclusive step."""
        with self.exclusive():
            self._gradient = self._gradient + delta

    # ------------------------------------------------------------------ #
    # fields
    # ------------------------------------------------------------------ #
    @property
    def value(self) -> np.float64:
        return self._value

    @property
    def gradient(self) -> np.float64:
        return self._gradient

    @gradient.setter
    def gradient(self, g) -> None:
        g = np.float64(g)
        with self.exclusive():
            self._gradient = g

    @property
    def op(self):
        return self._op

    @property
    def operands(self) -> Tuple[Node, ...]:
        return self._operands

    @property
    def is_leaf(self) -> bool:
        return self._op is None

    # ------------------------------------------------------------------ #
    # operator overloading for arithmetic operations
    # ------------------------------------------------------------------ #
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, exponent):
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def relu(self):
        from ..ops.special import relu
        return relu(self)

    def backward(self, seed: float = 1.0) -> None:
        from .engine import backward
        backward(self, seed=seed)

    def zero_grad(self) -> None:
        from .engine import zero_grad
        zero_grad(self)


def leaf(value, name: Optional[str] = None) -> Node:
    """Allocate a user-created node: gradient 0.0, no operator, no operands."""
    return Node(value, name=name)
