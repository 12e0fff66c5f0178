# scalar_aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Every helper builds fresh leaves, so no earlier
# gradient can leak into the result.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .node import Node
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _ensure_node(v: Any, *, name: str) -> Node:
    return v if isinstance(v, Node) else Node(v, name=name)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Any], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.

    Example
    -------
    grad(lambda x: x * x + x, 3.0) -> 7.0
    """
    x = Node(x0, name="x")
    y = _ensure_node(f(x), name="y")
    backward(y)
    return x.gradient


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Any],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE backward pass to obtain all dy/dvar simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a Node
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    nodes = {k: Node(v, name=k) for k, v in inputs.items()}
    y = _ensure_node(f(nodes), name="y")
    backward(y)
    return {k: nodes[k].gradient for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Any],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a
    list of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs = [Node(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    y = _ensure_node(f(xs), name="y")
    backward(y)
    return [x.gradient for x in xs]
