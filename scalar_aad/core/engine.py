# scalar_aad/core/engine.py
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..config import get_config
from .graph import topo_sort
from .node import Node

logger = logging.getLogger(__name__)


def backward(root: Node, seed: float = 1.0, *, check_cycles: Optional[bool] = None) -> None:
    """
    Run a single reverse pass from `root`.

    Args:
        root: output node to differentiate.
        seed: value written to root.gradient before propagation (dr/dr = 1).
        check_cycles: override ``EngineConfig.check_cycles`` for this call.

    Notes:
        - Nodes are processed in reverse topological order, so a node's
          gradient is complete before its own rule pushes it to its operands.
        - For each derived node we propagate: operand.gradient += local * node.gradient.
        - The root gradient is set, every other gradient is added to. Calling
          backward twice without zero_grad accumulates.
    """
    order = topo_sort(root, check_cycles=check_cycles)
    root.gradient = seed

    with np.errstate(all=get_config().fp_errors):
        for node in reversed(order):
            op = node.op
            if op is None:
                continue  # leaves have nothing to propagate
            op.backward(node.gradient, node.value, node.operands)

    logger.debug("backward: propagated through %d nodes", len(order))


def zero_grad(root: Node, *, check_cycles: Optional[bool] = None) -> None:
    """
    Set the gradient of every node reachable from `root` to zero.

    Use between independent backward passes over the same graph, e.g. before
    differentiating it again or from another root.
    """
    order = topo_sort(root, check_cycles=check_cycles)
    for node in order:
        node.gradient = 0.0
    logger.debug("zero_grad: reset %d nodes", len(order))
