# scalar_aad/core/graph.py
from __future__ import annotations

import logging
from typing import List, Optional, Set, Tuple

from ..config import get_config
from .errors import CyclicGraphError
from .node import Node

logger = logging.getLogger(__name__)


def topo_sort(root: Node, *, check_cycles: Optional[bool] = None) -> List[Node]:
    """
    Return every node reachable from `root` in dependency order.

    Postorder depth-first traversal over the operand relation: each node comes
    after all of its operands, operand 0 is explored before operand 1, and
    `root` is last. Nodes are tracked by identity, so a node shared by several
    consumers (or two distinct nodes with equal values) is handled correctly
    and every node appears exactly once.

    The traversal uses an explicit stack, so graph depth is bounded by memory
    rather than by the interpreter's recursion limit.

    Precondition: the operand relation is acyclic. With `check_cycles` (or
    ``EngineConfig.check_cycles``) enabled a cycle raises CyclicGraphError;
    otherwise a cyclic graph yields an order that is not topological.
    """
    if check_cycles is None:
        check_cycles = get_config().check_cycles

    order: List[Node] = []
    visited: Set[int] = set()
    on_path: Set[int] = set()
    # (node, expanded): expanded entries are emitted once their operands are done
    stack: List[Tuple[Node, bool]] = [(root, False)]

    while stack:
        node, expanded = stack.pop()
        key = id(node)
        if expanded:
            on_path.discard(key)
            order.append(node)
            continue
        if key in visited:
            if check_cycles and key in on_path:
                raise CyclicGraphError(node)
            continue
        visited.add(key)
        on_path.add(key)
        stack.append((node, True))
        for operand in reversed(node.operands):
            stack.append((operand, False))

    logger.debug("topo_sort: %d reachable nodes", len(order))
    return order
