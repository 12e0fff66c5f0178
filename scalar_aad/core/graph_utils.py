"""
Computation graph utilities.
Print and analyse the graph reachable from a root node.
"""

from collections import Counter
from typing import Dict, List, Optional

import numpy as np

from .graph import topo_sort
from .node import Node


def _tag(node: Node) -> str:
    return "leaf" if node.op is None else node.op.tag


def get_graph_stats(root: Node) -> Dict:
    """
    Collect statistics of the graph reachable from `root` (no printing).

    Returns:
        dict with nodes, edges, leaves, fan-in/fan-out figures, depth (longest
        operand chain, 0 for a lone leaf) and an operation breakdown.
    """
    order = topo_sort(root)
    index = {id(n): i for i, n in enumerate(order)}
    n_nodes = len(order)

    fan_ins = [len(n.operands) for n in order]
    fan_outs = [0] * n_nodes
    depth = [0] * n_nodes
    for i, node in enumerate(order):
        for p in node.operands:
            j = index[id(p)]
            fan_outs[j] += 1
            # operands precede consumers in `order`, so depth[j] is final
            depth[i] = max(depth[i], depth[j] + 1)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'leaves': sum(1 for n in order if n.op is None),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'depth': depth[-1],
        'operations': dict(Counter(_tag(n) for n in order)),
    }


def print_graph_summary(root: Node, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Args:
        root: output node
        detailed: also list every node (only for graphs of <= 100 nodes)

    Returns:
        the statistics dict from get_graph_stats
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Depth:              {stats['depth']}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        _print_nodes(topo_sort(root))

    print("="*70 + "\n")
    return stats


def print_computation_graph(root: Node, max_nodes: int = 20) -> None:
    """
    Print the graph in topological order, one node per line.

    Args:
        root: output node
        max_nodes: maximum number of nodes to print
    """
    order = topo_sort(root)
    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)
    _print_nodes(order[:max_nodes], order)
    if len(order) > max_nodes:
        print(f"... ({len(order) - max_nodes} more nodes)")
    print("="*70 + "\n")


def _print_nodes(shown: List[Node], order: Optional[List[Node]] = None) -> None:
    index = {id(n): i for i, n in enumerate(order or shown)}
    for i, node in enumerate(shown):
        val = float(node.value)
        if node.operands:
            parent_info = ", ".join(f"Node{index[id(p)]}" for p in node.operands)
            print(f"Node {i:4d}: {str(node.op):12s} ({val:10.6f}) <- [{parent_info}]")
        else:
            print(f"Node {i:4d}: {'leaf':12s} ({val:10.6f}) [leaf/input]")
