# scalar_aad/__init__.py
# Reverse-mode automatic differentiation over scalar values

import logging

from .config import EngineConfig, get_config, set_config, use_config
from .core.errors import AADError, NodeBusyError, CyclicGraphError
from .core.node import Node, leaf
from .core.registry import Op, OPERATORS
from .core.graph import topo_sort
from .core.engine import backward, zero_grad
from .core.seeds import grad, grads, grads_list, value
from .core.graph_utils import get_graph_stats, print_graph_summary, print_computation_graph
from .ops import add, sub, mul, div, neg, pow, exp, relu

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Config
    'EngineConfig',
    'get_config',
    'set_config',
    'use_config',
    # Errors
    'AADError',
    'NodeBusyError',
    'CyclicGraphError',
    # Graph
    'Node',
    'leaf',
    'Op',
    'OPERATORS',
    'topo_sort',
    # Engine
    'backward',
    'zero_grad',
    'grad',
    'grads',
    'grads_list',
    'value',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'exp',
    'relu',
    # Utils
    'get_graph_stats',
    'print_graph_summary',
    'print_computation_graph',
]
