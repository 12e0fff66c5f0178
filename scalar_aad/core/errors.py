# scalar_aad/core/errors.py
"""Exception types raised by the scalar AAD engine."""


class AADError(Exception):
    """Base class for all engine errors."""


class NodeBusyError(AADError, RuntimeError):
    """A node was entered for exclusive access while already held."""


class CyclicGraphError(AADError, ValueError):
    """The operand relation reachable from a root contains a cycle."""

    def __init__(self, node):
        self.node = node
        super().__init__(f"cycle detected through {node!r}")
