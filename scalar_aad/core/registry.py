# scalar_aad/core/registry.py
"""
Closed set of primitive operators.

Each operator pairs a forward rule, which maps operand values to the output
value, with a backward rule, which distributes the output's accumulated
gradient g onto its operands:

    tag    arity  forward          backward
    add    2      a + b            a.grad += g;         b.grad += g
    mul    2      a * b            a.grad += b * g;     b.grad += a * g
    pow    1      a ** e           a.grad += e * a**(e-1) * g
    exp    1      exp(a)           a.grad += out * g
    relu   1      max(a, 0)        a.grad += g if out > 0 else 0

Negation, subtraction and division are not primitives; they are composed from
the rules above in ``scalar_aad.ops.arithmetic``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class Op:
    """
    Operator tag attached to a derived node.

    tag      : key into OPERATORS ("add", "mul", "pow", "exp", "relu").
    exponent : fixed exponent for "pow", None for every other tag.
    """
    tag: str
    exponent: Optional[float] = None

    def __post_init__(self):
        if self.tag not in OPERATORS:
            raise ValueError(f"Unknown operator: {self.tag!r}")
        if self.tag == "pow":
            if self.exponent is None:
                raise ValueError("pow requires an exponent")
            object.__setattr__(self, "exponent", float(self.exponent))
        elif self.exponent is not None:
            raise ValueError(f"{self.tag} does not take an exponent")

    def __str__(self):
        if self.tag == "pow":
            return f"pow({self.exponent!r})"
        return self.tag

    @property
    def rule(self) -> OpRule:
        return OPERATORS[self.tag]

    @property
    def arity(self) -> int:
        return self.rule.arity

    def forward(self, *values) -> np.float64:
        return self.rule.forward(self, *values)

    def backward(self, grad, value, operands: Sequence) -> None:
        self.rule.backward(self, grad, value, operands)


@dataclass(frozen=True)
class OpRule:
    tag: str
    arity: int
    forward: Callable[..., np.float64]
    backward: Callable[[Op, np.float64, np.float64, Sequence], None]


OPERATORS: Dict[str, OpRule] = {}


def _register(tag: str, arity: int, forward, backward) -> None:
    OPERATORS[tag] = OpRule(tag=tag, arity=arity, forward=forward, backward=backward)


# ---------- Add ----------
def _add_forward(op, a, b):
    return np.float64(a) + np.float64(b)


def _add_backward(op, g, out, operands):
    # d(a+b)/da = d(a+b)/db = 1
    operands[0].accumulate(g)
    operands[1].accumulate(g)


# ---------- Multiply ----------
def _mul_forward(op, a, b):
    return np.float64(a) * np.float64(b)


def _mul_backward(op, g, out, operands):
    # Read both values first: operands[0] and operands[1] may be the same node
    a = operands[0].value
    b = operands[1].value
    operands[0].accumulate(b * g)
    operands[1].accumulate(a * g)


# ---------- Power (constant exponent) ----------
def _pow_forward(op, a):
    return np.power(np.float64(a), op.exponent)


def _pow_backward(op, g, out, operands):
    a = operands[0].value
    e = op.exponent
    operands[0].accumulate(e * np.power(a, e - 1.0) * g)


# ---------- Exponential ----------
def _exp_forward(op, a):
    return np.exp(np.float64(a))


def _exp_backward(op, g, out, operands):
    # d/dx exp(x) = exp(x), which is the node's own value
    operands[0].accumulate(out * g)


# ---------- Rectified linear ----------
def _relu_forward(op, a):
    a = np.float64(a)
    return a if a > 0.0 else np.float64(0.0)


def _relu_backward(op, g, out, operands):
    operands[0].accumulate(g if out > 0.0 else np.float64(0.0))


_register("add", 2, _add_forward, _add_backward)
_register("mul", 2, _mul_forward, _mul_backward)
_register("pow", 1, _pow_forward, _pow_backward)
_register("exp", 1, _exp_forward, _exp_backward)
_register("relu", 1, _relu_forward, _relu_backward)
