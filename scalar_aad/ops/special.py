# scalar_aad/ops/special.py
from ..core.registry import Op
from .arithmetic import _apply


def relu(x):
    """
    Rectified linear unit: out = x if x > 0 else 0.
    The gradient passes through only where the output is positive.
    """
    return _apply(Op("relu"), x)
