# scalar_aad/ops/transcendental.py
from ..core.registry import Op
from .arithmetic import _apply


def exp(x):
    return _apply(Op("exp"), x)
