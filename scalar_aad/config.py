# scalar_aad/config.py
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Optional

FP_ERROR_MODES = ("ignore", "warn", "raise")


@dataclass(frozen=True)
class EngineConfig:
    """
    Process-wide settings for graph construction and traversal.

    Attributes
    ----------
    check_cycles : bool
        Detect cycles during topological sorting and raise CyclicGraphError.
        Off by default: the operand relation is assumed acyclic.
    fp_errors : str
        Treatment of IEEE-754 events (overflow, 0^-1, invalid power) in forward
        and backward rules, passed to ``numpy.errstate``. "ignore" lets inf/NaN
        propagate silently, "warn" emits RuntimeWarning, "raise" raises
        FloatingPointError.
    """
    check_cycles: bool = False
    fp_errors: str = "ignore"

    def __post_init__(self):
        if self.fp_errors not in FP_ERROR_MODES:
            raise ValueError(
                f"fp_errors must be one of {FP_ERROR_MODES}, got {self.fp_errors!r}"
            )


_config = EngineConfig()


def get_config() -> EngineConfig:
    return _config


def set_config(**changes) -> EngineConfig:
    """Replace fields of the process default configuration and return it."""
    global _config
    _config = replace(_config, **changes)
    return _config


@contextmanager
def use_config(config: Optional[EngineConfig] = None, **changes):
    """
    Context manager to temporarily switch the active configuration:
        with use_config(fp_errors="raise"):
            ... build computation ...
            backward(y)
    """
    global _config
    prev = _config
    try:
        _config = replace(config or prev, **changes)
        yield _config
    finally:
        _config = prev
