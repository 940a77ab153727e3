"""Diagnostics and debugging utilities for mstkit."""

from .core import (
    assert_acyclic,
    assert_partition,
    assert_prim_tree,
    assert_spanning_forest,
    is_acyclic,
    total_weight,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "total_weight",
    "is_acyclic",
    "assert_acyclic",
    "assert_spanning_forest",
    "assert_partition",
    "assert_prim_tree",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
