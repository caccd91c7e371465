"""Bridges between the numeric tower and numerical libraries."""

from .numpy_bridge import (
    to_tower,
    to_numpy_scalar,
    from_numpy_array,
    to_numpy_array,
    common_variant,
)

__all__ = [
    "to_tower",
    "to_numpy_scalar",
    "from_numpy_array",
    "to_numpy_array",
    "common_variant",
]
