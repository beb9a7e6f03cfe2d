"""
Field-by-field fallback merge used when updating aliases and functions.

An override wins whenever it is set (not None); otherwise the value from the
currently deployed snapshot is used. Every field is resolved on its own.
"""

from typing import Any, Dict, Iterable, Optional, TypeVar

T = TypeVar("T")


def resolve(override: Optional[T], fallback: Optional[T]) -> Optional[T]:
    """Return ``override`` unless it is None, in which case ``fallback``."""
    return fallback if override is None else override


def merge_fields(overrides: Any, snapshot: Any, fields: Iterable[str]) -> Dict[str, Any]:
    """
    Resolve each named attribute of ``overrides`` against ``snapshot``.

    Args:
        overrides: Object holding caller-supplied values (None means unset)
        snapshot: Object holding the remote values used as fallback
        fields: Attribute names present on both objects

    Returns:
        Mapping of field name to effective value
    """
    return {
        field: resolve(getattr(overrides, field), getattr(snapshot, field))
        for field in fields
    }
