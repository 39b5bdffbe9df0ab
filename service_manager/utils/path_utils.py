"""
Dotted path utilities.

A path is ``name[.prop1.prop2...]``: the first segment names a bound service,
the remaining segments address a nested property of the resolved value.
"""

from collections.abc import Mapping, Sequence
from typing import Any, List, Tuple


class _Missing:
    """Marker for a property that could not be read."""

    def __repr__(self) -> str:
        return 'MISSING'


MISSING = _Missing()


def split_path(path: str) -> Tuple[str, List[str]]:
    """
    Split a dotted path into the service name and its property segments.

    ``'config'`` gives ``('config', [])``, ``'config.db.host'`` gives
    ``('config', ['db', 'host'])``. A trailing dot with nothing after it
    addresses the service itself.

    Args:
        path: Dotted path to split

    Returns:
        Tuple of (name, segments)
    """
    name, _, sub_path = path.partition('.')
    if not sub_path:
        return name, []
    return name, sub_path.split('.')


def _read_segment(value: Any, segment: str) -> Any:
    if isinstance(value, Mapping):
        if segment in value:
            return value[segment]
        # YAML and JSON-like data can carry integer keys
        if segment.isdecimal() and int(segment) in value:
            return value[int(segment)]
        return MISSING

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if segment.isdecimal() and int(segment) < len(value):
            return value[int(segment)]
        return MISSING

    if value is None:
        return MISSING

    return getattr(value, segment, MISSING)


def read_path(value: Any, segments: List[str]) -> Any:
    """
    Read a nested property from a value, one segment at a time.

    Mappings are read by key, sequences by non-negative integer index and any
    other object by attribute. A ``None`` found midway means the remaining
    segments are missing.

    Returns:
        The property, or ``MISSING`` if any segment could not be read
    """
    if not segments:
        return value

    head = _read_segment(value, segments[0])
    if head is MISSING:
        return MISSING
    return read_path(head, segments[1:])
