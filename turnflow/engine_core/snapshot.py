"""
Structural cloning for state snapshots.

Game state must be plain data: dicts, lists, tuples, sets, scalars,
enums and dataclasses built from those. The standard container
variants OrderedDict, Counter, defaultdict and namedtuples keep their
type. Anything else (functions, open handles, cyclic structures, other
container subclasses) cannot be snapshotted and raises SnapshotError
instead of being silently converted or shared.
"""

from __future__ import annotations
from collections import Counter, OrderedDict, defaultdict
import dataclasses
from enum import Enum
from typing import Any

from .errors import SnapshotError


_SCALARS = (str, int, float, bool, bytes, type(None))
_MAPPINGS = (dict, OrderedDict, Counter)
_SEQUENCES = (list, tuple)
_SETS = (set, frozenset)


def structural_clone(value: Any) -> Any:
    """
    Return a reference-independent deep copy of a plain-data value.

    Raises SnapshotError for callables, cycles and unsupported objects.
    """
    return _clone(value, set(), "$")


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _clone(value: Any, active: set[int], path: str) -> Any:
    if isinstance(value, Enum) or type(value) in _SCALARS:
        return value

    if id(value) in active:
        raise SnapshotError(f"Cyclic reference at {path}")

    active.add(id(value))
    try:
        kind = type(value)
        if kind is defaultdict:
            return defaultdict(value.default_factory, _clone_items(value, active, path))
        if kind in _MAPPINGS:
            return kind(_clone_items(value, active, path))
        if kind in _SEQUENCES:
            return kind(_clone(v, active, f"{path}[{i}]") for i, v in enumerate(value))
        if _is_namedtuple(value):
            return kind(*(_clone(v, active, f"{path}.{f}") for f, v in zip(value._fields, value)))
        if kind in _SETS:
            return kind(_clone(v, active, path) for v in value)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            changes = {
                f.name: _clone(getattr(value, f.name), active, f"{path}.{f.name}")
                for f in dataclasses.fields(value)
                if f.init
            }
            return dataclasses.replace(value, **changes)
    finally:
        active.discard(id(value))

    if callable(value):
        raise SnapshotError(f"Callable at {path} cannot be snapshotted: {value!r}")
    raise SnapshotError(
        f"Unsupported type at {path}: {type(value).__name__}"
    )


def _clone_items(value: dict, active: set[int], path: str) -> dict[Any, Any]:
    return {
        _clone(k, active, path): _clone(v, active, f"{path}[{k!r}]")
        for k, v in value.items()
    }
