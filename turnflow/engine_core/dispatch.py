"""
Dispatchers - named callables that submit moves.

Pure glue: no check that a name is a declared move, no argument
checking. Each call submits exactly one MakeMove and returns None.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Iterable

from .action import make_move


logger = logging.getLogger(__name__)

Dispatcher = Callable[..., None]


def _sink_of(target: Any) -> Callable[[Any], Any]:
    dispatch = getattr(target, "dispatch", None)
    if callable(dispatch):
        return dispatch
    if callable(target):
        return target
    raise TypeError(f"Dispatch target must be callable or have dispatch(): {target!r}")


def create_dispatchers(move_names: Iterable[str], target: Any) -> dict[str, Dispatcher]:
    """
    Build one dispatcher per move name.

    target is either a callable accepting an action or an object
    with a dispatch(action) method, such as a GameStore.
    """
    sink = _sink_of(target)
    dispatchers: dict[str, Dispatcher] = {}

    for name in move_names:
        dispatchers[name] = _make_dispatcher(name, sink)
    return dispatchers


def _make_dispatcher(name: str, sink: Callable[[Any], Any]) -> Dispatcher:
    def dispatcher(*args: Any) -> None:
        logger.debug("Dispatching move %s%r", name, args)
        sink(make_move(name, *args))

    dispatcher.__name__ = name
    return dispatcher
