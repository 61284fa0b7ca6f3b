"""
Errors raised around the transition core.

Transitions themselves never raise for well-formed input. These are
raised by snapshotting, raw-action parsing and the host store.
"""


class TurnflowError(Exception):
    """Base class for turnflow errors."""


class SnapshotError(TurnflowError):
    """A value in the game state cannot be structurally cloned."""


class ActionFormatError(TurnflowError, ValueError):
    """A raw action mapping is missing its tag or has malformed fields."""


class StaleStateError(TurnflowError):
    """A client submitted an action against an outdated state _id."""

    def __init__(self, client_id: int, server_id: int):
        super().__init__(
            f"Stale state: client is at _id={client_id}, server is at _id={server_id}"
        )
        self.client_id = client_id
        self.server_id = server_id
