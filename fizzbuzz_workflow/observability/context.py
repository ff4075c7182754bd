from __future__ import annotations

from contextvars import ContextVar


_session_id: ContextVar[str | None] = ContextVar("session_id", default=None)
_turn_id: ContextVar[int | None] = ContextVar("turn_id", default=None)
_outcome: ContextVar[str | None] = ContextVar("outcome", default=None)


def bind_context(*, session_id: str, turn_id: int) -> None:
    _session_id.set(session_id)
    _turn_id.set(turn_id)
    _outcome.set(None)


def set_outcome(outcome: str) -> None:
    _outcome.set(outcome)


def snapshot() -> dict[str, object]:
    """Return the current shell context for logging."""

    out: dict[str, object] = {}
    if (v := _session_id.get()) is not None:
        out["session_id"] = v
    if (v := _turn_id.get()) is not None:
        out["turn_id"] = v
    if (v := _outcome.get()) is not None:
        out["outcome"] = v
    return out
