"""Log context shared by every record emitted inside a comparison.

A comparison sets ``comparison_id`` once and each side adds ``side`` and
``source``. ContextualFilter copies the fields onto log records.
"""

from concurrent.futures import Executor, Future
from contextlib import contextmanager
from contextvars import ContextVar, Token, copy_context
from typing import Any, Callable, Dict, Iterator

_fields: ContextVar[Dict[str, Any]] = ContextVar("billtext_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields active in the current context."""
    return dict(_fields.get())


def push_log_context(**fields: Any) -> Token:
    """Add fields on top of the current ones; later values win."""
    return _fields.set({**_fields.get(), **fields})


def pop_log_context(token: Token) -> None:
    _fields.reset(token)


def clear_log_context() -> None:
    _fields.set({})


@contextmanager
def log_context(**fields: Any) -> Iterator[Dict[str, Any]]:
    """Scope log fields to a block.

    Example:
        >>> with log_context(comparison_id="c0ffee"):
        ...     with log_context(side="left", source="bill.pdf"):
        ...         logger.info("Fetching document")
    """
    token = push_log_context(**fields)
    try:
        yield get_log_context()
    finally:
        pop_log_context(token)


def submit_with_context(executor: Executor, fn: Callable[..., Any], *args: Any) -> Future:
    """Submit work that sees the caller's log fields.

    Pool threads start with an empty context, so the task runs inside a copy
    of the submitting thread's context.
    """
    return executor.submit(copy_context().run, fn, *args)
