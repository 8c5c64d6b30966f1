"""Run a callable when a block is left."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Callable


class ScopeExit:
    """Context manager that calls `f` on leaving the block, error or not."""

    def __init__(self, f: Callable[[], Any]) -> None:
        self.f = f

    def __enter__(self) -> ScopeExit:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.f()
        return False


def make_scope_exit(f: Callable[[], Any]) -> ScopeExit:
    """Wrap `f` in a ScopeExit."""
    return ScopeExit(f)