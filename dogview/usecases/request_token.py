"""Single-flight load tokens for cancel-aware fetch sequences.

The view model asks :class:`LoadSupervisor` for a fresh :class:`RequestToken`
at the start of every load. Issuing a token cancels the previous one, which
cancels its in-flight network calls and makes any later result from them raise
:class:`~dogview.domain.errors.LoadCancelledError` instead of returning.
"""

from __future__ import annotations

import asyncio
import functools
import itertools
import logging
from typing import Any, Callable, Optional, Set, TypeVar

from dogview.domain.errors import LoadCancelledError

T = TypeVar("T")

log = logging.getLogger(__name__)


class RequestToken:
    """Cancellation capability for one logical load.

    Attributes:
        serial: Monotonic load number, used in log lines.
    """

    def __init__(self, serial: int) -> None:
        self.serial = serial
        self._cancelled = False
        self._pending: Set[asyncio.Future] = set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Mark the token superseded and cancel its outstanding calls."""
        if self._cancelled:
            return
        self._cancelled = True
        for fut in list(self._pending):
            fut.cancel()
        if self._pending:
            log.debug("load #%d: cancelled %d in-flight call(s)", self.serial, len(self._pending))

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise LoadCancelledError(self.serial)

    async def run_io(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run one blocking call in a worker thread on behalf of this token.

        The token is checked before the call starts and again after it
        resumes. A worker thread cannot be interrupted, so a call that is
        cancelled mid-flight has its eventual result discarded.

        Raises:
            LoadCancelledError: If the token is or becomes superseded.
        """
        self.raise_if_cancelled()
        fut = asyncio.ensure_future(asyncio.to_thread(functools.partial(fn, *args, **kwargs)))
        self._pending.add(fut)
        try:
            result = await fut
        except asyncio.CancelledError:
            if self._cancelled:
                raise LoadCancelledError(self.serial) from None
            raise
        finally:
            self._pending.discard(fut)
        self.raise_if_cancelled()
        return result


class LoadSupervisor:
    """Issue request tokens so that only the newest load stays active."""

    def __init__(self) -> None:
        self._serials = itertools.count(1)
        self._current: Optional[RequestToken] = None

    @property
    def current(self) -> Optional[RequestToken]:
        return self._current

    def begin(self) -> RequestToken:
        """Cancel the active token, if any, and return a fresh one."""
        self.cancel()
        token = RequestToken(next(self._serials))
        self._current = token
        return token

    def is_current(self, token: RequestToken) -> bool:
        return token is self._current and not token.cancelled

    def cancel(self) -> None:
        """Cancel the active token without issuing a new one."""
        token = self._current
        if token is None:
            return
        token.cancel()


__all__ = ["LoadSupervisor", "RequestToken"]
