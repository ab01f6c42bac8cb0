"""A small bounded channel for passing values out of signal handlers.

The channel has a fixed number of slots. Sending never blocks: when every
slot is taken, the value is silently dropped, much as the kernel collates
repeated signals of one kind. Receiving never blocks either; an empty
channel yields ``None``.

Both operations rely only on single ``deque`` operations and take no lock.
That keeps them safe to call from a signal handler, which may interrupt
the very thread that is draining the channel.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Optional, TypeVar

__all__ = ["Channel", "SLOTS"]

T = TypeVar("T")

SLOTS = 5
"""Number of values a channel can hold at once."""


class Channel(Generic[T]):
    """A bounded, non-blocking, order-preserving channel.

    Values sent while all slots are occupied are dropped. ``None`` is
    reserved to mean "nothing available", so it should not be sent.
    """

    __slots__ = ("_free", "_full")

    def __init__(self) -> None:
        # Tokens for empty slots. A slot leaves this queue while it is
        # being filled and comes back once its value has been taken out.
        self._free: Deque[None] = deque([None] * SLOTS)
        self._full: Deque[T] = deque()

    def send(self, val: T) -> None:
        """Insert a value, dropping it if there is no free slot."""
        try:
            self._free.pop()
        except IndexError:
            return
        self._full.append(val)

    def recv(self) -> Optional[T]:
        """Take the oldest value, or return ``None`` if the channel is empty."""
        try:
            val = self._full.popleft()
        except IndexError:
            return None
        self._free.append(None)
        return val

    def __repr__(self) -> str:
        return f"Channel(queued={len(self._full)}, free={len(self._free)})"