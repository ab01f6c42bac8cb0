"""Low-level signal utilities and the registry of signal actions.

Any number of independent actions may be registered for one signal. The
first registration for a signal installs a dispatching handler which calls
the previously installed Python handler (if there was a callable one) and
then every registered action, in registration order. Removing all actions
does not restore the default disposition of the signal.
"""

from __future__ import annotations

import errno
import itertools
import os
import signal as _signal
import threading
from dataclasses import dataclass
from types import FrameType
from typing import Any, Callable, Dict, Optional

from .consts import FORBIDDEN

__all__ = ["SigId", "raise_signal", "abort", "exit", "register", "unregister"]

Action = Callable[[], Any]


@dataclass(frozen=True)
class SigId:
    """Identifies one registered action so that it can be unregistered."""

    signal: int
    action: int


def _invalid_argument() -> OSError:
    return OSError(errno.EINVAL, os.strerror(errno.EINVAL))


class _Slot:
    """The dispatching handler installed for one signal."""

    def __init__(self, previous: Any) -> None:
        self.previous = previous
        # Replaced as a whole on every change, so the dispatcher always sees
        # a consistent mapping without taking a lock.
        self.actions: Dict[int, Action] = {}

    def __call__(self, signum: int, frame: Optional[FrameType]) -> None:
        previous = self.previous
        # The stock SIGINT handler stands in for the default action, which
        # is what registering an action replaces.
        if callable(previous) and previous is not _signal.default_int_handler:
            previous(signum, frame)
        for action in self.actions.values():
            action()


_lock = threading.Lock()
_slots: Dict[int, _Slot] = {}
_ids = itertools.count()


def register(signal: int, action: Action) -> SigId:
    """Register ``action`` to run whenever ``signal`` arrives.

    Raises ``ValueError`` for forbidden signals and ``OSError`` when the
    signal cannot be handled.
    """
    if signal in FORBIDDEN:
        raise ValueError(f"Attempted to register forbidden signal {signal}")
    if signal not in _signal.valid_signals():
        raise _invalid_argument()
    with _lock:
        slot = _slots.get(signal)
        if slot is None:
            slot = _Slot(_signal.getsignal(signal))
            _signal.signal(signal, slot)
            _slots[signal] = slot
        sig_id = SigId(signal, next(_ids))
        slot.actions = {**slot.actions, sig_id.action: action}
    return sig_id


def unregister(sig_id: SigId) -> bool:
    """Remove a registered action; return whether it was still registered."""
    with _lock:
        slot = _slots.get(sig_id.signal)
        if slot is None or sig_id.action not in slot.actions:
            return False
        actions = dict(slot.actions)
        del actions[sig_id.action]
        slot.actions = actions
        return True


def raise_signal(sig: int) -> None:
    """Send ``sig`` to the current process, raising ``OSError`` on failure."""
    try:
        _signal.raise_signal(sig)
    except ValueError as exc:
        raise _invalid_argument() from exc


def abort() -> None:
    """Abort the process immediately."""
    os.abort()


def exit(status: int) -> None:
    """Terminate the process with ``status`` without running exit hooks."""
    os._exit(status)