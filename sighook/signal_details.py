"""Names and default dispositions of the known signals."""

from __future__ import annotations

import errno
import os
import signal as _signal
from enum import Enum
from typing import Dict, Optional, Tuple

from . import consts
from .low_level import abort, raise_signal

__all__ = ["signal_name", "emulate_default_handler"]


class _DefaultKind(Enum):
    IGNORE = "ignore"
    STOP = "stop"
    TERM = "term"


_TABLE = (
    ("SIGABRT", _DefaultKind.TERM),
    ("SIGALRM", _DefaultKind.TERM),
    ("SIGBUS", _DefaultKind.TERM),
    ("SIGCHLD", _DefaultKind.IGNORE),
    # Technically "continue", but that is not done by the process itself.
    ("SIGCONT", _DefaultKind.IGNORE),
    ("SIGFPE", _DefaultKind.TERM),
    ("SIGHUP", _DefaultKind.TERM),
    ("SIGILL", _DefaultKind.TERM),
    ("SIGINT", _DefaultKind.TERM),
    ("SIGINFO", _DefaultKind.IGNORE),
    ("SIGIO", _DefaultKind.IGNORE),
    ("SIGKILL", _DefaultKind.TERM),
    ("SIGPIPE", _DefaultKind.TERM),
    ("SIGPROF", _DefaultKind.TERM),
    ("SIGQUIT", _DefaultKind.TERM),
    ("SIGSEGV", _DefaultKind.TERM),
    ("SIGSTOP", _DefaultKind.STOP),
    ("SIGSYS", _DefaultKind.TERM),
    ("SIGTERM", _DefaultKind.TERM),
    ("SIGTRAP", _DefaultKind.TERM),
    ("SIGTSTP", _DefaultKind.STOP),
    ("SIGTTIN", _DefaultKind.STOP),
    ("SIGTTOU", _DefaultKind.STOP),
    ("SIGURG", _DefaultKind.IGNORE),
    ("SIGUSR1", _DefaultKind.TERM),
    ("SIGUSR2", _DefaultKind.TERM),
    ("SIGVTALRM", _DefaultKind.TERM),
    ("SIGWINCH", _DefaultKind.IGNORE),
    ("SIGXCPU", _DefaultKind.TERM),
    ("SIGXFSZ", _DefaultKind.TERM),
)


def _build_details() -> Dict[int, Tuple[str, _DefaultKind]]:
    details: Dict[int, Tuple[str, _DefaultKind]] = {}
    for name, kind in _TABLE:
        number = getattr(consts, name, None)
        if number is not None:
            details.setdefault(number, (name, kind))
    return details


_DETAILS = _build_details()
_UNSTOPPABLE = frozenset(
    getattr(consts, name) for name in ("SIGSTOP", "SIGKILL") if hasattr(consts, name)
)


def signal_name(signal: int) -> Optional[str]:
    """Return the conventional name of ``signal``, or ``None`` if unknown."""
    entry = _DETAILS.get(signal)
    return entry[0] if entry else None


def emulate_default_handler(signal: int) -> None:
    """Do what the default disposition of ``signal`` would do.

    Ignored signals do nothing, stopping signals stop the process and
    terminating signals terminate it (falling back to ``abort``). Raises
    ``OSError`` with ``EINVAL`` for signals not in the table.
    """
    if signal in _UNSTOPPABLE:
        raise_signal(signal)
        return
    entry = _DETAILS.get(signal)
    if entry is None:
        raise OSError(errno.EINVAL, os.strerror(errno.EINVAL))
    kind = entry[1]
    if kind is _DefaultKind.IGNORE:
        return
    if kind is _DefaultKind.STOP:
        raise_signal(consts.SIGSTOP)
        return
    try:
        _signal.signal(signal, _signal.SIG_DFL)
    except (OSError, ValueError):
        pass
    else:
        if hasattr(_signal, "pthread_sigmask"):
            try:
                _signal.pthread_sigmask(_signal.SIG_UNBLOCK, {signal})
            except OSError:
                pass
        try:
            raise_signal(signal)
        except OSError:
            pass
    # Reached only if the signal failed to terminate the process.
    abort()