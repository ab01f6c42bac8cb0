"""Signal numbers and signal sets used throughout the package.

The numbers come from the running platform; names a platform does not
provide are simply not defined here.
"""

import signal as _signal
import sys as _sys

__all__ = [
    "SIGABRT",
    "SIGFPE",
    "SIGILL",
    "SIGINT",
    "SIGSEGV",
    "SIGTERM",
    "FORBIDDEN",
    "TERM_SIGNALS",
]

SIGABRT: int = int(_signal.SIGABRT)
SIGFPE: int = int(_signal.SIGFPE)
SIGILL: int = int(_signal.SIGILL)
SIGINT: int = int(_signal.SIGINT)
SIGSEGV: int = int(_signal.SIGSEGV)
SIGTERM: int = int(_signal.SIGTERM)

if _sys.platform == "win32":
    # Same as SIGABRT, but with the number used on other platforms.
    SIGABRT_COMPAT: int = 6
    # Ctrl-Break pressed in a console process.
    SIGBREAK: int = 21

    __all__ += ["SIGABRT_COMPAT", "SIGBREAK"]

    FORBIDDEN: frozenset[int] = frozenset({SIGILL, SIGFPE, SIGSEGV})
    """Signals that may not be subscribed to through this package."""

    TERM_SIGNALS: tuple[int, ...] = (SIGTERM, SIGINT)
    """Signals commonly requesting shutdown of an application."""
else:
    SIGALRM: int = int(_signal.SIGALRM)
    SIGBUS: int = int(_signal.SIGBUS)
    SIGCHLD: int = int(_signal.SIGCHLD)
    SIGCONT: int = int(_signal.SIGCONT)
    SIGHUP: int = int(_signal.SIGHUP)
    SIGKILL: int = int(_signal.SIGKILL)
    SIGPIPE: int = int(_signal.SIGPIPE)
    SIGPROF: int = int(_signal.SIGPROF)
    SIGQUIT: int = int(_signal.SIGQUIT)
    SIGSTOP: int = int(_signal.SIGSTOP)
    SIGSYS: int = int(_signal.SIGSYS)
    SIGTRAP: int = int(_signal.SIGTRAP)
    SIGTSTP: int = int(_signal.SIGTSTP)
    SIGTTIN: int = int(_signal.SIGTTIN)
    SIGTTOU: int = int(_signal.SIGTTOU)
    SIGURG: int = int(_signal.SIGURG)
    SIGUSR1: int = int(_signal.SIGUSR1)
    SIGUSR2: int = int(_signal.SIGUSR2)
    SIGVTALRM: int = int(_signal.SIGVTALRM)
    SIGWINCH: int = int(_signal.SIGWINCH)
    SIGXCPU: int = int(_signal.SIGXCPU)
    SIGXFSZ: int = int(_signal.SIGXFSZ)

    __all__ += [
        "SIGALRM",
        "SIGBUS",
        "SIGCHLD",
        "SIGCONT",
        "SIGHUP",
        "SIGKILL",
        "SIGPIPE",
        "SIGPROF",
        "SIGQUIT",
        "SIGSTOP",
        "SIGSYS",
        "SIGTRAP",
        "SIGTSTP",
        "SIGTTIN",
        "SIGTTOU",
        "SIGURG",
        "SIGUSR1",
        "SIGUSR2",
        "SIGVTALRM",
        "SIGWINCH",
        "SIGXCPU",
        "SIGXFSZ",
    ]

    if hasattr(_signal, "SIGIO"):
        SIGIO: int = int(_signal.SIGIO)
        __all__.append("SIGIO")

    if hasattr(_signal, "SIGINFO"):
        SIGINFO: int = int(_signal.SIGINFO)
        __all__.append("SIGINFO")

    FORBIDDEN: frozenset[int] = frozenset(
        {SIGKILL, SIGSTOP, SIGILL, SIGFPE, SIGSEGV}
    )
    """Signals that may not be subscribed to through this package."""

    TERM_SIGNALS: tuple[int, ...] = (SIGTERM, SIGQUIT, SIGINT)
    """Signals commonly requesting shutdown of an application."""