"""Ways of carrying information out of signal handlers.

An exfiltrator decides what is recorded when a signal arrives and what is
handed to the consumer afterwards. Each signal gets a slot of its own,
created by :meth:`Exfiltrator.new_slot`; an empty slot means that no
signal has been delivered.

:meth:`Exfiltrator.store` runs inside a signal handler and may interrupt a
:meth:`Exfiltrator.load` on the same slot, so neither may take a lock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Optional

__all__ = ["Exfiltrator", "SignalOnly"]


class Exfiltrator(ABC):
    """Describes what is stored for a delivered signal and what is returned."""

    @abstractmethod
    def new_slot(self) -> Any:
        """Create a slot in the "no signal delivered" state."""

    @abstractmethod
    def supports_signal(self, sig: int) -> bool:
        """Whether the signal may be registered with this exfiltrator."""

    @abstractmethod
    def store(self, slot: Any, signal: int) -> None:
        """Record a delivery of ``signal`` in ``slot``; called in the handler."""

    @abstractmethod
    def load(self, slot: Any, signal: int) -> Optional[Any]:
        """Take the recorded information out of ``slot`` and reset it.

        Returns ``None`` when no signal was delivered since the last load.
        """

    def init(self, slot: Any, signal: int) -> None:
        """Prepare ``slot`` before its first use; the default does nothing."""


class _Flag:
    """A set-once flag whose operations are single atomic deque calls."""

    __slots__ = ("_raised",)

    def __init__(self) -> None:
        self._raised: Deque[bool] = deque(maxlen=1)

    def set(self) -> None:
        self._raised.append(True)

    def take(self) -> bool:
        try:
            self._raised.popleft()
        except IndexError:
            return False
        return True

    def __repr__(self) -> str:
        return f"_Flag({bool(self._raised)})"


@dataclass(frozen=True)
class SignalOnly(Exfiltrator):
    """Provides just the signal number; repeated deliveries are collated."""

    def new_slot(self) -> _Flag:
        return _Flag()

    def supports_signal(self, sig: int) -> bool:
        return True

    def store(self, slot: _Flag, signal: int) -> None:
        slot.set()

    def load(self, slot: _Flag, signal: int) -> Optional[int]:
        return signal if slot.take() else None