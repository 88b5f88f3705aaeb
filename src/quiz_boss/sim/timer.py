"""Question countdown owned by the engine.

The countdown never runs on its own: the host loop calls
:meth:`Countdown.advance` with the elapsed time and the engine turns an
expiry into a timeout answer.
"""

from __future__ import annotations

import math


class Countdown:
    """Cancellable countdown for the current question.

    Parameters
    ----------
    duration:
        Default length in seconds used by :meth:`arm` when no explicit
        duration is given.
    """

    def __init__(self, duration: float = 20.0) -> None:
        self._default = duration
        self._remaining = 0.0
        self._armed = False

    # -- state ---------------------------------------------------------------

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def remaining(self) -> float:
        return self._remaining if self._armed else 0.0

    @property
    def seconds_left(self) -> int:
        """Whole seconds shown to the players (rounded up)."""
        return math.ceil(self.remaining)

    # -- control -------------------------------------------------------------

    def arm(self, duration: float | None = None) -> None:
        """(Re)start the countdown for a newly current question."""
        self._remaining = self._default if duration is None else duration
        self._armed = True

    def cancel(self) -> None:
        self._armed = False
        self._remaining = 0.0

    def advance(self, dt: float) -> bool:
        """Consume *dt* seconds.

        Returns ``True`` exactly once, on the call where the countdown
        reaches zero; the countdown is disarmed at that point.
        """
        if not self._armed or dt <= 0:
            return False
        self._remaining -= dt
        if self._remaining <= 0:
            self.cancel()
            return True
        return False

    def __repr__(self) -> str:
        return f"Countdown(armed={self._armed}, remaining={self._remaining:.2f})"
