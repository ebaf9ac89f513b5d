"""Cancellable, deadline-bounded execution scope."""

import time

from infra_common.exceptions import ScopeExpiredError
from infra_common.models import DeliveredMessage


class Scope:
    """
    Carries cancellation state through an operation call chain.

    Expiry never interrupts running work. Code holding a scope checks
    `done` (or calls `raise_if_done`) to honor cancellation.
    """

    def __init__(
        self,
        timeout: float | None = None,
        message: DeliveredMessage | None = None,
    ):
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = False
        self.message = message

    @classmethod
    def with_timeout(cls, timeout: float) -> "Scope":
        return cls(timeout=timeout)

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def expired(self) -> bool:
        if self._deadline is None:
            return False
        return time.monotonic() >= self._deadline

    @property
    def done(self) -> bool:
        return self._cancelled or self.expired

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when unbounded."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def raise_if_done(self) -> None:
        """
        Raises if the scope can no longer be used.

        Raises:
            ScopeExpiredError: If the scope was cancelled or its deadline passed.
        """
        if self._cancelled:
            raise ScopeExpiredError("cancelled")
        if self.expired:
            raise ScopeExpiredError("deadline exceeded")


def check_scope(scope: Scope | None) -> None:
    """Fails fast when an optional caller scope is already done."""
    if scope is not None:
        scope.raise_if_done()
