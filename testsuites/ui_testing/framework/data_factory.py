"""
================================================================================
Test Data Factory
================================================================================

Generates account data that has never been registered on the portal, so
sign-up scenarios can be repeated against the same deployment.

================================================================================
"""

import time
from typing import Callable, Optional

from .fixture_loader import Credential


class AccountFactory:
    """
    Produces unique sign-up emails of the form `test_<epoch-ms>@example.com`.

    Two calls within the same millisecond still return different addresses:
    the timestamp is bumped past the last one handed out.
    """

    PREFIX = "test_"
    DOMAIN = "example.com"

    def __init__(
        self,
        prefix: Optional[str] = None,
        domain: Optional[str] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.prefix = self.PREFIX if prefix is None else prefix
        self.domain = domain or self.DOMAIN
        self._clock = clock
        self._last_stamp = 0

    def _next_stamp(self) -> int:
        stamp = int(self._clock() * 1000)
        if stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return stamp

    def unique_email(self) -> str:
        return f"{self.prefix}{self._next_stamp()}@{self.domain}"

    def unique_credential(self, template: Credential) -> Credential:
        """Fresh email, password taken from `template`."""
        return Credential(email=self.unique_email(), password=template.password)


__all__ = [
    "AccountFactory",
]
