"""Visitor identity resolution."""

import secrets
import time
from collections.abc import Callable

from ga_beacon.domain.models import VisitorIdentity

CLIENT_ID_PREFIX = "GA.1-2"


class IdentityResolver:
    """Reads the visitor's client id from its cookie or mints a new one."""

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        random_bits: Callable[[int], int] = secrets.randbits,
    ) -> None:
        """Initialize with injectable time and randomness sources."""
        self._clock = clock
        self._random_bits = random_bits

    def resolve(self, existing_client_id: str | None) -> VisitorIdentity:
        """Return the cookie value unchanged, or a freshly minted id when it is empty."""
        if existing_client_id:
            return VisitorIdentity(client_id=existing_client_id)
        return VisitorIdentity(client_id=self.mint(), minted=True)

    def mint(self) -> str:
        """Create a new id of the form ``GA.1-2.<uint32>.<unix seconds>``."""
        return f"{CLIENT_ID_PREFIX}.{self._random_bits(32)}.{int(self._clock())}"
