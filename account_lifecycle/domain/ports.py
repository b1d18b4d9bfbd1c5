"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) the domain requires from
infrastructure, plus the value types that cross them. Adapters implement
these protocols.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


class AccountStatus(str, Enum):
    """
    Account status for the authentication lifecycle.

    - ACTIVE: user is active and unrestricted
    - LOCKED: user is not permitted access
    - ACTIVATION: user has not yet completed activation

    Any status may be forced to any other; only login depends on status.
    """

    ACTIVE = "active"
    LOCKED = "locked"
    ACTIVATION = "activation"


@dataclass(frozen=True)
class Credential:
    """
    Hashed password record produced by a PasswordHasher.

    The domain never inspects hash or salt; only the hasher that made the
    credential can verify against it.
    """

    hash: str
    salt: str
    created: datetime


class PasswordHasher(Protocol):
    """Port interface for the one-way password hashing primitive."""

    async def hash(self, raw: str) -> Credential:
        """
        Hash a raw password into a new credential.

        Args:
            raw: Plaintext password

        Returns:
            Credential holding the hash, its salt and creation time
        """
        ...

    async def verify(self, credential: Credential, raw: str) -> bool:
        """
        Check a raw password against a stored credential.

        Args:
            credential: Credential previously returned by hash()
            raw: Plaintext password to check

        Returns:
            True if the password matches
        """
        ...
