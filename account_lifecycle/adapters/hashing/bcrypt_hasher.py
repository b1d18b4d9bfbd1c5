"""
bcrypt password hasher adapter - Implements PasswordHasher protocol.

bcrypt is CPU-bound and blocks for tens of milliseconds per call at
production cost factors, so hashing and verification run in a worker
thread via asyncio.to_thread() and the event loop stays responsive.

Neither the raw password nor the hash is ever logged.
"""

import asyncio
import logging

import bcrypt

from account_lifecycle.domain.ports import Credential
from account_lifecycle.domain.tokens import utcnow

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The cost factor is forwarded to bcrypt.gensalt() unchanged.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        """
        Initialize hasher with a bcrypt cost factor.

        Args:
            rounds: bcrypt work factor (log2 of the iteration count)
        """
        self.rounds = rounds

    async def hash(self, raw: str) -> Credential:
        """
        Hash a raw password with a fresh salt.

        Raises:
            ValueError: Propagated from bcrypt (e.g. password over 72 bytes)
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = await asyncio.to_thread(bcrypt.hashpw, raw.encode(), salt)
        logger.debug("Hashed password with cost factor %d", self.rounds)
        return Credential(hash=hashed.decode(), salt=salt.decode(), created=utcnow())

    async def verify(self, credential: Credential, raw: str) -> bool:
        """
        Check a raw password against a credential (constant-time in bcrypt).

        Raises:
            ValueError: Propagated from bcrypt when the stored hash is malformed
        """
        matched = await asyncio.to_thread(bcrypt.checkpw, raw.encode(), credential.hash.encode())
        logger.debug("Password verification %s", "succeeded" if matched else "failed")
        return matched
