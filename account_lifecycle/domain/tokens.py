"""
Expireable tokens - Single-use, time-bound secrets for activation and reset.

An ExpireableToken binds a random string to an email address and a creation
time. Whether it has expired is not a property of the token itself: it is
answered by a TokenPolicy, which holds the expiration length (in hours) and
the generator that produces token strings.

Validation compares token strings only. It never consults expiry; callers
that care about expiry check TokenPolicy.has_expired() separately.
"""

import logging
import math
import numbers
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_BYTES = 64
DEFAULT_EXPIRATION_HOURS = 1.0


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def hex_token_generator(nbytes: int = DEFAULT_TOKEN_BYTES) -> Callable[[], str]:
    """
    Build a generator producing hex strings of `nbytes` random bytes.

    Uses the secrets module for cryptographic randomness. 64 bytes gives
    512 bits of entropy; anything below 16 bytes (128 bits) is refused.
    """
    if nbytes < 16:
        raise ConfigurationError(f"Token generator needs at least 16 bytes, got {nbytes}")

    def generate() -> str:
        return secrets.token_hex(nbytes)

    return generate


@dataclass(frozen=True)
class ExpireableToken:
    """A random token bound to the email address it was dispatched to."""

    email: str
    token: str
    created: datetime = field(default_factory=utcnow)

    def validate(self, other: "str | ExpireableToken") -> bool:
        """Check another token, or a raw token string, against this one."""
        candidate = other.token if isinstance(other, ExpireableToken) else other
        return validate_token(self, candidate)

    def expiration(self, policy: "TokenPolicy") -> datetime | None:
        """Expiry date of this token under `policy`."""
        return policy.expiry_date(self)

    def has_expired(self, policy: "TokenPolicy") -> bool:
        """Whether this token has expired under `policy`."""
        return policy.has_expired(self)


def validate_token(
    reference: ExpireableToken | None, candidate: object, email: str | None = None
) -> bool:
    """
    Compare a candidate token string against a reference token.

    Returns False (never raises) when there is no reference or the candidate
    is not a string. The comparison is constant-time.

    `email` is informational only: neither it nor the reference token's
    email takes part in the comparison.
    """
    if reference is None or not isinstance(candidate, str):
        return False
    return secrets.compare_digest(reference.token.encode(), candidate.encode())


class TokenPolicy:
    """
    Generator and expiration length for expireable tokens.

    Both knobs validate on write: a generator is invoked once and must
    return a string; an expiration length must be a number or None, and
    anything <= 0 is stored as None (tokens never expire).
    """

    def __init__(
        self,
        generator: Callable[[], str] | None = None,
        expiration_hours: float | None = DEFAULT_EXPIRATION_HOURS,
    ) -> None:
        self._generator: Callable[[], str] = hex_token_generator()
        self._expiration_hours: float | None = DEFAULT_EXPIRATION_HOURS
        if generator is not None:
            self.generator = generator
        self.expiration_hours = expiration_hours

    @property
    def generator(self) -> Callable[[], str]:
        return self._generator

    @generator.setter
    def generator(self, fn: Callable[[], str]) -> None:
        if not callable(fn):
            raise ConfigurationError("Token generator must be callable")
        if not isinstance(fn(), str):
            raise ConfigurationError("String generator does not return a string")
        self._generator = fn
        logger.info("Token generator replaced: %r", fn)

    @property
    def expiration_hours(self) -> float | None:
        return self._expiration_hours

    @expiration_hours.setter
    def expiration_hours(self, hours: float | None) -> None:
        if hours is not None and (
            isinstance(hours, bool)
            or not isinstance(hours, numbers.Real)
            or not math.isfinite(hours)
        ):
            raise ConfigurationError(
                "Expiration length is not a valid value. Supports None, values <= 0 "
                "(never expire), and finite numbers greater than 0"
            )
        self._expiration_hours = None if hours is None or hours <= 0 else float(hours)
        logger.info("Token expiration length set to %s hours", self._expiration_hours)

    def issue(self, email: str) -> ExpireableToken:
        """Generate a new token bound to `email`, created now."""
        return ExpireableToken(email=email, token=self._generator())

    def expiry_date(self, token: ExpireableToken) -> datetime | None:
        """
        Calculate when `token` expires.

        Returns:
            created + expiration length, or None if tokens never expire
            or the expiry lies beyond the representable date range
        """
        if self._expiration_hours is None:
            return None
        try:
            return token.created + timedelta(hours=self._expiration_hours)
        except OverflowError:
            return None

    def has_expired(self, token: ExpireableToken, now: datetime | None = None) -> bool:
        """
        Determine whether `token` has expired.

        Args:
            token: Token to check
            now: Reference time (defaults to the current UTC time)

        Returns:
            False if tokens never expire, else True iff now >= expiry date
        """
        expiry = self.expiry_date(token)
        if expiry is None:
            return False
        return (now or utcnow()) >= expiry
