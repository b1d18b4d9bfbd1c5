"""
Account aggregate - Identity, credential, emails, status and pending tokens.

Accounts are frozen values. Transitions never modify an account; they build
a new one with dataclasses.replace(). Ownership rule per field:

- primary_email, username, status: immutable scalars, always shared
- password: Credential is frozen; shared unless the transition swaps it
- emails: tuple of frozen SecondaryEmail; a transition that adds or removes
  an entry builds a new tuple, every other transition shares the old one
- activation, reset: frozen ExpireableToken; shared unless the transition
  issues or consumes one

Because every nested value is immutable, sharing an untouched field can
never leak a later change back into the input.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .exceptions import InvalidStatus
from .ports import AccountStatus, Credential
from .tokens import ExpireableToken, utcnow


@dataclass(frozen=True)
class SecondaryEmail:
    """A labeled email address attached to an account."""

    email: str
    label: str | None = None
    added: datetime = field(default_factory=utcnow)


def parse_status(status: object) -> AccountStatus:
    """
    Coerce a string or AccountStatus into AccountStatus.

    Raises:
        InvalidStatus: If `status` is not one of the known values
    """
    try:
        return AccountStatus(status)
    except ValueError:
        valid = ", ".join(s.value for s in AccountStatus)
        raise InvalidStatus(f"Invalid status key {status!r}. Valid keys are {valid}") from None


@dataclass(frozen=True)
class Account:
    """
    User account aggregate.

    An account without a password cannot log in. A pending activation token
    means activation has not completed; a pending reset token means a
    password reset is in progress.
    """

    primary_email: str
    status: AccountStatus = AccountStatus.ACTIVATION
    username: str | None = None
    password: Credential | None = None
    emails: tuple[SecondaryEmail, ...] = ()
    activation: ExpireableToken | None = None
    reset: ExpireableToken | None = None

    def __post_init__(self) -> None:
        # Normalize on every construction, including dataclasses.replace()
        object.__setattr__(self, "status", parse_status(self.status))
        if not isinstance(self.emails, tuple):
            object.__setattr__(self, "emails", tuple(self.emails))

    def email_index(self, email: str) -> int:
        """Index of the first secondary email matching `email`, or -1."""
        return next((i for i, e in enumerate(self.emails) if e.email == email), -1)

