"""
account_lifecycle - User-account lifecycle state for authentication.

Credential storage, expireable activation/reset tokens, and account status
transitions. Callers load and save accounts themselves; this package owns
only the state model.
"""

from .domain import (
    Account,
    AccountOperations,
    AccountStatus,
    ExpireableToken,
    SecondaryEmail,
    TokenPolicy,
    UserAccount,
)

__all__ = [
    "Account",
    "AccountOperations",
    "AccountStatus",
    "ExpireableToken",
    "SecondaryEmail",
    "TokenPolicy",
    "UserAccount",
]
