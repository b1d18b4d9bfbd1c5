"""
Domain layer - Pure account lifecycle logic with zero framework imports.

This package contains the account state model: the Account aggregate,
expireable activation/reset tokens, and the transitions between states.
It defines its own port for password hashing so adapters stay swappable.
"""

from .account import Account, SecondaryEmail, parse_status
from .exceptions import (
    AccountError,
    ActivationNotFound,
    ActivationTokenMismatch,
    ConfigurationError,
    EmailIndexOutOfBounds,
    InactiveAccount,
    InvalidStatus,
    LoginRefused,
    PasswordUndefined,
    ResetNotFound,
    ResetTokenMismatch,
    TokenMismatch,
    TokenNotFound,
)
from .operations import AccountOperations, UserAccount
from .ports import AccountStatus, Credential, PasswordHasher
from .tokens import ExpireableToken, TokenPolicy, hex_token_generator, validate_token

__all__ = [
    "Account",
    "AccountError",
    "AccountOperations",
    "AccountStatus",
    "ActivationNotFound",
    "ActivationTokenMismatch",
    "ConfigurationError",
    "Credential",
    "EmailIndexOutOfBounds",
    "ExpireableToken",
    "InactiveAccount",
    "InvalidStatus",
    "LoginRefused",
    "PasswordHasher",
    "PasswordUndefined",
    "ResetNotFound",
    "ResetTokenMismatch",
    "SecondaryEmail",
    "TokenMismatch",
    "TokenNotFound",
    "TokenPolicy",
    "UserAccount",
    "hex_token_generator",
    "parse_status",
    "validate_token",
]
