"""
Domain exceptions - Semantic error types for account transitions.

Precondition failures (no pending token) and mismatch failures (wrong
token) are separate branches so callers can tell "resend" from "retry".
"""


class AccountError(Exception):
    """Base class for account domain errors."""

    pass


class ConfigurationError(AccountError, ValueError):
    """Invalid value written to a configuration knob."""

    pass


class InvalidStatus(AccountError, ValueError):
    """Status is not one of active, locked, activation."""

    pass


class EmailIndexOutOfBounds(AccountError, IndexError):
    """Index does not address an entry of the account's emails."""

    pass


class TokenNotFound(AccountError):
    """Operation requires a pending token the account does not have."""

    pass


class ActivationNotFound(TokenNotFound):
    """Activation does not exist on the account."""

    pass


class ResetNotFound(TokenNotFound):
    """Reset does not exist on the account."""

    pass


class TokenMismatch(AccountError):
    """Supplied token does not match the pending token."""

    pass


class ActivationTokenMismatch(TokenMismatch):
    """Tokens for activation do not match."""

    pass


class ResetTokenMismatch(TokenMismatch):
    """Token does not align with the reset token."""

    pass


class LoginRefused(AccountError):
    """Account is not in a state that permits login."""

    pass


class InactiveAccount(LoginRefused):
    """Account with non-active status attempting login."""

    pass


class PasswordUndefined(LoginRefused):
    """Account has no credential to verify against."""

    pass
