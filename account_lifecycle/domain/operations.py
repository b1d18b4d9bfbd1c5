"""
Account operations - Transition logic for the account lifecycle.

Every transition is implemented once, as a pure method on AccountOperations
that takes an Account and returns a new Account (or raises before building
anything). UserAccount is the mutating form: it owns an Account and replaces
it with the pure result, so both forms share validation and outcome.

Activation flow:
    create_activation -> (token dispatched to primary email) -> activate(token)

Reset flow:
    create_reset -> (token dispatched to primary email) -> apply_reset(token)
    -> set_password(new password)

Status transitions are unrestricted between active, locked and activation.
Only login depends on status: it requires ACTIVE.
"""

from dataclasses import replace

from .account import Account, SecondaryEmail, parse_status
from .exceptions import (
    ActivationNotFound,
    ActivationTokenMismatch,
    EmailIndexOutOfBounds,
    InactiveAccount,
    PasswordUndefined,
    ResetNotFound,
    ResetTokenMismatch,
)
from .ports import AccountStatus, Credential, PasswordHasher
from .tokens import ExpireableToken, TokenPolicy, validate_token


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class AccountOperations:
    """
    Pure account transitions.

    Holds the collaborators the transitions need: the password hasher, the
    token policy used to issue activation and reset tokens, and the status
    given to newly created accounts.
    """

    def __init__(
        self,
        hasher: PasswordHasher,
        tokens: TokenPolicy | None = None,
        default_status: AccountStatus | str = AccountStatus.ACTIVATION,
    ) -> None:
        self.hasher = hasher
        self.tokens = tokens or TokenPolicy()
        self.default_status = default_status

    @property
    def default_status(self) -> AccountStatus:
        return self._default_status

    @default_status.setter
    def default_status(self, status: AccountStatus | str) -> None:
        self._default_status = parse_status(status)

    def create_activation(self, account: Account) -> Account:
        """Start activation: attach a new token bound to the primary email."""
        return replace(account, activation=self.tokens.issue(account.primary_email))

    def activate(self, account: Account, token: str) -> Account:
        """
        Complete activation by presenting the activation token.

        Raises:
            ActivationNotFound: If the account has no pending activation
            ActivationTokenMismatch: If `token` does not match
        """
        if account.activation is None:
            raise ActivationNotFound("Unable to activate account. Activation does not exist on account.")
        if not validate_token(account.activation, token):
            raise ActivationTokenMismatch("Unable to activate. Tokens for activation do not match.")
        return replace(account, activation=None)

    def add_email(self, account: Account, email: str, label: str | None = None) -> Account:
        """
        Append a secondary email.

        Raises:
            TypeError: If `email` is not a string
        """
        if not isinstance(email, str):
            raise TypeError(f"Email needs to be of type string, got {type(email).__name__}")
        return replace(account, emails=(*account.emails, SecondaryEmail(email, label)))

    def remove_email(self, account: Account, email: str | int) -> Account:
        """
        Remove a secondary email by exact address or by index.

        Nothing is removed when the address is unknown or the index does not
        address an entry; the result is then an unchanged copy.
        """
        index = account.email_index(email) if isinstance(email, str) else email
        if not _is_index(index) or not 0 <= index < len(account.emails):
            return replace(account)
        return replace(account, emails=account.emails[:index] + account.emails[index + 1 :])

    def create_reset(self, account: Account) -> Account:
        """Start a password reset: attach a new token bound to the primary email."""
        return replace(account, reset=self.tokens.issue(account.primary_email))

    def apply_reset(self, account: Account, token: str) -> Account:
        """
        Consume the pending reset by presenting its token.

        Raises:
            ResetNotFound: If the account has no pending reset
            ResetTokenMismatch: If `token` does not match
        """
        if account.reset is None:
            raise ResetNotFound("Reset does not exist on account")
        if not validate_token(account.reset, token):
            raise ResetTokenMismatch("Token does not align with reset token")
        return replace(account, reset=None)

    def set_primary_email(self, account: Account, email: str | int) -> Account:
        """
        Set the primary email to an address, or to the secondary email at an index.

        Setting an address does not add it to the secondary emails.

        Raises:
            EmailIndexOutOfBounds: If the index does not address an entry
            TypeError: If `email` is neither a string nor an int
        """
        if _is_index(email):
            if not 0 <= email < len(account.emails):
                raise EmailIndexOutOfBounds(
                    f"Index {email} is out of bounds; no email at that index of account emails."
                )
            return replace(account, primary_email=account.emails[email].email)
        if not isinstance(email, str):
            raise TypeError(
                f"Invalid type for primary email. String or index required, got: {type(email).__name__}"
            )
        return replace(account, primary_email=email)

    async def set_password(self, account: Account, raw: str | None) -> Account:
        """Hash and set a new password, or clear it with None."""
        password = None if raw is None else await self.hasher.hash(raw)
        return replace(account, password=password)

    def force_status(self, account: Account, status: AccountStatus | str) -> Account:
        """
        Set the account status.

        Raises:
            InvalidStatus: If `status` is not a known status
        """
        return replace(account, status=parse_status(status))

    def deactivate(self, account: Account) -> Account:
        """Lock the account."""
        return self.force_status(account, AccountStatus.LOCKED)

    def reactivate(self, account: Account) -> Account:
        """Set the account active."""
        return self.force_status(account, AccountStatus.ACTIVE)

    async def create(self, email: str, password: str | None = None) -> Account:
        """
        Create an account with only a primary email and optional password.

        Status comes from default_status. An empty password is not hashed.
        """
        credential: Credential | None = await self.hasher.hash(password) if password else None
        return Account(primary_email=email, status=self._default_status, password=credential)

    async def register(self, email: str, password: str | None = None) -> Account:
        """Create an account and start its activation."""
        account = await self.create(email, password)
        account = self.create_activation(account)
        return self.force_status(account, AccountStatus.ACTIVATION)

    async def login(self, account: Account, raw: str) -> bool:
        """
        Verify a password for an active account.

        Returns:
            True if `raw` matches the stored credential

        Raises:
            InactiveAccount: If the account status is not ACTIVE
            PasswordUndefined: If the account has no credential
        """
        if account.status is not AccountStatus.ACTIVE:
            raise InactiveAccount(
                f"Account with non-active status attempting login (status: {account.status.value})"
            )
        if account.password is None:
            raise PasswordUndefined("Account password undefined; login is not possible")
        return await self.hasher.verify(account.password, raw)


class UserAccount:
    """
    Mutable owner of an Account.

    Each method runs the matching AccountOperations transition on the owned
    account and keeps the result. A failing transition raises before the
    owned account is replaced, so the instance is left as it was.
    """

    def __init__(self, account: Account, operations: AccountOperations) -> None:
        self.account = account
        self.operations = operations

    @classmethod
    async def create(
        cls, operations: AccountOperations, email: str, password: str | None = None
    ) -> "UserAccount":
        return cls(await operations.create(email, password), operations)

    @classmethod
    async def register(
        cls, operations: AccountOperations, email: str, password: str | None = None
    ) -> "UserAccount":
        return cls(await operations.register(email, password), operations)

    @property
    def primary_email(self) -> str:
        return self.account.primary_email

    @property
    def username(self) -> str | None:
        return self.account.username

    @property
    def status(self) -> AccountStatus:
        return self.account.status

    @property
    def password(self) -> Credential | None:
        return self.account.password

    @property
    def emails(self) -> tuple[SecondaryEmail, ...]:
        return self.account.emails

    @property
    def activation(self) -> ExpireableToken | None:
        return self.account.activation

    @property
    def reset(self) -> ExpireableToken | None:
        return self.account.reset

    def create_activation(self) -> ExpireableToken:
        """Start activation and return the issued token."""
        self.account = self.operations.create_activation(self.account)
        return self.account.activation

    def activate(self, token: str) -> None:
        self.account = self.operations.activate(self.account, token)

    def add_email(self, email: str, label: str | None = None) -> None:
        self.account = self.operations.add_email(self.account, email, label)

    def remove_email(self, email: str | int) -> None:
        self.account = self.operations.remove_email(self.account, email)

    def create_reset(self) -> ExpireableToken:
        """Start a password reset and return the issued token."""
        self.account = self.operations.create_reset(self.account)
        return self.account.reset

    def apply_reset(self, token: str) -> None:
        self.account = self.operations.apply_reset(self.account, token)

    def set_primary_email(self, email: str | int) -> None:
        self.account = self.operations.set_primary_email(self.account, email)

    async def set_password(self, raw: str | None) -> None:
        self.account = await self.operations.set_password(self.account, raw)

    def force_status(self, status: AccountStatus | str) -> None:
        self.account = self.operations.force_status(self.account, status)

    def deactivate(self) -> None:
        self.account = self.operations.deactivate(self.account)

    def reactivate(self) -> None:
        self.account = self.operations.reactivate(self.account)

    async def login(self, raw: str) -> bool:
        return await self.operations.login(self.account, raw)
