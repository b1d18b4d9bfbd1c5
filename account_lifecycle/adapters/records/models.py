"""
Account record models - Persistence boundary translation.

Pydantic models for the plain account-shaped values a persistence layer
loads and saves (JSON documents, rows, cache entries). Both the camelCase
names of stored records (primaryEmail) and snake_case names are accepted.
Fields the models do not know are ignored.
"""

from collections.abc import Mapping
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from account_lifecycle.domain.account import Account, SecondaryEmail
from account_lifecycle.domain.ports import AccountStatus, Credential
from account_lifecycle.domain.tokens import ExpireableToken


def _assume_utc(value: datetime) -> datetime:
    """Treat timestamps stored without an offset as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class _Record(BaseModel):
    """Shared config for record models."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CredentialRecord(_Record):
    """Stored hashed password."""

    hash: str
    salt: str
    created: datetime

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: datetime) -> datetime:
        return _assume_utc(value)

    def to_domain(self) -> Credential:
        return Credential(hash=self.hash, salt=self.salt, created=self.created)


class TokenRecord(_Record):
    """Stored activation or reset token."""

    email: str
    token: str
    created: datetime

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: datetime) -> datetime:
        return _assume_utc(value)

    def to_domain(self) -> ExpireableToken:
        return ExpireableToken(email=self.email, token=self.token, created=self.created)


class SecondaryEmailRecord(_Record):
    """Stored secondary email."""

    email: str
    label: str | None = None
    added: datetime

    @field_validator("added")
    @classmethod
    def added_as_utc(cls, value: datetime) -> datetime:
        return _assume_utc(value)

    def to_domain(self) -> SecondaryEmail:
        return SecondaryEmail(email=self.email, label=self.label, added=self.added)


class AccountRecord(_Record):
    """Stored account."""

    primary_email: str = Field(
        serialization_alias="primaryEmail",
        validation_alias=AliasChoices("primaryEmail", "primary_email"),
    )
    username: str | None = None
    password: CredentialRecord | None = None
    emails: list[SecondaryEmailRecord] = Field(default_factory=list)
    status: AccountStatus
    activation: TokenRecord | None = None
    reset: TokenRecord | None = None

    def to_domain(self) -> Account:
        """Build the domain Account this record describes."""
        return Account(
            primary_email=self.primary_email,
            status=self.status,
            username=self.username,
            password=self.password.to_domain() if self.password else None,
            emails=tuple(e.to_domain() for e in self.emails),
            activation=self.activation.to_domain() if self.activation else None,
            reset=self.reset.to_domain() if self.reset else None,
        )

    @classmethod
    def from_domain(cls, account: Account) -> "AccountRecord":
        """Build a record from a domain Account."""
        return cls.model_validate(
            {
                "primary_email": account.primary_email,
                "username": account.username,
                "password": asdict(account.password) if account.password else None,
                "emails": [asdict(e) for e in account.emails],
                "status": account.status,
                "activation": asdict(account.activation) if account.activation else None,
                "reset": asdict(account.reset) if account.reset else None,
            }
        )


def load_account(data: Mapping[str, Any]) -> Account:
    """
    Parse a stored account mapping into a domain Account.

    Raises:
        pydantic.ValidationError: If required fields are missing or invalid
    """
    return AccountRecord.model_validate(data).to_domain()


def dump_account(account: Account, *, by_alias: bool = True) -> dict[str, Any]:
    """
    Serialize a domain Account to a JSON-safe mapping.

    Datetimes become ISO 8601 strings and unset optional fields are omitted.
    """
    return AccountRecord.from_domain(account).model_dump(mode="json", by_alias=by_alias, exclude_none=True)
