"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Password hashers (mocked, and real bcrypt at minimum cost)
- Account operations wired with a fresh token policy
- Sample accounts and secondary emails
"""

from collections.abc import Generator
from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from account_lifecycle.adapters.hashing import BcryptPasswordHasher
from account_lifecycle.dependencies import reset_dependencies
from account_lifecycle.domain import (
    Account,
    AccountOperations,
    AccountStatus,
    Credential,
    SecondaryEmail,
    TokenPolicy,
)

CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def credential() -> Credential:
    """Opaque credential as a hasher would return it."""
    return Credential(hash="$2b$04$hashhashhash", salt="$2b$04$saltsalt", created=CREATED)


@pytest.fixture
def mock_hasher(credential: Credential) -> Mock:
    """PasswordHasher double: hash() returns `credential`, verify() returns True."""
    hasher = Mock()
    hasher.hash = AsyncMock(return_value=credential)
    hasher.verify = AsyncMock(return_value=True)
    return hasher


@pytest.fixture
def bcrypt_hasher() -> BcryptPasswordHasher:
    """Real bcrypt hasher at the minimum cost factor."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_policy() -> TokenPolicy:
    """Token policy with library defaults."""
    return TokenPolicy()


@pytest.fixture
def operations(mock_hasher: Mock, token_policy: TokenPolicy) -> AccountOperations:
    """AccountOperations backed by the mock hasher."""
    return AccountOperations(hasher=mock_hasher, tokens=token_policy)


@pytest.fixture
def account(credential: Credential) -> Account:
    """Active account with a password and no secondary emails."""
    return Account(primary_email="me@example.com", status=AccountStatus.ACTIVE, password=credential)


@pytest.fixture
def account_with_emails(account: Account) -> Account:
    """Active account with three secondary emails."""
    return Account(
        primary_email=account.primary_email,
        status=account.status,
        password=account.password,
        emails=(
            SecondaryEmail("one@example.com"),
            SecondaryEmail("two@example.com", "work"),
            SecondaryEmail("three@example.com"),
        ),
    )


@pytest.fixture
def clean_dependencies() -> Generator[None, None, None]:
    """Rebuild settings and process-wide singletons around a test."""
    reset_dependencies()
    yield
    reset_dependencies()
