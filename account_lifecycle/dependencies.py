"""
Default wiring - Process-wide instances built from settings.

Hosts that do not want to build their own AccountOperations use these
cached singletons. The token policy and operations returned here are the
live process-wide configuration: writing to their validated properties
changes behaviour for every caller that uses the defaults.
"""

import logging
from functools import lru_cache

from account_lifecycle.adapters.hashing import BcryptPasswordHasher
from account_lifecycle.config.settings import get_settings
from account_lifecycle.domain.operations import AccountOperations
from account_lifecycle.domain.tokens import TokenPolicy, hex_token_generator

logger = logging.getLogger(__name__)


@lru_cache
def get_token_policy() -> TokenPolicy:
    """Get the process-wide token policy (singleton)."""
    settings = get_settings()
    logger.info(
        "Building token policy: %d-byte tokens, expiration %s hours",
        settings.token_bytes,
        settings.token_expiration_hours,
    )
    return TokenPolicy(
        generator=hex_token_generator(settings.token_bytes),
        expiration_hours=settings.token_expiration_hours,
    )


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    """Get the process-wide bcrypt hasher (singleton)."""
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)


@lru_cache
def get_account_operations() -> AccountOperations:
    """
    Get the process-wide account operations (singleton).

    Wires together the password hasher and token policy, with the default
    status taken from settings.
    """
    settings = get_settings()
    logger.info("Building account operations: default status %s", settings.default_status.value)
    return AccountOperations(
        hasher=get_password_hasher(),
        tokens=get_token_policy(),
        default_status=settings.default_status,
    )


def reset_dependencies() -> None:
    """Drop cached settings and singletons so they are rebuilt on next use."""
    get_account_operations.cache_clear()
    get_password_hasher.cache_clear()
    get_token_policy.cache_clear()
    get_settings.cache_clear()
