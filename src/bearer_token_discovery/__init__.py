"""
Locate a bearer token with the WLCG Bearer Token Discovery procedure.
"""
from .config import (
    BEARER_TOKEN_ENV,
    BEARER_TOKEN_FILE_ENV,
    FALLBACK_TOKEN_DIR,
    TOKEN_FILE_PREFIX,
    XDG_RUNTIME_DIR_ENV,
    DiscoveryConfig,
)
from .discovery import TokenDiscovery, discover, find_token, find_token_and_file
from .env_source import load_environ
from .errors import (
    BearerTokenDiscoveryError,
    NoTokenFoundError,
    TokenFileReadError,
    UserIdentityError,
)
from .identity import current_uid
from .reader import read_token_file
from .types import (
    DiscoveryResult,
    FileOutcomeKind,
    TokenFileOutcome,
    TokenSource,
    mask_sensitive,
)

__all__ = [
    "BEARER_TOKEN_ENV",
    "BEARER_TOKEN_FILE_ENV",
    "FALLBACK_TOKEN_DIR",
    "TOKEN_FILE_PREFIX",
    "XDG_RUNTIME_DIR_ENV",
    "DiscoveryConfig",
    "TokenDiscovery",
    "discover",
    "find_token",
    "find_token_and_file",
    "load_environ",
    "BearerTokenDiscoveryError",
    "NoTokenFoundError",
    "TokenFileReadError",
    "UserIdentityError",
    "current_uid",
    "read_token_file",
    "DiscoveryResult",
    "FileOutcomeKind",
    "TokenFileOutcome",
    "TokenSource",
    "mask_sensitive",
]
