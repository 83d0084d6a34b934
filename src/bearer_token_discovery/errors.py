"""
Exceptions raised by the bearer token discovery procedure.

Callers usually treat NoTokenFoundError as "no credential available" and the
other subclasses as operational errors worth logging on their own.
"""
from typing import Optional, TYPE_CHECKING

from .config import NO_TOKEN_FOUND_MESSAGE

if TYPE_CHECKING:
    from .types import TokenSource


class BearerTokenDiscoveryError(Exception):
    """Base class for every error raised by bearer_token_discovery."""
    pass


class NoTokenFoundError(BearerTokenDiscoveryError):
    """
    Raised when the discovery procedure did not find a usable bearer token.

    Attributes:
        path: Token file that ended the search, if any
        source: Discovery step that ended the search, if any
    """

    def __init__(
        self,
        message: str = NO_TOKEN_FOUND_MESSAGE,
        path: Optional[str] = None,
        source: Optional["TokenSource"] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.source = source


class TokenFileReadError(BearerTokenDiscoveryError):
    """Raised when a token file exists but cannot be read."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"cannot read token file located at {path}: {cause}")
        self.path = path
        self.cause = cause


class UserIdentityError(BearerTokenDiscoveryError):
    """Raised when the current OS user id cannot be determined."""

    def __init__(self, message: str = "could not get current user from OS") -> None:
        super().__init__(message)
