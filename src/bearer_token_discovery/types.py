"""
Value types shared by the discovery steps.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)


def _mask_sensitive(value: Optional[Union[str, bytes]], visible_chars: int = 4) -> str:
    """Mask sensitive values for safe logging."""
    if value is None:
        return "<None>"
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if not isinstance(value, str):
        return "<invalid-type>"
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


# Public alias for external use
mask_sensitive = _mask_sensitive


class TokenSource(str, Enum):
    """Candidate origins, in the order they are tried."""
    INLINE_ENV = "inline_env"
    TOKEN_FILE_ENV = "token_file_env"
    RUNTIME_DIR = "runtime_dir"
    FALLBACK_DIR = "fallback_dir"


class FileOutcomeKind(str, Enum):
    MISSING = "missing"
    EMPTY = "empty"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class TokenFileOutcome:
    """
    Result of reading one candidate token file.

    Attributes:
        kind: Which of the four outcomes occurred
        path: The file that was read
        token: Trimmed token bytes, only set for SUCCESS
        error: The underlying OSError, only set for FAILURE
    """

    kind: FileOutcomeKind
    path: str
    token: Optional[bytes] = None
    error: Optional[OSError] = None

    def __post_init__(self) -> None:
        if self.kind is FileOutcomeKind.SUCCESS and not self.token:
            raise ValueError("SUCCESS outcome requires a non-empty token")
        if self.kind is FileOutcomeKind.FAILURE and self.error is None:
            raise ValueError("FAILURE outcome requires an error")


@dataclass
class DiscoveryResult:
    """
    A bearer token located by the discovery procedure.

    Attributes:
        token: Token bytes, whitespace-trimmed and never empty
        path: File the token was read from, empty for the inline variable
        source: Discovery step that produced the token
    """

    token: bytes
    path: str
    source: TokenSource

    def __post_init__(self) -> None:
        logger.debug(
            f"DiscoveryResult.__post_init__: source={self.source.value}, "
            f"path='{self.path}', length={len(self.token)}"
        )
        if not self.token:
            raise ValueError("token must not be empty")

    def to_dict(self, include_sensitive: bool = False) -> Dict[str, Any]:
        """
        Convert result to dictionary for serialization.

        Args:
            include_sensitive: If True, include the clear token value

        Returns:
            Dictionary representation of the result
        """
        result: Dict[str, Any] = {
            "source": self.source.value,
            "path": self.path,
            "length": len(self.token),
            "token_masked": _mask_sensitive(self.token),
        }
        if include_sensitive:
            result["token"] = self.token.decode("utf-8", errors="replace")
        return result
