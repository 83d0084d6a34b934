"""
WLCG Bearer Token Discovery.

Locates a bearer token on the local machine. Precedence (first match wins):
1. BEARER_TOKEN environment variable holds the token itself
2. BEARER_TOKEN_FILE environment variable names a file holding the token
3. $XDG_RUNTIME_DIR/bt_u<uid>
4. /tmp/bt_u<uid>

A file named by step 2 or 3 that does not exist ends the search with
NoTokenFoundError. An empty file moves on to the next step.
"""
import logging
import os
from typing import Mapping, Optional, Tuple

from .config import DiscoveryConfig
from .errors import NoTokenFoundError, TokenFileReadError, UserIdentityError
from .identity import UidProvider, current_uid
from .reader import read_token_file
from .types import (
    DiscoveryResult,
    FileOutcomeKind,
    TokenFileOutcome,
    TokenSource,
    _mask_sensitive,
)

logger = logging.getLogger(__name__)


class TokenDiscovery:
    """
    Runs the discovery chain against injected collaborators.

    Instances hold no state between calls; repeated calls against an
    unchanged environment and filesystem return the same result.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        uid_provider: Optional[UidProvider] = None,
        config: Optional[DiscoveryConfig] = None,
    ) -> None:
        """
        Args:
            environ: Environment lookup, defaults to os.environ
            uid_provider: Callable returning the current user id, defaults to current_uid
            config: Variable names and fallback directory, defaults to the protocol values
        """
        self._environ = environ if environ is not None else os.environ
        self._uid_provider = uid_provider or current_uid
        self._config = config or DiscoveryConfig()

    @property
    def config(self) -> DiscoveryConfig:
        return self._config

    def _getenv(self, name: str) -> str:
        # Unset and empty are equivalent
        return self._environ.get(name) or ""

    def _get_uid(self) -> str:
        try:
            uid = self._uid_provider()
        except UserIdentityError:
            raise
        except Exception as e:
            logger.error(
                f"TokenDiscovery._get_uid: uid provider failed: {type(e).__name__}: {e}"
            )
            raise UserIdentityError() from e

        if uid is None or str(uid) == "":
            logger.error("TokenDiscovery._get_uid: uid provider returned no id")
            raise UserIdentityError()
        return str(uid)

    def _from_inline_env(self) -> Optional[DiscoveryResult]:
        name = self._config.bearer_token_env
        # Same byte-level trimming as token files
        value = os.fsencode(self._getenv(name)).strip()
        if not value:
            logger.debug(f"TokenDiscovery._from_inline_env: '{name}' is not set or empty")
            return None

        logger.debug(
            f"TokenDiscovery._from_inline_env: Using token from '{name}' "
            f"(masked={_mask_sensitive(value)})"
        )
        return DiscoveryResult(token=value, path="", source=TokenSource.INLINE_ENV)

    def _from_file(
        self, path: str, source: TokenSource, final: bool = False
    ) -> Optional[DiscoveryResult]:
        """
        Apply the file outcome rules for one step.

        Returns None when the step falls through to the next one.
        """
        outcome: TokenFileOutcome = read_token_file(path)

        if outcome.kind is FileOutcomeKind.SUCCESS:
            logger.debug(
                f"TokenDiscovery._from_file: [{source.value}] Found token in '{path}' "
                f"(masked={_mask_sensitive(outcome.token)})"
            )
            return DiscoveryResult(token=outcome.token, path=path, source=source)

        if outcome.kind is FileOutcomeKind.FAILURE:
            logger.error(
                f"TokenDiscovery._from_file: [{source.value}] Cannot read '{path}': {outcome.error}"
            )
            raise TokenFileReadError(path, outcome.error) from outcome.error

        if outcome.kind is FileOutcomeKind.MISSING or final:
            logger.warning(
                f"TokenDiscovery._from_file: [{source.value}] No token at '{path}' "
                f"({outcome.kind.value}), stopping search"
            )
            raise NoTokenFoundError(path=path, source=source)

        logger.debug(
            f"TokenDiscovery._from_file: [{source.value}] '{path}' is empty, "
            "moving to next step"
        )
        return None

    def discover(self) -> DiscoveryResult:
        """
        Run the discovery chain.

        Returns:
            DiscoveryResult with the token, its file path and its source step

        Raises:
            NoTokenFoundError: No usable token was found
            TokenFileReadError: A candidate file exists but could not be read
            UserIdentityError: The current user id could not be determined
        """
        cfg = self._config

        # 1. Inline token
        result = self._from_inline_env()
        if result is not None:
            return result

        # 2. File named by BEARER_TOKEN_FILE
        token_file = self._getenv(cfg.bearer_token_file_env)
        if token_file:
            logger.debug(f"TokenDiscovery.discover: '{cfg.bearer_token_file_env}'='{token_file}'")
            result = self._from_file(token_file, TokenSource.TOKEN_FILE_ENV)
            if result is not None:
                return result
        else:
            logger.debug(f"TokenDiscovery.discover: '{cfg.bearer_token_file_env}' is not set")

        # Steps 3 and 4 both need the user id
        uid = self._get_uid()
        file_name = cfg.token_file_name(uid)

        # 3. Runtime directory
        runtime_dir = self._getenv(cfg.runtime_dir_env)
        if runtime_dir:
            logger.debug(f"TokenDiscovery.discover: '{cfg.runtime_dir_env}'='{runtime_dir}'")
            result = self._from_file(os.path.join(runtime_dir, file_name), TokenSource.RUNTIME_DIR)
            if result is not None:
                return result
        else:
            logger.debug(f"TokenDiscovery.discover: '{cfg.runtime_dir_env}' is not set")

        # 4. Fixed fallback directory, last step
        return self._from_file(
            os.path.join(cfg.fallback_dir, file_name), TokenSource.FALLBACK_DIR, final=True
        )

    def find_token_and_file(self) -> Tuple[bytes, str]:
        """Return the token bytes and the file path (empty for the inline variable)."""
        result = self.discover()
        return result.token, result.path

    def find_token(self) -> bytes:
        """Return the token bytes."""
        return self.discover().token


def discover(
    environ: Optional[Mapping[str, str]] = None,
    uid_provider: Optional[UidProvider] = None,
    config: Optional[DiscoveryConfig] = None,
) -> DiscoveryResult:
    """Run the discovery chain and return the full DiscoveryResult."""
    return TokenDiscovery(environ, uid_provider, config).discover()


def find_token_and_file(
    environ: Optional[Mapping[str, str]] = None,
    uid_provider: Optional[UidProvider] = None,
    config: Optional[DiscoveryConfig] = None,
) -> Tuple[bytes, str]:
    """
    Locate a bearer token following the WLCG Bearer Token Discovery procedure.

    Returns:
        Tuple of token bytes and the path of the file holding the token,
        or an empty string when the token came from BEARER_TOKEN

    Raises:
        NoTokenFoundError, TokenFileReadError, UserIdentityError
    """
    return TokenDiscovery(environ, uid_provider, config).find_token_and_file()


def find_token(
    environ: Optional[Mapping[str, str]] = None,
    uid_provider: Optional[UidProvider] = None,
    config: Optional[DiscoveryConfig] = None,
) -> bytes:
    """Locate a bearer token and return only its bytes."""
    return TokenDiscovery(environ, uid_provider, config).find_token()
