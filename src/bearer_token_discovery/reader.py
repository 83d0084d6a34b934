import logging

from .types import FileOutcomeKind, TokenFileOutcome

logger = logging.getLogger(__name__)


def read_token_file(path: str) -> TokenFileOutcome:
    """
    Read a candidate token file and classify the result.

    Leading and trailing whitespace is trimmed before emptiness is judged.
    I/O problems are reported in the outcome, never raised.

    Args:
        path: Token file location

    Returns:
        TokenFileOutcome tagged MISSING, EMPTY, SUCCESS or FAILURE
    """
    logger.debug(f"read_token_file: Reading '{path}'")

    try:
        with open(path, "rb") as f:
            raw = f.read()
    except FileNotFoundError:
        logger.debug(f"read_token_file: '{path}' does not exist")
        return TokenFileOutcome(kind=FileOutcomeKind.MISSING, path=path)
    except OSError as e:
        logger.debug(f"read_token_file: '{path}' could not be read: {type(e).__name__}: {e}")
        return TokenFileOutcome(kind=FileOutcomeKind.FAILURE, path=path, error=e)

    token = raw.strip()
    if not token:
        logger.debug(f"read_token_file: '{path}' has no data")
        return TokenFileOutcome(kind=FileOutcomeKind.EMPTY, path=path)

    logger.debug(f"read_token_file: '{path}' holds a token (length={len(token)})")
    return TokenFileOutcome(kind=FileOutcomeKind.SUCCESS, path=path, token=token)
