import logging
import os
from typing import Callable, Union

from .errors import UserIdentityError

logger = logging.getLogger(__name__)

# Zero-argument callable returning the numeric user id
UidProvider = Callable[[], Union[str, int]]


def current_uid() -> str:
    """
    Return the current OS user's numeric id as a decimal string.

    Raises:
        UserIdentityError: If the platform has no POSIX uid or the query fails
    """
    try:
        uid = os.getuid()
    except (AttributeError, OSError) as e:
        logger.error(f"current_uid: Failed to query user id: {type(e).__name__}: {e}")
        raise UserIdentityError() from e

    logger.debug(f"current_uid: uid={uid}")
    return str(uid)
