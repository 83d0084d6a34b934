"""
Build the environment mapping handed to TokenDiscovery.
"""
import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from .types import _mask_sensitive

logger = logging.getLogger(__name__)


def load_environ(
    dotenv_path: Optional[Union[str, Path]] = None,
    override: bool = False,
    base: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Return a copy of the environment, optionally merged with a dotenv file.

    os.environ itself is never modified.

    Args:
        dotenv_path: Optional .env file to merge in
        override: Whether dotenv values replace existing keys (default: False)
        base: Starting mapping (default: os.environ)

    Returns:
        Dictionary of environment variables

    Raises:
        FileNotFoundError: If dotenv_path does not exist
    """
    environ: Dict[str, str] = dict(os.environ if base is None else base)

    if dotenv_path is None:
        return environ

    path = Path(dotenv_path)
    if not path.is_file():
        logger.error(f"load_environ: dotenv file does not exist: {path}")
        raise FileNotFoundError(f"dotenv file does not exist: {path}")

    logger.info(f"load_environ: Loading env file: {path}")
    loaded = 0
    for key, value in dotenv_values(path).items():
        if value is None:
            continue
        if override or key not in environ:
            logger.debug(f"load_environ:   {key}: {_mask_sensitive(value)}")
            environ[key] = value
            loaded += 1

    logger.debug(f"load_environ: {loaded} variables taken from {path}")
    return environ
