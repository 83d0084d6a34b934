"""
Names and locations used by the WLCG Bearer Token Discovery procedure.
"""
from pydantic import BaseModel

BEARER_TOKEN_ENV = "BEARER_TOKEN"
BEARER_TOKEN_FILE_ENV = "BEARER_TOKEN_FILE"
XDG_RUNTIME_DIR_ENV = "XDG_RUNTIME_DIR"
TOKEN_FILE_PREFIX = "bt_u"
FALLBACK_TOKEN_DIR = "/tmp"
NO_TOKEN_FOUND_MESSAGE = "no token found using WLCG Bearer Token Discovery procedure"


class DiscoveryConfig(BaseModel):
    """
    Discovery settings. The defaults are the protocol values.

    The environment never changes these; the model lets embedders and tests
    hand the resolver a different fallback directory explicitly.
    """
    bearer_token_env: str = BEARER_TOKEN_ENV
    bearer_token_file_env: str = BEARER_TOKEN_FILE_ENV
    runtime_dir_env: str = XDG_RUNTIME_DIR_ENV
    token_file_prefix: str = TOKEN_FILE_PREFIX
    fallback_dir: str = FALLBACK_TOKEN_DIR

    def token_file_name(self, uid: object) -> str:
        """Return the per-user token file name, e.g. bt_u1000."""
        return f"{self.token_file_prefix}{uid}"
