import pytest

from bearer_token_discovery.config import NO_TOKEN_FOUND_MESSAGE
from bearer_token_discovery.errors import (
    BearerTokenDiscoveryError,
    NoTokenFoundError,
    TokenFileReadError,
    UserIdentityError,
)
from bearer_token_discovery.types import DiscoveryResult, TokenSource, mask_sensitive


class TestMaskSensitive:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, "<None>"),
            ("abc", "***"),
            ("abcdefgh", "abcd****"),
            (b"abcdefgh", "abcd****"),
            (123, "<invalid-type>"),
        ],
    )
    def test_mask(self, value, expected):
        assert mask_sensitive(value) == expected


class TestDiscoveryResult:
    def test_to_dict_masks_token(self):
        result = DiscoveryResult(token=b"secret-token", path="/tmp/bt_u1", source=TokenSource.FALLBACK_DIR)

        data = result.to_dict()

        assert data == {
            "source": "fallback_dir",
            "path": "/tmp/bt_u1",
            "length": 12,
            "token_masked": "secr********",
        }

    def test_to_dict_include_sensitive(self):
        result = DiscoveryResult(token=b"42", path="", source=TokenSource.INLINE_ENV)

        assert result.to_dict(include_sensitive=True)["token"] == "42"

    def test_empty_token_rejected(self):
        with pytest.raises(ValueError):
            DiscoveryResult(token=b"", path="", source=TokenSource.INLINE_ENV)


class TestErrors:
    @pytest.mark.parametrize("cls", [NoTokenFoundError, TokenFileReadError, UserIdentityError])
    def test_hierarchy(self, cls):
        assert issubclass(cls, BearerTokenDiscoveryError)

    def test_not_found_default_message(self):
        err = NoTokenFoundError()

        assert str(err) == NO_TOKEN_FOUND_MESSAGE
        assert err.path is None
        assert err.source is None

    def test_read_error_message(self):
        cause = PermissionError(13, "Permission denied")

        err = TokenFileReadError("/run/user/1/bt_u1", cause)

        assert str(err) == f"cannot read token file located at /run/user/1/bt_u1: {cause}"
        assert err.cause is cause
