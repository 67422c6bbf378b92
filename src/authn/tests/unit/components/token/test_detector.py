# ABOUTME: Unit tests for access token format detection and the token factory
# ABOUTME: Tests key-set selection, tie-breaking, malformed input handling and detect-then-parse

import json

import pytest

from authn import new_token as exported_new_token
from authn.components.token.detector import TOKEN_VARIANTS, detect_token, new_token
from authn.exceptions import (
    MalformedTokenError,
    TokenFormatException,
    TokenSemanticError,
    UnrecognizedTokenFormatError,
)
from authn.implementations.token import AuthnTokenV4, AuthnTokenV5
from authn.models.token import TokenVersion


def document(*keys: str) -> bytes:
    return json.dumps({key: "x" for key in keys}).encode("utf-8")


class TestDetectToken:
    """Test cases for detect_token."""

    @pytest.mark.unit
    def test_variant_registry_order(self):
        """v5 is checked before v4."""
        assert list(TOKEN_VARIANTS) == [TokenVersion.V5, TokenVersion.V4]
        assert TOKEN_VARIANTS[TokenVersion.V5] is AuthnTokenV5
        assert TOKEN_VARIANTS[TokenVersion.V4] is AuthnTokenV4

    @pytest.mark.unit
    def test_v5_key_set(self):
        """protected, payload and signature select v5."""
        token = detect_token(document("protected", "payload", "signature"))

        assert isinstance(token, AuthnTokenV5)
        assert token.is_parsed is False

    @pytest.mark.unit
    def test_v4_key_set(self):
        """data, timestamp, signature and key select v4."""
        token = detect_token(document("data", "timestamp", "signature", "key"))

        assert isinstance(token, AuthnTokenV4)
        assert token.is_parsed is False

    @pytest.mark.unit
    def test_both_key_sets_resolve_to_v5(self):
        """A document satisfying both key sets is v5."""
        token = detect_token(document("protected", "payload", "signature", "data", "timestamp", "key"))

        assert isinstance(token, AuthnTokenV5)

    @pytest.mark.unit
    def test_extra_keys_do_not_matter(self):
        """Detection checks membership only."""
        token = detect_token(document("protected", "payload", "signature", "kid"))

        assert isinstance(token, AuthnTokenV5)

    @pytest.mark.unit
    def test_values_are_not_interpreted(self):
        """Detection succeeds even when the values would not parse."""
        token = detect_token(b'{"protected": "", "payload": "not base64", "signature": ""}')

        assert isinstance(token, AuthnTokenV5)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "keys",
        [
            (),
            ("protected", "payload"),
            ("payload", "signature"),
            ("data", "timestamp", "signature"),
            ("data", "timestamp", "key"),
            ("token",),
        ],
    )
    def test_unrecognized_key_sets(self, keys):
        """Incomplete key sets are not recognized."""
        with pytest.raises(UnrecognizedTokenFormatError, match="Unrecognized token format") as exc_info:
            detect_token(document(*keys))

        assert exc_info.value.code == "UNRECOGNIZED_FORMAT"
        assert exc_info.value.details == {"keys": sorted(keys)}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "data",
        [
            b'{"protected": "p", "payload": "x", "signature": "s"',
            b"",
            b"null",
            b'["protected", "payload", "signature"]',
            b'{"protected": "p", "payload": {"iat": 1}, "signature": "s"}',
            b"\xff\xfe",
        ],
    )
    def test_malformed_input(self, data):
        """Anything that is not a JSON object of strings is malformed."""
        with pytest.raises(MalformedTokenError, match="^Unable to unmarshal token : ") as exc_info:
            detect_token(data)

        assert exc_info.value.code == "MALFORMED_TOKEN"
        assert exc_info.value.details == {"size": len(data)}
        assert exc_info.value.__cause__ is not None

    @pytest.mark.unit
    def test_each_detection_returns_a_new_token(self):
        """Tokens are never shared between detections."""
        data = document("protected", "payload", "signature")

        assert detect_token(data) is not detect_token(data)


class TestNewToken:
    """Test cases for the new_token factory."""

    @pytest.mark.unit
    def test_exported_from_package(self):
        """new_token is the package-level entry point."""
        assert exported_new_token is new_token

    @pytest.mark.unit
    def test_returns_parsed_v5(self, make_v5_token):
        """A v5 document is detected and parsed."""
        data = make_v5_token({"sub": "admin", "iat": 1000, "exp": 2000})

        token = new_token(data)

        assert isinstance(token, AuthnTokenV5)
        assert token.is_parsed is True
        assert token.raw() is data
        assert token.version is TokenVersion.V5

    @pytest.mark.unit
    def test_returns_parsed_v4(self, make_v4_token):
        """A v4 document is detected and parsed."""
        data = make_v4_token("2020-01-01 00:00:00 UTC")

        token = new_token(data)

        assert isinstance(token, AuthnTokenV4)
        assert token.raw() == data

    @pytest.mark.unit
    def test_truncated_bytes(self, make_v5_token):
        """Truncated input fails cleanly with a malformed-input error."""
        data = make_v5_token({"iat": 1000})

        with pytest.raises(MalformedTokenError):
            new_token(data[: len(data) // 2])

    @pytest.mark.unit
    def test_parse_errors_propagate(self, make_v5_token):
        """Errors from the selected variant reach the caller unchanged."""
        with pytest.raises(TokenSemanticError):
            new_token(make_v5_token({"iat": 2000, "exp": 1000}))

    @pytest.mark.unit
    def test_all_failures_share_one_base(self, make_v4_token):
        """Callers can treat every detection or parse failure alike."""
        for data in (b"{", document("token"), make_v4_token("soon")):
            with pytest.raises(TokenFormatException):
                new_token(data)
