# ABOUTME: Access token format detection and the token factory entry point
# ABOUTME: Selects the token implementation from the top-level JSON key set, then parses

from loguru import logger
from pydantic import ValidationError

from authn.exceptions.base import MalformedTokenError, UnrecognizedTokenFormatError
from authn.implementations.token.base import BaseAuthnToken, describe_validation_error
from authn.implementations.token.v4 import AuthnTokenV4
from authn.implementations.token.v5 import AuthnTokenV5
from authn.interfaces.token import AbstractAuthnToken
from authn.models.token.enum import TokenVersion
from authn.models.token.wire import FIELD_MAP_ADAPTER

_logger = logger.bind(name=__name__)

# Detection order; the first variant whose required keys are all present wins.
TOKEN_VARIANTS: dict[TokenVersion, type[BaseAuthnToken]] = {
    TokenVersion.V5: AuthnTokenV5,
    TokenVersion.V4: AuthnTokenV4,
}


def detect_token(data: bytes) -> AbstractAuthnToken:
    """
    Select the token implementation matching the wire format of `data`.

    Only the set of top-level keys is inspected; field values are left for the
    selected implementation's `parse`. Extra keys do not affect detection.

    Args:
        data: Raw token bytes, expected to be a JSON object of string values.

    Returns:
        A new, unparsed token of the detected format.

    Raises:
        MalformedTokenError: If `data` is not a JSON object of string values.
        UnrecognizedTokenFormatError: If the key set matches no known format.
    """
    try:
        fields = FIELD_MAP_ADAPTER.validate_json(data)
    except ValidationError as e:
        raise MalformedTokenError(
            f"Unable to unmarshal token : {describe_validation_error(e)}",
            code="MALFORMED_TOKEN",
            details={"size": len(data)},
        ) from e

    keys = set(fields)
    for version, token_class in TOKEN_VARIANTS.items():
        if token_class.REQUIRED_FIELDS <= keys:
            _logger.debug(f"Detected {version.value} access token format")
            return token_class()

    raise UnrecognizedTokenFormatError(
        "Unrecognized token format",
        code="UNRECOGNIZED_FORMAT",
        details={"keys": sorted(keys)},
    )


def new_token(data: bytes) -> AbstractAuthnToken:
    """
    Build a parsed access token from the bytes returned by the authentication service.

    This is the entry point for collaborators: detection followed by parse.

    Raises:
        TokenFormatException: If detection or parsing fails.
    """
    token = detect_token(data)
    token.parse(data)
    return token
