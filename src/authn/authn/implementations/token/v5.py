# ABOUTME: Current (v5) access token implementation
# ABOUTME: Decodes the base64 JSON claims payload and applies the lifespan-ratio refresh policy

import base64
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import ValidationError

from authn.exceptions.base import TokenFieldError, TokenSemanticError
from authn.models.token.enum import TokenVersion
from authn.models.token.wire import JSON_OBJECT_ADAPTER, V5Claims, V5TokenDocument

from .base import BaseAuthnToken, ParsedFields, describe_validation_error

# Refresh once this share of the token's lifespan has elapsed.
REFRESH_LIFESPAN_RATIO = 0.85
# Assumed lifespan when the payload carries no 'exp' claim.
DEFAULT_LIFESPAN = timedelta(minutes=5)


@dataclass(frozen=True, kw_only=True)
class V5Fields(ParsedFields):
    protected: str
    payload: str
    signature: str
    claims: dict[str, Any] = field(default_factory=dict)


class AuthnTokenV5(BaseAuthnToken[V5Fields]):
    """
    Current access token.

    The top-level document carries a `protected` header, a base64 `payload`
    and a `signature`, e.g.::

        {"protected": "eyJhbGciOi...", "payload": "eyJzdWIiOiJhZG1pbiIsImlhdCI6MTUxMDc1MzI1OX0=",
         "signature": "raCufKOf..."}

    The decoded payload holds the claims, e.g. ``{"sub": "admin", "iat": 1510753259}``.
    `iat` is required and `exp` is optional; fractional seconds are truncated.

    Refresh is due once 85% of the lifespan (`exp - iat`) has elapsed, or five
    minutes after issue when no expiry is present.
    """

    VERSION = TokenVersion.V5
    REQUIRED_FIELDS = frozenset({"protected", "payload", "signature"})

    def _decode(self, data: bytes) -> V5Fields:
        try:
            document = V5TokenDocument.model_validate_json(data)
        except ValidationError as e:
            raise self._field_error(
                f"Unable to unmarshal v5 access token : {describe_validation_error(e)}",
                code="INVALID_DOCUMENT",
            ) from e

        try:
            payload_json = base64.b64decode(document.payload, validate=True)
        except ValueError as e:
            raise self._field_error(
                "v5 access token field 'payload' is not valid base64",
                code="INVALID_PAYLOAD_ENCODING",
                field_name="payload",
            ) from e

        try:
            claims = JSON_OBJECT_ADAPTER.validate_json(payload_json)
        except ValidationError as e:
            raise self._field_error(
                f"Unable to unmarshal v5 access token field 'payload' : {describe_validation_error(e)}",
                code="INVALID_PAYLOAD",
                field_name="payload",
            ) from e

        if "iat" not in claims:
            raise self._field_error(
                "v5 access token field 'payload' does not contain 'iat'",
                code="MISSING_IAT",
                field_name="iat",
            )

        try:
            times = V5Claims.model_validate(claims)
        except ValidationError as e:
            claim = str(e.errors()[0]["loc"][0])
            raise self._field_error(
                f"v5 access token field 'payload' claim '{claim}' is not a number",
                code="INVALID_CLAIM",
                field_name=claim,
            ) from e

        issued_at = self._to_instant(times.iat, "iat")
        expires_at = self._to_instant(times.exp, "exp") if times.exp is not None else None

        if expires_at is not None and issued_at > expires_at:
            raise TokenSemanticError(
                "v5 access token expired before it was issued",
                code="EXPIRED_BEFORE_ISSUED",
                details={
                    "version": self.VERSION.value,
                    "issued_at": issued_at.isoformat(),
                    "expires_at": expires_at.isoformat(),
                },
            )

        return V5Fields(
            issued_at=issued_at,
            expires_at=expires_at,
            protected=document.protected,
            payload=document.payload,
            signature=document.signature,
            claims=claims,
        )

    def _to_instant(self, seconds: float, claim: str) -> datetime:
        try:
            return datetime.fromtimestamp(int(seconds), tz=UTC)
        except (OverflowError, OSError, ValueError) as e:
            raise self._field_error(
                f"v5 access token field 'payload' claim '{claim}' is out of range",
                code="INVALID_CLAIM",
                field_name=claim,
            ) from e

    def _field_error(self, message: str, code: str, field_name: str | None = None) -> TokenFieldError:
        details: dict[str, Any] = {"version": self.VERSION.value}
        if field_name is not None:
            details["field"] = field_name
        return TokenFieldError(message, code=code, details=details)

    def should_refresh(self) -> bool:
        fields = self._parsed()
        if fields.expires_at is not None:
            lifespan = fields.expires_at - fields.issued_at
            refresh_at = fields.issued_at + lifespan * REFRESH_LIFESPAN_RATIO
        else:
            refresh_at = fields.issued_at + DEFAULT_LIFESPAN
        return datetime.now(UTC) > refresh_at

    @property
    def protected(self) -> str:
        return self._parsed().protected

    @property
    def payload(self) -> str:
        return self._parsed().payload

    @property
    def signature(self) -> str:
        return self._parsed().signature

    @property
    def subject(self) -> str | None:
        """The `sub` claim, when present and a string."""
        sub = self._parsed().claims.get("sub")
        return sub if isinstance(sub, str) else None

    @property
    def claims(self) -> dict[str, Any]:
        """A copy of every decoded payload claim."""
        return dict(self._parsed().claims)
