"""Wire-level document models for access tokens."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

# Seconds since the epoch as carried in JSON claims; booleans, strings,
# NaN and Infinity are rejected.
UnixTime = Annotated[float, Field(strict=True, allow_inf_nan=False)]

# Structural probe used by format detection: a JSON object of string values.
FIELD_MAP_ADAPTER: TypeAdapter[dict[str, str]] = TypeAdapter(dict[str, Annotated[str, Field(strict=True)]])

# A JSON object with arbitrary value types.
JSON_OBJECT_ADAPTER: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


class V4TokenDocument(BaseModel):
    """
    Top-level JSON document of a legacy (v4) access token.

    Attributes:
        data (str): Opaque token data, usually the login name.
        timestamp (str): Issue time in the `YYYY-MM-DD HH:MM:SS ZZZ` layout.
        signature (str): Opaque signature; not verified.
        key (str): Fingerprint of the signing key; not verified.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    data: str = Field(..., description="Opaque token data")
    timestamp: str = Field(..., description="Issue time, 'YYYY-MM-DD HH:MM:SS ZZZ'")
    signature: str = Field(..., description="Token signature")
    key: str = Field(..., description="Signing key fingerprint")


class V5TokenDocument(BaseModel):
    """
    Top-level JSON document of a current (v5) access token.

    Attributes:
        protected (str): Base64 protected header; carried opaquely.
        payload (str): Base64 (standard alphabet, padded) JSON claims.
        signature (str): Opaque signature; not verified.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    protected: str = Field(..., description="Protected header")
    payload: str = Field(..., description="Base64-encoded JSON claims")
    signature: str = Field(..., description="Token signature")


class V5Claims(BaseModel):
    """
    Decoded claims of a v5 token payload.

    Only the time claims are typed. Every other claim, `sub` included, is kept
    as-is in the model extras.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    iat: UnixTime = Field(..., description="Issue time, seconds since the epoch")
    exp: UnixTime | None = Field(None, description="Expiry time, seconds since the epoch")

    @field_validator("exp", mode="before")
    @classmethod
    def validate_exp_not_null(cls, v: Any) -> Any:
        """An explicit null 'exp' is malformed; only an absent claim means no expiry."""
        if v is None:
            raise ValueError("exp must be a number when present")
        return v
