# ABOUTME: Legacy (v4) access token implementation
# ABOUTME: Parses the data/timestamp/signature/key document and applies the fixed-window refresh policy

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone

from pydantic import ValidationError

from authn.exceptions.base import TokenFieldError
from authn.models.token.enum import TokenVersion
from authn.models.token.wire import V4TokenDocument

from .base import BaseAuthnToken, ParsedFields, describe_validation_error

V4_REFRESH_WINDOW = timedelta(minutes=5)

_TIMESTAMP_RE = re.compile(
    r"^(?P<clock>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) (?P<zone>GMT[+-]\d{1,2}|[A-Z]{3,5})$"
)
_TIMESTAMP_CLOCK_FORMAT = "%Y-%m-%d %H:%M:%S"


def _zone_offset(zone: str) -> timezone:
    if zone.startswith("GMT") and len(zone) > 3:
        hours = int(zone[3:])
        if abs(hours) > 23:
            raise ValueError(f"zone offset out of range: {zone}")
        return timezone(timedelta(hours=hours))
    # UTC, GMT and any other abbreviation without a known offset
    return UTC


def parse_v4_timestamp(value: str) -> datetime:
    """
    Parse a v4 `timestamp` field, e.g. ``2020-01-01 00:00:00 UTC``.

    The zone is an abbreviation, not a numeric offset. ``GMT+h`` / ``GMT-h``
    carry a whole-hour offset; every other abbreviation is read as UTC.

    Returns:
        A timezone-aware datetime normalized to UTC.

    Raises:
        ValueError: If the value does not match the layout or names an invalid date.
        OverflowError: If the offset moves the instant outside the supported range.
    """
    match = _TIMESTAMP_RE.match(value)
    if match is None:
        raise ValueError('expected layout "YYYY-MM-DD HH:MM:SS ZZZ"')

    clock = datetime.strptime(match.group("clock"), _TIMESTAMP_CLOCK_FORMAT)
    return clock.replace(tzinfo=_zone_offset(match.group("zone"))).astimezone(UTC)


@dataclass(frozen=True, kw_only=True)
class V4Fields(ParsedFields):
    data: str
    signature: str
    key: str
    timestamp: str


class AuthnTokenV4(BaseAuthnToken[V4Fields]):
    """
    Legacy access token.

    Example document::

        {"data": "admin", "timestamp": "2020-01-01 00:00:00 UTC",
         "signature": "...", "key": "..."}

    The format carries no expiry. `should_refresh` reports True while the token
    is younger than five minutes and False afterwards, which is the behavior
    deployed clients rely on.
    """

    VERSION = TokenVersion.V4
    REQUIRED_FIELDS = frozenset({"data", "timestamp", "signature", "key"})

    def _decode(self, data: bytes) -> V4Fields:
        try:
            document = V4TokenDocument.model_validate_json(data)
        except ValidationError as e:
            raise TokenFieldError(
                f"Unable to unmarshal v4 access token : {describe_validation_error(e)}",
                code="INVALID_DOCUMENT",
                details={"version": self.VERSION.value},
            ) from e

        try:
            issued_at = parse_v4_timestamp(document.timestamp)
        except (ValueError, OverflowError) as e:
            raise TokenFieldError(
                f"Unable to parse v4 access token field 'timestamp' {document.timestamp!r} : {e}",
                code="INVALID_TIMESTAMP",
                details={"version": self.VERSION.value, "field": "timestamp", "value": document.timestamp},
            ) from e

        return V4Fields(
            issued_at=issued_at,
            data=document.data,
            signature=document.signature,
            key=document.key,
            timestamp=document.timestamp,
        )

    def should_refresh(self) -> bool:
        # TODO: confirm with the auth service owners whether this should be
        # inverted to match the v5 policy (refresh once the window has elapsed).
        return self.issued_at + V4_REFRESH_WINDOW > datetime.now(UTC)

    @property
    def data(self) -> str:
        return self._parsed().data

    @property
    def signature(self) -> str:
        return self._parsed().signature

    @property
    def key(self) -> str:
        return self._parsed().key

    @property
    def timestamp(self) -> str:
        """The `timestamp` field exactly as received."""
        return self._parsed().timestamp
