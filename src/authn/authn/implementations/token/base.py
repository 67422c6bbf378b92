# ABOUTME: Shared lifecycle for concrete access token implementations
# ABOUTME: Enforces one-shot parsing, commits state only on success, and guards unparsed access

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from loguru import logger
from pydantic import ValidationError

from authn.exceptions.base import TokenAlreadyParsedError, TokenFormatException, TokenNotParsedError
from authn.interfaces.token import AbstractAuthnToken


@dataclass(frozen=True, kw_only=True)
class ParsedFields:
    """Immutable state produced by a successful parse."""

    issued_at: datetime
    expires_at: datetime | None = None


F = TypeVar("F", bound=ParsedFields)


def describe_validation_error(error: ValidationError) -> str:
    """Summarize a pydantic error by location and message, without echoing input values."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)


class BaseAuthnToken(AbstractAuthnToken, Generic[F]):
    """
    Base class implementing the token lifecycle on top of a format-specific decoder.

    Subclasses implement `_decode`, which must not mutate the instance: it
    returns the decoded fields and the base class commits them together with
    the raw bytes only after decoding succeeded. A failed parse therefore
    leaves the token exactly as it was before the call.
    """

    def __init__(self) -> None:
        self._bytes: bytes | None = None
        self._fields: F | None = None
        self._logger = logger.bind(name=f"{__name__}.{type(self).__name__}")

    @abstractmethod
    def _decode(self, data: bytes) -> F:
        """Decode and validate `data`, raising a TokenFormatException subclass on failure."""
        pass

    def parse(self, data: bytes) -> None:
        if self._fields is not None:
            raise TokenAlreadyParsedError(
                f"{self.VERSION.value} access token has already been parsed",
                code="TOKEN_ALREADY_PARSED",
                details={"version": self.VERSION.value},
            )

        try:
            fields = self._decode(data)
        except TokenFormatException as e:
            self._logger.warning(f"Rejected {self.VERSION.value} access token ({len(data)} bytes): {e.code}")
            raise

        self._bytes = data
        self._fields = fields
        self._logger.debug(
            f"Parsed {self.VERSION.value} access token ({len(data)} bytes), "
            f"issued at {fields.issued_at.isoformat()}, expires at "
            f"{fields.expires_at.isoformat() if fields.expires_at else 'n/a'}"
        )

    def raw(self) -> bytes:
        self._parsed()
        return self._bytes  # type: ignore[return-value]

    @property
    def is_parsed(self) -> bool:
        return self._fields is not None

    @property
    def issued_at(self) -> datetime:
        return self._parsed().issued_at

    @property
    def expires_at(self) -> datetime | None:
        return self._parsed().expires_at

    def _parsed(self) -> F:
        fields = self._fields
        if fields is None:
            raise TokenNotParsedError(
                f"{self.VERSION.value} access token has not been parsed",
                code="TOKEN_NOT_PARSED",
                details={"version": self.VERSION.value},
            )
        return fields

    def __repr__(self) -> str:
        if self._fields is None:
            return f"{type(self).__name__}(parsed=False)"
        return f"{type(self).__name__}(issued_at={self._fields.issued_at.isoformat()!r})"
