# ABOUTME: Abstract access token interface shared by every token wire format
# ABOUTME: Defines the parse / raw / should_refresh contract used by the client's cache layer

from abc import ABC, abstractmethod
from datetime import datetime
from typing import ClassVar

from authn.models.token.enum import TokenVersion


class AbstractAuthnToken(ABC):
    """
    Abstract access token as returned by the authentication service.

    A concrete token represents one wire format. It is created unparsed by
    format detection, populated exactly once by `parse`, and immutable from
    then on, which makes `raw`, `should_refresh` and the time accessors safe
    for concurrent readers.

    Attributes:
        VERSION: The wire format implemented by the class.
        REQUIRED_FIELDS: Top-level JSON keys that identify the wire format.
    """

    VERSION: ClassVar[TokenVersion]
    REQUIRED_FIELDS: ClassVar[frozenset[str]]

    @abstractmethod
    def parse(self, data: bytes) -> None:
        """
        Parses the raw token bytes and populates the token in place.

        Args:
            data (bytes): The token exactly as obtained from the authentication service.

        Raises:
            TokenFormatException: If the bytes are not a valid token of this format.
            TokenAlreadyParsedError: If the token was already parsed successfully.
        """
        pass

    @abstractmethod
    def raw(self) -> bytes:
        """
        Returns the bytes given to `parse`, unmodified and not copied.

        Raises:
            TokenNotParsedError: If the token has not been parsed.
        """
        pass

    @abstractmethod
    def should_refresh(self) -> bool:
        """
        Whether the token is due to be replaced by a freshly fetched one.

        Evaluated against the current wall clock on every call.

        Raises:
            TokenNotParsedError: If the token has not been parsed.
        """
        pass

    @property
    @abstractmethod
    def is_parsed(self) -> bool:
        """Whether `parse` has completed successfully."""
        pass

    @property
    @abstractmethod
    def issued_at(self) -> datetime:
        """The UTC instant the token was issued."""
        pass

    @property
    @abstractmethod
    def expires_at(self) -> datetime | None:
        """The UTC instant the token expires, or None when the format does not carry one."""
        pass

    @property
    def version(self) -> TokenVersion:
        """The wire format of this token."""
        return self.VERSION
