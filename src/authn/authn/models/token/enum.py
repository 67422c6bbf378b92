from enum import Enum


class TokenVersion(str, Enum):
    """
    Enumeration of recognized access token wire formats.

    Attributes:
        V4 (str): Legacy format carrying a human-readable issue timestamp.
        V5 (str): Current format carrying a base64-encoded JSON claims payload.
    """

    V4 = "v4"
    V5 = "v5"
