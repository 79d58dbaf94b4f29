"""Error taxonomy for token signing and verification."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable identifiers for every token failure mode."""

    UNSUPPORTED_ALGORITHM = "UnsupportedAlgorithm"
    MALFORMED_TOKEN = "MalformedToken"
    MALFORMED_ENCODING = "MalformedEncoding"
    INVALID_PAYLOAD = "InvalidPayload"
    INVALID_SIGNATURE = "InvalidSignature"


class TokenError(Exception):
    """Base class for all errors raised while signing or parsing tokens."""

    code: ErrorCode

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code.value)


class UnsupportedAlgorithm(TokenError):
    code = ErrorCode.UNSUPPORTED_ALGORITHM

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"unsupported signing algorithm: {algorithm!r}")
        self.algorithm = algorithm


class MalformedToken(TokenError):
    code = ErrorCode.MALFORMED_TOKEN


class MalformedEncoding(TokenError):
    code = ErrorCode.MALFORMED_ENCODING


class InvalidPayload(TokenError):
    code = ErrorCode.INVALID_PAYLOAD


class InvalidSignature(TokenError):
    code = ErrorCode.INVALID_SIGNATURE


class ConfigError(RuntimeError):
    """Raised when token configuration is invalid."""


__all__ = [
    "ErrorCode",
    "TokenError",
    "UnsupportedAlgorithm",
    "MalformedToken",
    "MalformedEncoding",
    "InvalidPayload",
    "InvalidSignature",
    "ConfigError",
]
