"""compact_jwt package.

Issue and verify compact signed tokens made of a JSON header, a JSON claims
payload and a signature, joined as three dot-separated base64url segments.
"""

from .config import TokenSettings
from .errors import (
    ConfigError,
    ErrorCode,
    InvalidPayload,
    InvalidSignature,
    MalformedEncoding,
    MalformedToken,
    TokenError,
    UnsupportedAlgorithm,
)
from .signing import DEFAULT_REGISTRY, HS256, Signer, SignerRegistry, resolve, signing_algorithm
from .token import JWT, parse
from .types import ClaimsKind, Header, ParsedToken, RegisteredClaims, VerificationResult

__version__ = "0.1.0"

__all__ = [
    "JWT",
    "parse",
    "resolve",
    "signing_algorithm",
    "Signer",
    "SignerRegistry",
    "DEFAULT_REGISTRY",
    "HS256",
    "Header",
    "RegisteredClaims",
    "ClaimsKind",
    "ParsedToken",
    "VerificationResult",
    "TokenSettings",
    "ErrorCode",
    "TokenError",
    "UnsupportedAlgorithm",
    "MalformedToken",
    "MalformedEncoding",
    "InvalidPayload",
    "InvalidSignature",
    "ConfigError",
]
