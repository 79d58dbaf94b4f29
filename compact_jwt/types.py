"""Token header, claims and result datatypes."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from .errors import InvalidPayload

TOKEN_TYPE = "JWT"

CustomClaims = Dict[str, Any]

_TIME_CLAIMS = frozenset({"exp", "iat", "nbf"})


class ClaimsKind(str, Enum):
    """Claims shape bound to a token context."""

    REGISTERED = "registered"
    CUSTOM = "custom"


def _omit_empty(values: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None and value != "" and value != 0}


def _require_object(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise InvalidPayload(f"{what} must be a JSON object")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise InvalidPayload(f"{key!r} must be a string")


def _optional_int(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPayload(f"{key!r} must be an integer")
    return value


@dataclass(frozen=True)
class Header:
    """JOSE header: signing algorithm plus the fixed token type."""

    alg: str
    typ: str = TOKEN_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({"alg": self.alg, "typ": self.typ})

    @classmethod
    def from_dict(cls, value: Any) -> "Header":
        data = _require_object(value, "header")
        return cls(alg=_optional_str(data, "alg") or "", typ=_optional_str(data, "typ") or "")


@dataclass(frozen=True)
class RegisteredClaims:
    """The registered claim names, each omitted from the wire form when unset.

    Times are integer seconds since the epoch and the rest are strings; a value
    of the wrong type raises ``InvalidPayload``. No expiry, audience or issuer
    checks happen here.
    """

    aud: Optional[str] = None
    exp: Optional[int] = None
    iat: Optional[int] = None
    iss: Optional[str] = None
    jti: Optional[str] = None
    nbf: Optional[int] = None
    sub: Optional[str] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            check = _optional_int if f.name in _TIME_CLAIMS else _optional_str
            value = check(vars(self), f.name)
            # Zero values are indistinguishable from unset ones on the wire.
            if value == "" or value == 0:
                object.__setattr__(self, f.name, None)

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({f.name: getattr(self, f.name) for f in fields(self)})

    @classmethod
    def from_dict(cls, value: Any) -> "RegisteredClaims":
        data = _require_object(value, "claims")
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})


Claims = Union[RegisteredClaims, CustomClaims]


@dataclass(frozen=True)
class ParsedToken:
    """Verified header and claims recovered from a token."""

    header: Header
    claims: Claims
    signature: bytes


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: str
    header: Header | None = None
    claims: Claims | None = None
