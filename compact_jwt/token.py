"""Token context: sign claims into compact tokens and parse them back."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from .codec import canonical_json, decode, encode, load_json
from .config import TokenSettings
from .errors import InvalidPayload, MalformedToken, TokenError
from .logging import get_logger
from .signing import SignerRegistry, resolve
from .types import ClaimsKind, Claims, Header, ParsedToken, RegisteredClaims, VerificationResult

logger = get_logger(__name__)


class JWT:
    """A token context bound to one algorithm, one key and one claims shape.

    The context may be reused for any number of independent ``sign`` and
    ``parse`` calls. A call either completes and updates ``claims``,
    ``signature`` and ``token``, or raises a ``TokenError`` and leaves them
    untouched.
    """

    def __init__(
        self,
        alg: str,
        key: Any,
        *,
        claims_kind: ClaimsKind = ClaimsKind.REGISTERED,
        registry: Optional[SignerRegistry] = None,
    ) -> None:
        self.signer = resolve(alg, key, registry=registry)
        self.header = Header(alg=alg)
        self.claims_kind = ClaimsKind(claims_kind)
        self.claims: Optional[Claims] = None
        self.signature: Optional[bytes] = None
        self.token: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: TokenSettings, *, registry: Optional[SignerRegistry] = None) -> "JWT":
        return cls(settings.algorithm, settings.secret, claims_kind=settings.claims_kind, registry=registry)

    def sign(self, claims: Claims) -> str:
        """Serialize, encode and sign ``claims``, returning the token string."""
        claims = self._own_claims(claims)
        header_segment = encode(canonical_json(self.header.to_dict()))
        claims_segment = encode(self._dump_claims(claims))
        signing_input = f"{header_segment}.{claims_segment}"
        signature = self.signer.sign(signing_input)
        token = f"{signing_input}.{encode(signature)}"

        self.claims, self.signature, self.token = claims, signature, token
        logger.debug("token_signed", alg=self.header.alg, claims_kind=self.claims_kind.value)
        return token

    def parse(self, token: str) -> ParsedToken:
        """Verify ``token`` and return its header and claims."""
        try:
            parsed = self._parse(token)
        except TokenError as exc:
            logger.info("token_rejected", alg=self.header.alg, reason=exc.code.value)
            raise

        self.claims, self.signature, self.token = copy.deepcopy(parsed.claims), parsed.signature, token
        logger.debug("token_parsed", alg=parsed.header.alg, claims_kind=self.claims_kind.value)
        return parsed

    def verify(self, token: str) -> VerificationResult:
        """Like ``parse`` but reports failures in the result instead of raising."""
        try:
            parsed = self.parse(token)
        except TokenError as exc:
            return VerificationResult(False, exc.code.value)
        return VerificationResult(True, "ok", header=parsed.header, claims=parsed.claims)

    def _parse(self, token: str) -> ParsedToken:
        if not isinstance(token, str):
            raise MalformedToken("token must be a string")
        segments = token.split(".")
        if len(segments) != 3:
            raise MalformedToken(f"token must have 3 segments, got {len(segments)}")
        header_segment, claims_segment, signature_segment = segments

        header_raw = decode(header_segment)
        claims_raw = decode(claims_segment)
        signature = decode(signature_segment)

        # Verify over the wire segments exactly as received, before any JSON is read.
        self.signer.verify(f"{header_segment}.{claims_segment}", signature)

        header = Header.from_dict(load_json(header_raw))
        claims = self._load_claims(load_json(claims_raw))
        return ParsedToken(header=header, claims=claims, signature=signature)

    def _own_claims(self, claims: Claims) -> Claims:
        if self.claims_kind is ClaimsKind.REGISTERED:
            if not isinstance(claims, RegisteredClaims):
                raise InvalidPayload("this context signs RegisteredClaims")
            return claims
        if not isinstance(claims, Mapping):
            raise InvalidPayload("this context signs a mapping of custom claims")
        if not all(isinstance(key, str) for key in claims):
            raise InvalidPayload("custom claim names must be strings")
        return copy.deepcopy(dict(claims))

    def _dump_claims(self, claims: Claims) -> bytes:
        if isinstance(claims, RegisteredClaims):
            return canonical_json(claims.to_dict())
        return canonical_json(claims, sort_keys=True)

    def _load_claims(self, value: Any) -> Claims:
        if self.claims_kind is ClaimsKind.REGISTERED:
            return RegisteredClaims.from_dict(value)
        if not isinstance(value, dict):
            raise InvalidPayload("claims must be a JSON object")
        return value

    def __repr__(self) -> str:
        return f"JWT(alg={self.header.alg!r}, claims_kind={self.claims_kind.value!r})"


def parse(
    token: str,
    alg: str,
    key: Any,
    *,
    claims_kind: ClaimsKind = ClaimsKind.REGISTERED,
    registry: Optional[SignerRegistry] = None,
) -> Tuple[Header, Claims]:
    """One-shot verification: build a context for ``alg``/``key`` and parse ``token``."""
    parsed = JWT(alg, key, claims_kind=claims_kind, registry=registry).parse(token)
    return parsed.header, parsed.claims
