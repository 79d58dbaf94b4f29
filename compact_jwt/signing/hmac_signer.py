"""HMAC-backed signers."""

from __future__ import annotations

import hashlib
import hmac
from typing import Any, Callable, Union

from ..errors import InvalidSignature
from .base import Signer
from .registry import signing_algorithm

HS256 = "HS256"

Key = Union[bytes, bytearray, memoryview, str]


def _key_bytes(key: Key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"HMAC key must be str or bytes-like, not {type(key).__name__}")


class HMACSigner(Signer):
    """Keyed-hash signer; a new HMAC object is built for every call."""

    digestmod: Callable[..., Any]

    def __init__(self, key: Key) -> None:
        self._key = _key_bytes(key)

    def sign(self, signing_input: str) -> bytes:
        return hmac.new(self._key, signing_input.encode("utf-8"), self.digestmod).digest()

    def verify(self, signing_input: str, signature: bytes) -> None:
        expected = self.sign(signing_input)
        if not hmac.compare_digest(expected, bytes(signature)):
            raise InvalidSignature("signature does not match signing input")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


@signing_algorithm(HS256)
class HS256Signer(HMACSigner):
    name = HS256
    digestmod = hashlib.sha256
