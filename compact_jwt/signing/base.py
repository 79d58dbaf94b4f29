"""Signer capability interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Signer(ABC):
    """Algorithm-bound capability that produces and checks signatures.

    Implementations must not keep per-call state, so a single instance can be
    shared between threads and reused for any number of calls.
    """

    name: str

    @abstractmethod
    def sign(self, signing_input: str) -> bytes:
        """Return the signature over the UTF-8 bytes of ``signing_input``."""

    @abstractmethod
    def verify(self, signing_input: str, signature: bytes) -> None:
        """Raise ``InvalidSignature`` unless ``signature`` matches ``signing_input``."""
