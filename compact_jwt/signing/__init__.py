"""Signing algorithms and their registry."""

from .base import Signer
from .registry import DEFAULT_REGISTRY, SignerRegistry, resolve, signing_algorithm
from .hmac_signer import HS256, HMACSigner, HS256Signer

__all__ = [
    "Signer",
    "SignerRegistry",
    "DEFAULT_REGISTRY",
    "resolve",
    "signing_algorithm",
    "HMACSigner",
    "HS256Signer",
    "HS256",
]
