"""Algorithm name to signer constructor registry."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from ..errors import UnsupportedAlgorithm
from .base import Signer

SignerFactory = Callable[[Any], Signer]


class SignerRegistry:
    """In-memory mapping of algorithm identifiers to signer factories."""

    def __init__(self) -> None:
        self._factories: Dict[str, SignerFactory] = {}

    def register(self, name: str, factory: SignerFactory) -> None:
        self._factories[name] = factory

    def resolve(self, name: str, key: Any) -> Signer:
        factory = self._factories.get(name)
        if factory is None:
            raise UnsupportedAlgorithm(name)
        return factory(key)

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories


def signing_algorithm(name: str, *, registry: Optional[SignerRegistry] = None) -> Callable:
    """Class decorator registering a signer class under ``name``."""

    def decorator(cls: type) -> type:
        (registry or DEFAULT_REGISTRY).register(name, cls)
        return cls

    return decorator


def resolve(algorithm: str, key: Any, *, registry: Optional[SignerRegistry] = None) -> Signer:
    """Resolve ``algorithm`` to a signer bound to ``key``."""
    return (registry or DEFAULT_REGISTRY).resolve(algorithm, key)


DEFAULT_REGISTRY = SignerRegistry()
