"""Environment-driven token settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .errors import ConfigError
from .logging import DEFAULT_LOG_LEVEL
from .signing import HS256
from .types import ClaimsKind

ENV_PREFIX = "COMPACT_JWT_"


@dataclass(frozen=True)
class TokenSettings:
    """Algorithm, key and claims shape used to build a token context."""

    secret: bytes = field(repr=False)
    algorithm: str = HS256
    claims_kind: ClaimsKind = ClaimsKind.REGISTERED
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not self.secret:
            raise ConfigError("a non-empty signing secret is required")
        if isinstance(self.secret, str):
            object.__setattr__(self, "secret", self.secret.encode("utf-8"))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TokenSettings":
        """Load settings from ``COMPACT_JWT_*`` environment variables."""
        env = os.environ if environ is None else environ
        secret = env.get(f"{ENV_PREFIX}SECRET", "")
        if not secret:
            raise ConfigError(f"{ENV_PREFIX}SECRET is not set")

        kind = env.get(f"{ENV_PREFIX}CLAIMS", ClaimsKind.REGISTERED.value).strip().lower()
        try:
            claims_kind = ClaimsKind(kind)
        except ValueError as exc:
            raise ConfigError(f"unknown claims kind {kind!r}; expected 'registered' or 'custom'") from exc

        return cls(
            secret=secret.encode("utf-8"),
            algorithm=env.get(f"{ENV_PREFIX}ALGORITHM", HS256).strip() or HS256,
            claims_kind=claims_kind,
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
