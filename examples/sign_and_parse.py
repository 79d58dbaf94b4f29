"""Example: mint a token from environment settings and verify it again."""

from __future__ import annotations

import os
import time

from compact_jwt import JWT, RegisteredClaims, TokenError, TokenSettings
from compact_jwt.logging import setup_logging


def main() -> None:
    os.environ.setdefault("COMPACT_JWT_SECRET", "example-secret")
    settings = TokenSettings.from_env()
    setup_logging(settings.log_level)

    ctx = JWT.from_settings(settings)
    now = int(time.time())
    token = ctx.sign(RegisteredClaims(sub="user-42", iss="example", iat=now, exp=now + 3600))
    print("Token:", token)

    parsed = ctx.parse(token)
    print("Header:", parsed.header)
    print("Claims:", parsed.claims)

    tampered = token[:-2] + ("AA" if not token.endswith("AA") else "BB")
    try:
        ctx.parse(tampered)
    except TokenError as exc:
        print("Rejected tampered token:", exc.code.value)


if __name__ == "__main__":
    main()
