"""Example: sign and verify a token carrying caller-defined claims."""

from __future__ import annotations

from compact_jwt import JWT, ClaimsKind

ctx = JWT("HS256", b"secretkey", claims_kind=ClaimsKind.CUSTOM)

if __name__ == "__main__":
    token = ctx.sign({"sub": "user-42", "role": "admin", "scopes": ["read", "write"]})
    print("Token:", token)
    result = ctx.verify(token)
    print("Valid:", result.valid, "Claims:", result.claims)
