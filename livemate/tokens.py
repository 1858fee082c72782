"""Delete tokens: issuance and fingerprinting.

A delete token is handed to the author exactly once, in the creation
response. Only its fingerprint is stored, so the token itself cannot be
recovered from the database.
"""
from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass

TOKEN_BYTES = 16  # 32 hex characters


@dataclass(frozen=True)
class IssuedToken:
    secret: str
    fingerprint: str

    def __repr__(self):
        # keep the plaintext out of logs and tracebacks
        return f"IssuedToken(fingerprint='{self.fingerprint[:8]}...')"


def fingerprint(secret: str) -> str:
    """Return the hex SHA-256 digest of the token's UTF-8 bytes."""
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


def issue() -> IssuedToken:
    secret = secrets.token_hex(TOKEN_BYTES)
    return IssuedToken(secret=secret, fingerprint=fingerprint(secret))
