from __future__ import annotations

import enum
import hmac

from livemate import tokens
from livemate.store import PostStore


class Decision(str, enum.Enum):
    AUTHORIZED = "ok"
    MISSING_CREDENTIAL = "missing_credential"
    NOT_FOUND = "not_found"
    INVALID_CREDENTIAL = "invalid_credential"


class OwnershipGate:
    """Decides whether the holder of a delete token may remove a post.

    Possession of the token is the only proof of ownership. The gate only
    reads from the store; acting on an AUTHORIZED decision is up to the caller.
    """

    def __init__(self, store: PostStore):
        self.store = store

    def authorize(self, post_id, candidate_secret) -> Decision:
        candidate = str(candidate_secret or "").strip()
        if not candidate:
            return Decision.MISSING_CREDENTIAL

        # absence is reported before any comparison
        stored = self.store.get_fingerprint(post_id)
        if stored is None:
            return Decision.NOT_FOUND

        presented = tokens.fingerprint(candidate)
        if not hmac.compare_digest(presented.encode("ascii"), stored.encode("ascii")):
            return Decision.INVALID_CREDENTIAL

        return Decision.AUTHORIZED
