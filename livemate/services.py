from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from flask import current_app

from livemate import tokens
from livemate.gate import Decision, OwnershipGate
from livemate.store import PostDraft, PostStore, PublicPost


def normalize_contact_handle(raw: str) -> str:
    handle = (raw or "").strip()
    if not handle:
        return ""
    return handle if handle.startswith("@") else f"@{handle}"


# Post creation
@dataclass(frozen=True)
class CreatePostResult:
    created: bool
    post: Optional[PublicPost]
    delete_token: Optional[str]
    reason: str  # "ok" | "required_fields"

    def __repr__(self):
        post_id = self.post.id if self.post else None
        return f"CreatePostResult(created={self.created}, post_id={post_id}, reason='{self.reason}')"


def create_post(
    store: PostStore,
    *,
    title: str,
    date: str,
    area: str,
    contact_handle: str,
    comment: Optional[str] = None,
) -> CreatePostResult:
    title = (title or "").strip()
    date = (date or "").strip()
    area = (area or "").strip()
    comment = (comment or "").strip() or None
    contact_handle = normalize_contact_handle(contact_handle)

    if not (title and date and area and contact_handle):
        return CreatePostResult(created=False, post=None, delete_token=None, reason="required_fields")

    issued = tokens.issue()
    post = store.insert(PostDraft(
        title=title,
        date=date,
        area=area,
        comment=comment,
        contact_handle=contact_handle,
        delete_token_hash=issued.fingerprint,
    ))
    current_app.logger.info("post %s created", post.id)

    return CreatePostResult(created=True, post=post, delete_token=issued.secret, reason="ok")


# Board listing, newest first
def list_posts(store: PostStore) -> List[PublicPost]:
    return store.list_recent()


# Post deletion
@dataclass(frozen=True)
class DeletePostResult:
    deleted: bool
    reason: Decision


def delete_post(store: PostStore, *, post_id, delete_token: Optional[str]) -> DeletePostResult:
    decision = OwnershipGate(store).authorize(post_id, delete_token)
    if decision is not Decision.AUTHORIZED:
        current_app.logger.warning("delete of post %s rejected: %s", post_id, decision.value)
        return DeletePostResult(deleted=False, reason=decision)

    # a concurrent delete with the same token may have won in between
    if not store.delete_by_id(post_id):
        current_app.logger.warning("post %s already gone at delete time", post_id)
        return DeletePostResult(deleted=False, reason=Decision.NOT_FOUND)

    current_app.logger.info("post %s deleted", post_id)
    return DeletePostResult(deleted=True, reason=Decision.AUTHORIZED)
