from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from livemate.extensions import db
from livemate.models import Post


class StoreError(RuntimeError):
    """Raised when the underlying persistence call fails."""


@dataclass(frozen=True)
class PostDraft:
    title: str
    date: str
    area: str
    comment: Optional[str]
    contact_handle: str
    delete_token_hash: str


@dataclass(frozen=True)
class PublicPost:
    """A post as it may be shown to anyone. Carries no token hash."""
    id: int
    title: str
    date: str
    area: str
    comment: Optional[str]
    contact_handle: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "area": self.area,
            "comment": self.comment,
            "contact_handle": self.contact_handle,
            "created_at": self.created_at.isoformat(),
        }


MAX_POST_ID = 2**63 - 1  # signed 64-bit INTEGER column


def _coerce_id(post_id) -> Optional[int]:
    """Return the post id as int, or None when it cannot name a stored post."""
    if isinstance(post_id, bool):
        return None
    if isinstance(post_id, int):
        pid = post_id
    elif isinstance(post_id, str) and post_id.isascii() and post_id.isdigit():
        pid = int(post_id)
    else:
        return None
    if not 0 < pid <= MAX_POST_ID:
        return None
    return pid


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they were written as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class PostStore(Protocol):
    def insert(self, draft: PostDraft) -> PublicPost: ...

    def list_recent(self) -> List[PublicPost]: ...

    def get_fingerprint(self, post_id) -> Optional[str]: ...

    def delete_by_id(self, post_id) -> bool: ...


class SqlPostStore:
    """Post store backed by the Flask-SQLAlchemy session."""

    _public_columns = (
        Post.id, Post.title, Post.date, Post.area,
        Post.comment, Post.contact_handle, Post.created_at,
    )

    def insert(self, draft: PostDraft) -> PublicPost:
        post = Post(
            title=draft.title,
            date=draft.date,
            area=draft.area,
            comment=draft.comment,
            contact_handle=draft.contact_handle,
            delete_token_hash=draft.delete_token_hash,
        )
        try:
            db.session.add(post)
            db.session.commit()
            return PublicPost(
                id=post.id,
                title=post.title,
                date=post.date,
                area=post.area,
                comment=post.comment,
                contact_handle=post.contact_handle,
                created_at=_as_utc(post.created_at),
            )
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError("failed to insert post") from exc

    def list_recent(self) -> List[PublicPost]:
        try:
            rows = (
                db.session.query(*self._public_columns)
                .order_by(Post.created_at.desc(), Post.id.desc())
                .all()
            )
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError("failed to list posts") from exc

        return [PublicPost(*row[:-1], created_at=_as_utc(row[-1])) for row in rows]

    def get_fingerprint(self, post_id) -> Optional[str]:
        pid = _coerce_id(post_id)
        if pid is None:
            return None
        try:
            return (
                db.session.query(Post.delete_token_hash)
                .filter(Post.id == pid)
                .scalar()
            )
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError("failed to fetch post") from exc

    def delete_by_id(self, post_id) -> bool:
        pid = _coerce_id(post_id)
        if pid is None:
            return False
        try:
            deleted = (
                db.session.query(Post)
                .filter(Post.id == pid)
                .delete(synchronize_session=False)
            )
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError("failed to delete post") from exc
        return deleted > 0


class InMemoryPostStore:
    """Process-local store for tests and throwaway demos."""

    def __init__(self):
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._rows: Dict[int, Dict[str, Any]] = {}

    def insert(self, draft: PostDraft) -> PublicPost:
        with self._lock:
            pid = next(self._ids)
            row = {
                "id": pid,
                "title": draft.title,
                "date": draft.date,
                "area": draft.area,
                "comment": draft.comment,
                "contact_handle": draft.contact_handle,
                "created_at": datetime.now(timezone.utc),
                "delete_token_hash": draft.delete_token_hash,
            }
            self._rows[pid] = row
            return self._public(row)

    def list_recent(self) -> List[PublicPost]:
        with self._lock:
            rows = sorted(
                self._rows.values(),
                key=lambda r: (r["created_at"], r["id"]),
                reverse=True,
            )
            return [self._public(r) for r in rows]

    def get_fingerprint(self, post_id) -> Optional[str]:
        pid = _coerce_id(post_id)
        with self._lock:
            row = self._rows.get(pid)
            return row["delete_token_hash"] if row else None

    def delete_by_id(self, post_id) -> bool:
        pid = _coerce_id(post_id)
        with self._lock:
            return self._rows.pop(pid, None) is not None

    @staticmethod
    def _public(row: Dict[str, Any]) -> PublicPost:
        return PublicPost(**{k: v for k, v in row.items() if k != "delete_token_hash"})


def build_post_store(backend: str) -> PostStore:
    if backend == "memory":
        return InMemoryPostStore()
    if backend == "sqlalchemy":
        return SqlPostStore()
    raise ValueError(f"unknown POST_STORE_BACKEND: {backend!r}")


def get_post_store() -> PostStore:
    return current_app.extensions["post_store"]
