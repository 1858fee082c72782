from datetime import timedelta

from livemate import tokens
from livemate.store import InMemoryPostStore, PostDraft, SqlPostStore, build_post_store


def _draft(title="Countdown Japan", fingerprint=None):
    return PostDraft(
        title=title,
        date="2026-12-30",
        area="Makuhari",
        comment=None,
        contact_handle="@cdj",
        delete_token_hash=fingerprint or tokens.issue().fingerprint,
    )


def test_sql_store_insert_and_fingerprint(app):
    with app.app_context():
        store = SqlPostStore()
        issued = tokens.issue()
        post = store.insert(_draft(fingerprint=issued.fingerprint))

        assert post.id is not None
        assert post.created_at is not None
        assert not hasattr(post, "delete_token_hash")
        assert store.get_fingerprint(post.id) == issued.fingerprint
        assert store.get_fingerprint(post.id + 100) is None
        assert store.get_fingerprint("nope") is None


def test_sql_store_delete_reports_missing(app):
    with app.app_context():
        store = SqlPostStore()
        post = store.insert(_draft())

        assert store.delete_by_id(post.id) is True
        assert store.delete_by_id(post.id) is False
        assert store.delete_by_id("nope") is False
        assert store.list_recent() == []


def test_memory_store_orders_newest_first():
    store = InMemoryPostStore()
    ids = [store.insert(_draft(title=f"t{i}")).id for i in range(3)]
    assert [p.id for p in store.list_recent()] == list(reversed(ids))


def test_app_uses_configured_backend(app):
    with app.app_context():
        assert isinstance(app.extensions["post_store"], SqlPostStore)
    assert isinstance(build_post_store("memory"), InMemoryPostStore)


def test_store_rejects_non_canonical_ids(app):
    with app.app_context():
        store = SqlPostStore()
        post = store.insert(_draft())

        for bad in (str(2**64), " %d" % post.id, "+%d" % post.id, "0", -post.id, True, None, 1.0):
            assert store.get_fingerprint(bad) is None
            assert store.delete_by_id(bad) is False

        assert store.get_fingerprint(str(post.id)) is not None

    memory = InMemoryPostStore()
    memory_post = memory.insert(_draft())
    assert memory.get_fingerprint(str(2**64)) is None
    assert memory.get_fingerprint("1_%d" % memory_post.id) is None


def test_created_at_is_utc_aware_in_both_stores(app):
    with app.app_context():
        store = SqlPostStore()
        inserted = store.insert(_draft())
        listed = store.list_recent()[0]

    memory_post = InMemoryPostStore().insert(_draft())
    for post in (inserted, listed, memory_post):
        assert post.created_at.utcoffset() == timedelta(0)
        assert post.to_dict()["created_at"].endswith("+00:00")
