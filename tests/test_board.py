import re

from livemate.extensions import db
from livemate.models import Post


FORM = {
    "title": "Summer Sonic",
    "date": "2026-08-15",
    "area": "Makuhari Messe",
    "comment": "",
    "contact_handle": "nagi_nyan",
}


def _token_from(html):
    match = re.search(r'<code class="delete-token">([0-9a-f]{32})</code>', html)
    assert match is not None
    return match.group(1)


def test_board_lists_posts(client, make_post):
    make_post(title="Fuji Rock", contact_handle="rocker")

    resp = client.get("/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Fuji Rock" in html
    assert 'href="https://x.com/rocker"' in html


def test_board_form_shows_token_once(app, client):
    resp = client.post("/", data=FORM)
    assert resp.status_code == 200
    token = _token_from(resp.get_data(as_text=True))

    # not repeated on the next page load
    assert token not in client.get("/").get_data(as_text=True)

    with app.app_context():
        assert Post.query.count() == 1


def test_board_form_missing_fields_redirects(app, client):
    resp = client.post("/", data={**FORM, "title": ""})
    assert resp.status_code == 302

    with app.app_context():
        assert Post.query.count() == 0


def test_board_delete_with_token(app, client):
    token = _token_from(client.post("/", data=FORM).get_data(as_text=True))
    with app.app_context():
        post_id = Post.query.first().id

    resp = client.post(f"/posts/{post_id}/delete", data={"delete_token": "wrong"})
    assert resp.status_code == 302
    with app.app_context():
        assert db.session.get(Post, post_id) is not None

    resp = client.post(f"/posts/{post_id}/delete", data={"delete_token": token})
    assert resp.status_code == 302
    with app.app_context():
        assert db.session.get(Post, post_id) is None


def test_contact_link_escapes_unusual_handles(client, make_post):
    make_post(contact_handle="<b>odd</b>")
    html = client.get("/").get_data(as_text=True)
    assert "<b>odd</b>" not in html
    assert "&lt;b&gt;odd&lt;/b&gt;" in html
