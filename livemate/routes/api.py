from flask import current_app, jsonify, request

from livemate.routes import bp
from livemate.gate import Decision
from livemate.share import build_share_url
from livemate.socket_events import broadcast_post_created, broadcast_post_deleted
from livemate.store import get_post_store
from livemate.services import create_post, delete_post, list_posts

# caller-visible status and error code per rejected decision
DELETE_ERRORS = {
    Decision.MISSING_CREDENTIAL: (400, "DELETE_TOKEN_REQUIRED"),
    Decision.NOT_FOUND: (404, "NOT_FOUND"),
    Decision.INVALID_CREDENTIAL: (403, "INVALID_DELETE_TOKEN"),
}


@bp.route('/api/posts', methods=['GET'])
def api_list_posts():
    posts = list_posts(get_post_store())
    return jsonify({"ok": True, "posts": [p.to_dict() for p in posts]})


@bp.route('/api/posts', methods=['POST'])
def api_create_post():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    result = create_post(
        get_post_store(),
        title=str(data.get('title') or ''),
        date=str(data.get('date') or ''),
        area=str(data.get('area') or ''),
        comment=str(data.get('comment') or ''),
        contact_handle=str(
            data.get('contact_handle') or data.get('x_username') or data.get('xUsername') or ''
        ),
    )

    if not result.created:
        return jsonify({"ok": False, "error": "REQUIRED_FIELDS"}), 400

    broadcast_post_created(result.post)
    share_url = build_share_url(
        result.post,
        site_url=current_app.config.get("SITE_URL") or request.host_url,
        hashtag=current_app.config.get("SHARE_HASHTAG", ""),
    )
    return jsonify({
        "ok": True,
        "post": result.post.to_dict(),
        "delete_token": result.delete_token,
        "share_url": share_url,
    }), 201


@bp.route('/api/posts/<post_id>', methods=['DELETE'])
def api_delete_post(post_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    token = data.get('delete_token') or data.get('deleteToken') or ''

    result = delete_post(get_post_store(), post_id=post_id, delete_token=str(token))

    if result.deleted:
        broadcast_post_deleted(int(post_id))
        return jsonify({"ok": True})

    status, code = DELETE_ERRORS[result.reason]
    return jsonify({"ok": False, "error": code}), status
