from datetime import date

from flask import render_template, flash, redirect, url_for, request, current_app

from livemate.routes import bp
from livemate.gate import Decision
from livemate.share import build_share_url
from livemate.socket_events import broadcast_post_created, broadcast_post_deleted
from livemate.store import get_post_store
from livemate.services import create_post, delete_post, list_posts


def _render_board(**context):
    return render_template(
        'board.html',
        posts=list_posts(get_post_store()),
        today=date.today().isoformat(),
        **context
    )


@bp.route('/', methods=['GET', 'POST'])
def board():
    """Recruitment form and the list of posts"""
    if request.method == 'GET':
        return _render_board()

    result = create_post(
        get_post_store(),
        title=request.form.get('title', ''),
        date=request.form.get('date', ''),
        area=request.form.get('area', ''),
        comment=request.form.get('comment', ''),
        contact_handle=request.form.get('contact_handle') or request.form.get('x_username') or '',
    )

    if not result.created:
        flash('Live name, date, venue and X username are required.', 'danger')
        return redirect(url_for('routes.board'))

    broadcast_post_created(result.post)

    # the token is shown once in this response only, never stored in the session
    share_url = build_share_url(
        result.post,
        site_url=current_app.config.get("SITE_URL") or request.host_url,
        hashtag=current_app.config.get("SHARE_HASHTAG", ""),
    )
    return _render_board(created_post=result.post, delete_token=result.delete_token, share_url=share_url)


@bp.route('/posts/<post_id>/delete', methods=['POST'])
def delete_post_route(post_id):
    result = delete_post(
        get_post_store(),
        post_id=post_id,
        delete_token=request.form.get('delete_token', ''),
    )

    if result.deleted:
        broadcast_post_deleted(int(post_id))
        flash('Post deleted.', 'success')
    elif result.reason == Decision.MISSING_CREDENTIAL:
        flash('Enter the delete key for this post.', 'warning')
    elif result.reason == Decision.INVALID_CREDENTIAL:
        flash('Wrong delete key.', 'danger')
    else:
        flash('Post not found.', 'danger')

    return redirect(url_for('routes.board'))
