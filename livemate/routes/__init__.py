from flask import Blueprint, current_app, jsonify, request
import re
from markupsafe import Markup, escape

from livemate.store import StoreError

bp = Blueprint('routes', __name__)

# X handles: letters, digits and underscore, up to 15 chars
HANDLE_PATTERN = re.compile(r'^@([A-Za-z0-9_]{1,15})$')

@bp.app_template_filter('contact_link')
def contact_link_filter(handle):
    """Render an @handle as a link to the X profile"""
    if not handle:
        return ''

    match = HANDLE_PATTERN.match(handle)
    if not match:
        return escape(handle)

    username = match.group(1)
    return Markup(
        f'<a href="https://x.com/{username}" class="contact" '
        f'target="_blank" rel="noopener noreferrer">@{escape(username)}</a>'
    )

@bp.app_errorhandler(StoreError)
def handle_store_error(exc):
    current_app.logger.exception("post store failure")
    if request.path.startswith('/api/'):
        return jsonify({"ok": False, "error": "INTERNAL_ERROR"}), 500
    return "Internal error", 500

# imports at the end so bp already exists
from livemate.routes import api, board  # noqa: E402,F401
