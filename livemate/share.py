from __future__ import annotations

from urllib.parse import urlencode

from livemate.store import PublicPost

INTENT_URL = "https://twitter.com/intent/tweet"


def build_share_text(post: PublicPost, hashtag: str = "#推し活") -> str:
    """Announcement text for X. Never contains the delete token."""
    lines = [
        "同行者募集🎤",
        f"【ライブ】{post.title}",
        f"【日程】{post.date}",
        f"【会場】{post.area}",
    ]
    if post.comment:
        lines.append(f"【ひとこと】{post.comment}")
    if hashtag:
        lines.append(hashtag)
    return "\n".join(lines)


def build_share_url(post: PublicPost, site_url: str = "", hashtag: str = "#推し活") -> str:
    params = {"text": build_share_text(post, hashtag=hashtag)}
    if site_url:
        params["url"] = site_url
    return f"{INTENT_URL}?{urlencode(params)}"
