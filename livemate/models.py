from datetime import datetime, timezone

from livemate.extensions import db


class Post(db.Model):
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    date = db.Column(db.String(32), nullable=False)
    area = db.Column(db.Text, nullable=False)
    comment = db.Column(db.Text, nullable=True)
    contact_handle = db.Column(db.String(128), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, index=True,
                           default=lambda: datetime.now(timezone.utc))

    # sha256 hex of the delete token; written once at insert, never selected for listings
    delete_token_hash = db.Column(db.String(64), nullable=False)

    def __repr__(self):
        return f"<Post {self.id} '{self.title}' {self.date}>"
