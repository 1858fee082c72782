import os
from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, '.env'))

def _resolve_sqlite_path(uri: str, project_root: str) -> str:
    """Convert relative SQLite URI to absolute path.

    Args:
        uri: SQLite URI like 'sqlite:///instance/livemate.db'
        project_root: Absolute path to project root directory

    Returns:
        Absolute SQLite URI like 'sqlite:////srv/livemate/instance/livemate.db'
    """
    if not uri.startswith('sqlite:///') or uri == 'sqlite:///:memory:':
        return uri

    relative_path = uri[10:]  # strip 'sqlite:///'
    if os.path.isabs(relative_path):
        return uri

    absolute_path = os.path.abspath(os.path.join(project_root, relative_path))

    # instance dir must exist before the first SQLAlchemy connection
    instance_dir = os.path.dirname(absolute_path)
    if instance_dir and not os.path.exists(instance_dir):
        os.makedirs(instance_dir, exist_ok=True)

    # SQLite expects forward slashes, even on Windows
    absolute_path = absolute_path.replace('\\', '/')

    return f'sqlite:///{absolute_path}'


class Config:
    # Compute IS_DEV once
    _env = os.environ.get("FLASK_ENV") or os.environ.get("ENV") or "production"
    IS_DEV = str(_env).lower() in {"development", "dev"}

    # In production SECRET_KEY must be set.
    # In development we allow a fallback to avoid breaking local runs.
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY and IS_DEV:
        SECRET_KEY = "dev-secret-key"

    SQLALCHEMY_DATABASE_URI = _resolve_sqlite_path(
        os.environ.get('DATABASE_URL', 'sqlite:///instance/livemate.db'),
        basedir,
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_DB = os.environ.get("AUTO_CREATE_DB", "0") == "1"

    # "sqlalchemy" or "memory"
    POST_STORE_BACKEND = os.environ.get("POST_STORE_BACKEND", "sqlalchemy")

    SOCKETIO_ASYNC_MODE = os.environ.get("SOCKETIO_ASYNC_MODE", "threading")

    SITE_URL = os.environ.get("SITE_URL", "")
    SHARE_HASHTAG = os.environ.get("SHARE_HASHTAG", "#推し活")
