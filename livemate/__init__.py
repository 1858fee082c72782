from flask_socketio import SocketIO
from flask import Flask
from config import Config
from livemate.extensions import db, migrate
from livemate.store import build_post_store

socketio = SocketIO(cors_allowed_origins="*")

def create_app(config_class=Config):
    from . import socket_events  # noqa
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    socketio.init_app(
        flask_app,
        async_mode=flask_app.config.get("SOCKETIO_ASYNC_MODE", "threading")
    )
    is_dev = flask_app.config.get("IS_DEV", False)

    if not is_dev and not flask_app.config.get("TESTING", False):
        if not flask_app.config.get("SECRET_KEY"):
            raise RuntimeError("SECRET_KEY is not set")
        if not flask_app.config.get("SQLALCHEMY_DATABASE_URI"):
            raise RuntimeError("DATABASE_URL is not set")
        flask_app.config["AUTO_CREATE_DB"] = False

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)

    # dev only: auto create tables when migrations are not in use
    if flask_app.config.get("AUTO_CREATE_DB", False):
        try:
            with flask_app.app_context():
                from . import models  # noqa: F401  (registers the models in metadata)

                from sqlalchemy import inspect
                engine = db.engine
                inspector = inspect(engine)
                tables = inspector.get_table_names()

                if not tables:
                    flask_app.logger.warning("AUTO_CREATE_DB=1: creating tables (empty db).")
                    db.create_all()

                    inspector = inspect(engine)
                    flask_app.logger.warning(f"AUTO_CREATE_DB: tables now: {inspector.get_table_names()}")
        except Exception:
            flask_app.logger.exception("AUTO_CREATE_DB: error creating tables.")

    backend = flask_app.config.get("POST_STORE_BACKEND", "sqlalchemy")
    flask_app.extensions["post_store"] = build_post_store(backend)
    flask_app.logger.info("post store backend: %s", backend)

    from livemate.routes import bp as main_bp
    flask_app.register_blueprint(main_bp)

    return flask_app
