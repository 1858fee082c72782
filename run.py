import os

from livemate import create_app, db, socketio
from livemate.models import Post


app = create_app()

debug_mode = os.environ.get("FLASK_DEBUG", "0").lower() in {"true", "1", "t", "yes", "y"}


@app.shell_context_processor
def make_shell_context():
    return {"db": db, "Post": Post}


if __name__ == "__main__":
    # local runs only; hosting goes through the WSGI server
    socketio.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug_mode,
                 allow_unsafe_werkzeug=debug_mode)
