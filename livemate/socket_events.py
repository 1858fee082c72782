from flask_socketio import join_room, leave_room
from . import socketio

BOARD_ROOM = 'board'

@socketio.on('join_board')
def on_join_board(data=None):
    join_room(BOARD_ROOM)

@socketio.on('leave_board')
def on_leave_board(data=None):
    leave_room(BOARD_ROOM)


def broadcast_post_created(post):
    socketio.emit('post_created', post.to_dict(), to=BOARD_ROOM)

def broadcast_post_deleted(post_id):
    socketio.emit('post_deleted', {'id': post_id}, to=BOARD_ROOM)
