# Process-wide wiring, filled in by create_app(). No lock: every request runs
# its own load/modify/save cycle against STORE, so concurrent writers can
# overwrite each other (lost update).
STORE = None
CONFIG = None
SOCKETIO = None

def init_globals(config, store, socketio):
    global CONFIG, STORE, SOCKETIO
    CONFIG = config
    STORE = store
    SOCKETIO = socketio
