from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.exceptions import HTTPException
from routes.tasks import bp as tasks_bp
from routes.events import bp as events_bp
from core import state as core_state
from core.errors import StorageWriteError, TaskError
from core.store import JsonFileTaskStore
from config import CONFIG as GLOBAL_CONFIG
from events import reset_events
from logging_setup import setup_logging
import logging

logger = logging.getLogger(__name__)

# Use threading mode to avoid eventlet/gevent on Python 3.13
socketio = SocketIO(async_mode='threading')

def _origins(value):
    if value.strip() == "*":
        return "*"
    return [o.strip() for o in value.split(",") if o.strip()]

def create_app(config=None):
    config = config or GLOBAL_CONFIG
    app = Flask(__name__)
    app.register_blueprint(tasks_bp)
    app.register_blueprint(events_bp)
    origins = _origins(config.CORS_ORIGINS)
    # flask-cors echoes the request Origin for "*" unless told to send the wildcard
    CORS(app, origins=origins, send_wildcard=origins == "*")
    socketio.init_app(app, cors_allowed_origins=origins)

    store = JsonFileTaskStore(config.TASKS_FILE)
    store.ensure_initialized()
    reset_events(config.EVENT_LOG_SIZE)
    core_state.init_globals(config, store, socketio)

    @app.before_request
    def log_request():
        url = request.full_path if request.query_string else request.path
        logger.info("Incoming request: %s %s", request.method, url)
        body = request.get_json(force=True, silent=True)
        if body:
            logger.info("Body: %s", body)

    @app.errorhandler(TaskError)
    def handle_task_error(e):
        if isinstance(e, StorageWriteError):
            logger.error("Request %s %s failed: %s", request.method, request.path, e.message)
        return jsonify({"error": e.message}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code

    return app

if __name__ == "__main__":
    setup_logging(GLOBAL_CONFIG.LOG_LEVEL, GLOBAL_CONFIG.LOG_FILE or None)
    app = create_app()
    logger.info("Server running at http://localhost:%s", GLOBAL_CONFIG.PORT)
    # Werkzeug dev server handles WS in threading mode
    socketio.run(app, host=GLOBAL_CONFIG.HOST, port=GLOBAL_CONFIG.PORT,
                 debug=GLOBAL_CONFIG.DEBUG, allow_unsafe_werkzeug=True)
