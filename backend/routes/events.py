from flask import Blueprint, request, jsonify
from events import dump_events

bp = Blueprint("events", __name__)

@bp.get("/events")
def get_events():
    """Recent task events, oldest first. ?limit=N (default 200)"""
    limit = request.args.get("limit", default=200, type=int)
    return jsonify({"events": dump_events(limit)})
