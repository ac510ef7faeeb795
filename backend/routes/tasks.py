from flask import Blueprint, request, jsonify
from core import state
from core import tasks as task_service
from events import emit_event, forget_task

bp = Blueprint("tasks", __name__)

def _body():
    # absent, unparsable or non-object bodies count as {}
    data = request.get_json(force=True, silent=True)
    return data if isinstance(data, dict) else {}

@bp.post("/tasks")
def create_task():
    t = task_service.create_task(state.STORE, _body())
    emit_event(state.SOCKETIO, "task.created", t.to_json())
    return jsonify(t.to_json()), 201

@bp.get("/tasks")
def list_tasks():
    """GET /tasks or GET /tasks?status=done"""
    tasks = task_service.list_tasks(state.STORE, request.args.get("status"))
    return jsonify([t.to_json() for t in tasks])

@bp.put("/tasks/<task_id>")
def update_task(task_id):
    t = task_service.update_task(state.STORE, task_id, _body())
    emit_event(state.SOCKETIO, "task.updated", t.to_json())
    return jsonify(t.to_json())

@bp.patch("/tasks/<task_id>/status")
def set_status(task_id):
    t = task_service.set_status(state.STORE, task_id, _body().get("status"))
    emit_event(state.SOCKETIO, "task.updated", t.to_json())
    return jsonify(t.to_json())

@bp.delete("/tasks/<task_id>")
def delete_task(task_id):
    task_service.delete_task(state.STORE, task_id)
    forget_task(task_id)
    emit_event(state.SOCKETIO, "task.deleted", {"id": task_id})
    return "", 204
