from collections import deque

# Recent task events, served by GET /events. Payloads are task JSON
# (or {"id": ...} for task.deleted).
_EVENT_LOG = deque(maxlen=2000)

def reset_events(maxlen=2000):
    global _EVENT_LOG
    _EVENT_LOG = deque(maxlen=maxlen)

def forget_task(task_id):
    """Drop logged events for a task so its content is not served after deletion"""
    kept = [rec for rec in _EVENT_LOG if rec["payload"].get("id") != task_id]
    _EVENT_LOG.clear()
    _EVENT_LOG.extend(kept)

def emit_event(socketio, event_type, payload):
    rec = {"type": event_type, "payload": payload}
    _EVENT_LOG.append(rec)
    socketio.emit(event_type, payload)  # default namespace '/'

def dump_events(limit=200):
    # newest last
    start = max(0, len(_EVENT_LOG) - max(limit, 0))
    return list(_EVENT_LOG)[start:]
