class TaskError(Exception):
    """Base for errors that map onto an HTTP status and a {"error": ...} body."""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

class TaskValidationError(TaskError):
    status_code = 400

class TaskNotFoundError(TaskError):
    status_code = 404

    def __init__(self, message="Task not found"):
        super().__init__(message)

class StorageWriteError(TaskError):
    status_code = 500

    def __init__(self, message="Failed to save tasks"):
        super().__init__(message)
