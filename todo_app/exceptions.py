from typing import Optional


class TodoError(Exception):
    status_code = 500
    message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(TodoError):
    status_code = 400
    message = "Task is required"


class NotFound(TodoError):
    status_code = 404
    message = "Todo not found"
