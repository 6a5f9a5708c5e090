"""Process-local todo storage.

Nothing here is persisted; a new ``TodoStore`` starts empty (or seeded) and
everything is gone when the process exits.
"""

import logging
from itertools import count
from typing import Iterable, List, Optional

from .exceptions import NotFound, ValidationError
from .models import TodoOut

logger = logging.getLogger(__name__)

DEFAULT_TASKS = ("Learn DevSecOps", "Setup Jenkins Pipeline")


class TodoStore:
    """Ordered in-memory collection of todos.

    Ids come from a counter that only moves forward, so an id is never handed
    out twice even after the todo holding it is deleted.
    """

    def __init__(self, tasks: Optional[Iterable[str]] = None):
        self._todos: List[TodoOut] = []
        self._next_id = count(1)
        for task in tasks or ():
            self.create(task)

    @classmethod
    def seeded(cls) -> "TodoStore":
        return cls(DEFAULT_TASKS)

    def __len__(self) -> int:
        return len(self._todos)

    def list(self) -> List[TodoOut]:
        return list(self._todos)

    def get(self, todo_id: int) -> TodoOut:
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        raise NotFound()

    def create(self, task) -> TodoOut:
        if not isinstance(task, str) or not task.strip():
            raise ValidationError()
        todo = TodoOut(id=next(self._next_id), task=task.strip(), completed=False)
        self._todos.append(todo)
        logger.info("Created todo %d", todo.id)
        return todo

    def delete(self, todo_id: int) -> bool:
        for i, todo in enumerate(self._todos):
            if todo.id == todo_id:
                del self._todos[i]
                logger.info("Deleted todo %d", todo_id)
                return True
        raise NotFound()
