import re
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from .exceptions import NotFound
from .models import ErrorOut, HealthOut, TodoIn, TodoOut
from .store import TodoStore

router = APIRouter()

TODO_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_store(request: Request) -> TodoStore:
    return request.app.state.store


@router.get("/api/todos", response_model=List[TodoOut])
async def list_todos(store: TodoStore = Depends(get_store)):
    """Return all to-do items"""
    return store.list()


@router.post(
    "/api/todos",
    response_model=TodoOut,
    status_code=201,
    responses={400: {"model": ErrorOut}},
)
async def create_todo(todo: TodoIn, store: TodoStore = Depends(get_store)):
    return store.create(todo.task)


@router.delete(
    "/api/todos/{todo_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": ErrorOut}},
)
async def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    # a non-numeric id can never match, so it is a miss rather than a bad request
    todo_id = todo_id.strip()
    if not TODO_ID_PATTERN.fullmatch(todo_id):
        raise NotFound()
    numeric_id = int(todo_id)
    store.delete(numeric_id)
    return Response(status_code=204)


@router.get("/health", response_model=HealthOut)
async def health():
    return HealthOut(status="OK", timestamp=datetime.now(timezone.utc))
