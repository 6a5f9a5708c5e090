from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class TodoIn(BaseModel):
    task: Optional[str] = None


class TodoOut(BaseModel):
    id: int
    task: str
    completed: bool = False


class HealthOut(BaseModel):
    status: str
    timestamp: datetime


class ErrorOut(BaseModel):
    error: str
