from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Post(BaseModel):
    id: int
    title: str
    content: str
    author: Optional[str] = None
    created_at: datetime


class ErrorResponse(BaseModel):
    error: str
