"""
Pydantic schemas for the todos API.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_TASK_ID = 2**64 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class Todo(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int = Field(..., ge=0, le=MAX_TASK_ID)
    text: str
    completed: bool


class Post(BaseModel):
    """A post relayed from the upstream API."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    user_id: int = Field(..., alias="userId", ge=INT32_MIN, le=INT32_MAX)
    id: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    title: str
    body: str
