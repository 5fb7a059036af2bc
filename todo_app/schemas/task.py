from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator


def _task_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Task name cannot be empty.")
    return v.strip()


class TaskCreate(BaseModel):
    name: str
    category_name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return _task_name(v)

    @field_validator("category_name")
    @classmethod
    def category_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Category name cannot be empty.")
        return v.strip()


class TaskRename(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return _task_name(v)


class TaskOut(BaseModel):
    id: int
    task_name: str
    status_id: int
    user_id: int
    category_id: int
    created_date: datetime
    updated_date: datetime

    model_config = ConfigDict(from_attributes=True)


class TaskView(BaseModel):
    """A task joined with its owner, status and category names."""

    id: int
    username: Optional[str] = None
    task_name: str
    status_name: Optional[str] = None
    category_name: Optional[str] = None
    created_date: datetime
    updated_date: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryOut(BaseModel):
    id: int
    category_name: str
    display_name: str

    model_config = ConfigDict(from_attributes=True)


class StatusOut(BaseModel):
    id: int
    status_name: str
    display_name: str

    model_config = ConfigDict(from_attributes=True)
