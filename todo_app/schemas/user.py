from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_validator


class UserCreate(BaseModel):
    name: str
    password: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Username cannot be empty.")
        return v.strip()

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        # blank is rejected, but the password itself is kept exactly as typed
        if not v or not v.strip():
            raise ValueError("Password cannot be empty.")
        return v


class UserOut(BaseModel):
    id: int
    name: str
    created_date: datetime

    model_config = ConfigDict(from_attributes=True)
