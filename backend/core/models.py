from datetime import datetime, timezone
from typing import Literal, get_args
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from utils.clock import isoformat
import uuid

TaskStatus = Literal["todo", "in-progress", "done"]
STATUSES = get_args(TaskStatus)

def new_id(): return str(uuid.uuid4())

class Task(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id)
    description: str = Field(min_length=1)
    status: TaskStatus = "todo"
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def _updated_after_created(self):
        if self.updated_at < self.created_at:
            raise ValueError("updatedAt precedes createdAt")
        return self

    @field_serializer("created_at", "updated_at")
    def _iso(self, value: datetime) -> str:
        return isoformat(value)

    def to_json(self) -> dict:
        """Wire shape: {id, description, status, createdAt, updatedAt}"""
        return self.model_dump(mode="json", by_alias=True)
