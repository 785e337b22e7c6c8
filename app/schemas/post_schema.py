from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone


# Fields are optional so a missing value reaches the service and is reported
# with the API's own validation message instead of a parser error.
class PostCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None


# Only the fields the client actually sent end up in model_fields_set;
# an explicit null or false is still "sent".
class PostUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    published: Optional[bool] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ResponsePost(BaseModel):
    id: int
    title: str
    content: str
    author: str
    published: bool
    created_at: datetime
    updated_at: datetime

    # createdAt / updatedAt on the wire
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    # SQLite hands timestamps back without an offset; they are stored as UTC.
    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
