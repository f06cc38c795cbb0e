from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserPayload(BaseModel):
    """Create/update body. Field rules are applied by the service layer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    first_name: str
    last_name: str
    email: str
    date: datetime | None = None


class SuccessResponse(BaseModel):
    success: str


class MessageResponse(BaseModel):
    msg: str
