from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from hotel.schemas import BigIntId


class UserResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: BigIntId
    name: str
    email: str
    whatsapp_number: str
    created_at: datetime
    updated_at: datetime


class UserWriteSchema(BaseModel):
    name: str = Field(min_length=1)
    email: str | None = None
    whatsapp: str = Field(min_length=1)
