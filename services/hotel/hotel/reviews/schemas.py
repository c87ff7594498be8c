from datetime import datetime

from pydantic import BaseModel, ConfigDict

from hotel.schemas import BigIntId


class ReviewUserSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: BigIntId
    name: str


class ReviewRoomSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    room_id: BigIntId
    room_name: str


class ReviewSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    review_id: BigIntId
    user_id: BigIntId | None = None
    room_id: BigIntId | None = None
    rating: int
    comment: str | None = None
    created_at: datetime
    user: ReviewUserSchema | None = None
    room: ReviewRoomSchema | None = None
