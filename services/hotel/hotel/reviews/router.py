from fastapi import APIRouter, Depends

from hotel.reviews.repository import ReviewRepository, get_review_repository
from hotel.reviews.schemas import ReviewRoomSchema, ReviewSchema, ReviewUserSchema

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("", response_model=list[ReviewSchema])
async def get_reviews(repo: ReviewRepository = Depends(get_review_repository)):
    reviews = []
    for review, user, room in await repo.find_all():
        item = ReviewSchema.model_validate(review)
        if user is not None:
            item.user = ReviewUserSchema.model_validate(user)
        if room is not None:
            item.room = ReviewRoomSchema.model_validate(room)
        reviews.append(item)
    return reviews
