from fastapi import APIRouter, Depends

from hotel.users.repository import UserRepository, get_user_repository
from hotel.users.schemas import UserResponseSchema, UserWriteSchema

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponseSchema])
async def get_users(repo: UserRepository = Depends(get_user_repository)):
    return await repo.find_all()


@router.post("", status_code=201, response_model=UserResponseSchema)
async def create_user(data: UserWriteSchema, repo: UserRepository = Depends(get_user_repository)):
    user = await repo.create(data.name, data.email, data.whatsapp)
    await repo.db.commit()
    return user


@router.patch("/{user_id}", response_model=UserResponseSchema)
async def update_user(
    user_id: int,
    data: UserWriteSchema,
    repo: UserRepository = Depends(get_user_repository)
):
    user = await repo.update(user_id, data.name, data.email, data.whatsapp)
    await repo.db.commit()
    return user
