from fastapi import APIRouter, Depends

from hotel.offers.repository import OfferRepository, get_offer_repository
from hotel.offers.schemas import SOffers, SOfferRoom, SOfferWithRoom, SOfferCreate, SOfferUpdate


router = APIRouter(
    prefix="/offers",
    tags=["Offers"]
)


def _with_room(offer, room) -> SOfferWithRoom:
    result = SOfferWithRoom.model_validate(offer)
    if room is not None:
        result.room = SOfferRoom.model_validate(room)
    return result


@router.get("")
async def get_offers(repo: OfferRepository = Depends(get_offer_repository)) -> list[SOfferWithRoom]:
    return [_with_room(offer, room) for offer, room in await repo.find_all()]


@router.get("/{offer_id}")
async def get_offer(offer_id: int, repo: OfferRepository = Depends(get_offer_repository)) -> SOfferWithRoom:
    offer, room = await repo.find_by_id(offer_id)
    return _with_room(offer, room)


@router.post("", status_code=201)
async def create_offer(data: SOfferCreate, repo: OfferRepository = Depends(get_offer_repository)) -> SOffers:
    return await repo.create(data)


@router.patch("/{offer_id}")
async def update_offer(
    offer_id: int,
    data: SOfferUpdate,
    repo: OfferRepository = Depends(get_offer_repository)
) -> SOffers:
    return await repo.update(offer_id, data)


@router.delete("/{offer_id}")
async def delete_offer(offer_id: int, repo: OfferRepository = Depends(get_offer_repository)):
    await repo.delete(offer_id)
    return {"status": "success", "offer_id": str(offer_id)}
