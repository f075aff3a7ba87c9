import logging
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from ..db import get_session
from ..errors import AnimalNotFound
from ..middleware.rate_limit import write_rate_limit
from ..models.animal import Animal
from ..repositories.animals import AnimalStore, SqlAnimalStore
from ..schemas.animal import AnimalInput, AnimalOut, MessageOut
from ..utils import apply_changes, build_animal

router = APIRouter()
logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Animal deleted successfully!"

def get_store(session: AsyncSession = Depends(get_session)) -> AnimalStore:
    return SqlAnimalStore(session)

def to_out(animal: Animal) -> AnimalOut:
    return AnimalOut.model_validate(animal)

@router.get("", response_model=list[AnimalOut])
async def list_animals(store: AnimalStore = Depends(get_store)):
    return [to_out(a) for a in await store.find_all()]

@router.get("/{animal_id}", response_model=AnimalOut)
async def get_animal(animal_id: int, store: AnimalStore = Depends(get_store)):
    animal = await store.find_by_id(animal_id)
    if animal is None:
        raise AnimalNotFound(animal_id)
    return to_out(animal)

@router.post(
    "",
    response_model=AnimalOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(write_rate_limit)],
)
async def create_animal(
    payload: AnimalInput,
    response: Response,
    store: AnimalStore = Depends(get_store),
):
    animal = await store.save(build_animal(payload))
    logger.info("Animal %s creado", animal.id)
    response.headers["Location"] = f"/animals/{animal.id}"
    return to_out(animal)

@router.put("/{animal_id}", response_model=AnimalOut, dependencies=[Depends(write_rate_limit)])
async def update_animal(
    animal_id: int,
    payload: AnimalInput,
    store: AnimalStore = Depends(get_store),
):
    animal = await store.find_by_id(animal_id)
    if animal is None:
        raise AnimalNotFound(animal_id)

    # valida sex/size antes de guardar; si falla no se persiste nada
    animal = await store.save(apply_changes(animal, payload))
    logger.info("Animal %s actualizado", animal.id)
    return to_out(animal)

@router.delete("/{animal_id}", response_model=MessageOut, dependencies=[Depends(write_rate_limit)])
async def delete_animal(animal_id: int, store: AnimalStore = Depends(get_store)):
    if not await store.exists_by_id(animal_id):
        raise AnimalNotFound(animal_id)
    await store.delete_by_id(animal_id)
    logger.info("Animal %s eliminado", animal_id)
    return MessageOut(message=DELETED_MESSAGE)
