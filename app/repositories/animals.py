"""
Acceso a datos de animales.

AnimalStore es el contrato que consume el router; SqlAnimalStore lo implementa
sobre una AsyncSession de SQLAlchemy. Cada escritura hace commit por sí misma.
"""
from abc import ABC, abstractmethod
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.animal import Animal


class AnimalStore(ABC):
    @abstractmethod
    async def find_all(self) -> list[Animal]:
        """Todos los animales, por orden de id."""

    @abstractmethod
    async def find_by_id(self, animal_id: int) -> Animal | None:
        ...

    @abstractmethod
    async def exists_by_id(self, animal_id: int) -> bool:
        ...

    @abstractmethod
    async def save(self, animal: Animal) -> Animal:
        """Inserta si no tiene id (y se lo asigna); si lo tiene, sobrescribe."""

    @abstractmethod
    async def delete_by_id(self, animal_id: int) -> None:
        """Borra el registro. Quien llama comprueba antes que existe."""


class SqlAnimalStore(AnimalStore):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self) -> list[Animal]:
        result = await self._session.execute(select(Animal).order_by(Animal.id))
        return list(result.scalars())

    async def find_by_id(self, animal_id: int) -> Animal | None:
        return await self._session.get(Animal, animal_id)

    async def exists_by_id(self, animal_id: int) -> bool:
        stmt = select(Animal.id).where(Animal.id == animal_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, animal: Animal) -> Animal:
        if animal.id is None:
            self._session.add(animal)
        else:
            animal = await self._session.merge(animal)
        await self._session.commit()
        await self._session.refresh(animal)
        return animal

    async def delete_by_id(self, animal_id: int) -> None:
        animal = await self._session.get(Animal, animal_id)
        if animal is None:
            return
        await self._session.delete(animal)
        await self._session.commit()
