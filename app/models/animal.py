from typing import Optional
from sqlalchemy import Enum as SAEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..db import Base
from ..schemas.animal import Sex, Size


class Animal(Base):
    """Animal en adopción. El id lo asigna la base de datos al insertar."""

    __tablename__ = "animals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    species: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)
    breed: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)
    sex: Mapped[Optional[Sex]] = mapped_column(SAEnum(Sex, native_enum=False, length=16), nullable=True)
    approximate_age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    size: Mapped[Optional[Size]] = mapped_column(SAEnum(Size, native_enum=False, length=16), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<Animal id={self.id} species={self.species!r}>"
