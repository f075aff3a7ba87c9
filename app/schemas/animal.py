from enum import Enum
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class Sex(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    # etiquetas originales del refugio
    MACHO = "MACHO"
    FEMEA = "FEMEA"

    @classmethod
    def from_label(cls, raw: str) -> Optional["Sex"]:
        return _SEX_BY_LABEL.get(raw.upper())


class Size(str, Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    PEQUENO = "PEQUENO"
    MEDIO = "MEDIO"
    GRANDE = "GRANDE"

    @classmethod
    def from_label(cls, raw: str) -> Optional["Size"]:
        return _SIZE_BY_LABEL.get(raw.upper())


_SEX_BY_LABEL = {m.value: m for m in Sex}
_SIZE_BY_LABEL = {m.value: m for m in Size}


class _CamelModel(BaseModel):
    # en el JSON: approximateAge, imageUrl; también se aceptan en snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnimalInput(_CamelModel):
    """
    Payload de alta y de actualización parcial.
    sex/size llegan como texto libre y se validan al mapear a la entidad.
    """
    species: Optional[str] = None
    breed: Optional[str] = None
    sex: Optional[str] = None
    approximate_age: Optional[int] = None
    size: Optional[str] = None
    image_url: Optional[str] = None

    def present_fields(self) -> dict:
        """
        Campos enviados en el body con valor no nulo.
        Un campo ausente y uno con null explícito significan lo mismo: no cambiar.
        """
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }


class AnimalOut(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    species: Optional[str] = None
    breed: Optional[str] = None
    sex: Optional[Sex] = None
    approximate_age: Optional[int] = None
    size: Optional[Size] = None
    image_url: Optional[str] = None


class MessageOut(BaseModel):
    message: str
