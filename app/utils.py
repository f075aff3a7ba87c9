# app/utils.py
from typing import Any, Dict

from .errors import InvalidEnumValue
from .models.animal import Animal
from .schemas.animal import AnimalInput, Sex, Size

# ==================== Validación de enums ====================

def parse_sex(raw: str) -> Sex:
    sex = Sex.from_label(raw)
    if sex is None:
        raise InvalidEnumValue("sex", raw)
    return sex

def parse_size(raw: str) -> Size:
    size = Size.from_label(raw)
    if size is None:
        raise InvalidEnumValue("size", raw)
    return size

_PARSERS = {"sex": parse_sex, "size": parse_size}

# ==================== Mapeo entrada -> entidad ====================

def normalized_changes(payload: AnimalInput) -> Dict[str, Any]:
    """
    Campos presentes y no nulos del payload, con sex/size ya validados.
    Lanza InvalidEnumValue antes de tocar ninguna entidad.
    """
    changes = payload.present_fields()
    for field, parse in _PARSERS.items():
        if field in changes:
            changes[field] = parse(changes[field])
    return changes

def build_animal(payload: AnimalInput) -> Animal:
    """Entidad nueva, sin id, a partir del payload de alta."""
    return Animal(**normalized_changes(payload))

def apply_changes(animal: Animal, payload: AnimalInput) -> Animal:
    """Sobrescribe solo los campos enviados; el resto conserva su valor."""
    for field, value in normalized_changes(payload).items():
        setattr(animal, field, value)
    return animal
