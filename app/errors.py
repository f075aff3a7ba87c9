"""
Errores del dominio y su traducción a respuestas HTTP.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AnimalNotFound(Exception):
    def __init__(self, animal_id: int):
        self.animal_id = animal_id
        super().__init__("Animal not found")


class InvalidEnumValue(Exception):
    """sex o size no coincide con ninguna etiqueta permitida."""

    def __init__(self, field: str, raw: str):
        self.field = field
        self.raw = raw
        super().__init__(f"Invalid {field}: {raw}")


async def _not_found_handler(request: Request, exc: AnimalNotFound) -> JSONResponse:
    logger.warning("Animal %s no encontrado (%s %s)", exc.animal_id, request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def _invalid_enum_handler(request: Request, exc: InvalidEnumValue) -> JSONResponse:
    logger.warning("Valor inválido para %s: %r", exc.field, exc.raw)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AnimalNotFound, _not_found_handler)
    app.add_exception_handler(InvalidEnumValue, _invalid_enum_handler)
