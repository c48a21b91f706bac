# app/core/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Error base: cada subclase sabe con qué código HTTP responder."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    # Falta un campo requerido o viene vacío
    status_code = 400


class NotFoundError(CatalogError):
    status_code = 404


class StoreFault(CatalogError):
    # Fallo de conexión o de consulta en la base de datos
    status_code = 500


class MediaFault(CatalogError):
    # Fallo al escribir/borrar un archivo de imagen
    status_code = 500


async def catalog_error_handler(request: Request, exc: CatalogError):
    if exc.status_code >= 500:
        logger.error(f"Error en {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Cuerpo mal formado: respondemos 400 con un mensaje legible, no el 422 de FastAPI
    errors = exc.errors()
    if errors:
        first = errors[0]
        campo = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "path", "query"))
        message = f"Campo inválido '{campo}': {first.get('msg')}" if campo else str(first.get("msg"))
    else:
        message = "Petición inválida."
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_error_handler(request: Request, exc: Exception):
    # Último recurso: cualquier otro fallo también sale como {"error": ...}
    logger.exception(f"Error inesperado en {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc) or type(exc).__name__})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
