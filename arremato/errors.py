
# ARREMATO/backend/arremato/errors.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from arremato.config import is_production
import logging

logger = logging.getLogger(__name__)


class ArrematoError(Exception):
    """Erreur métier traduite en réponse HTTP par les handlers ci-dessous"""
    status_code = 500
    envelope_key = "error"

    def __init__(self, message: str, envelope_key: str = None):
        super().__init__(message)
        self.message = message
        if envelope_key:
            self.envelope_key = envelope_key


class ValidationFailed(ArrematoError):
    status_code = 400


class AuthenticationFailed(ArrematoError):
    status_code = 401
    envelope_key = "message"


class PermissionDenied(ArrematoError):
    status_code = 403


class ResourceNotFound(ArrematoError):
    status_code = 404


class StoreError(ArrematoError):
    status_code = 500


def _readable_validation_message(exc: RequestValidationError) -> str:
    """Premier message de validation pydantic, préfixé par le champ concerné"""
    errors = exc.errors()
    if not errors:
        return "Requête invalide."
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = first.get("msg", "invalid value")
    if location:
        return f'O campo "{".".join(location)}" é inválido: {message}'
    return message


def _envelope(exc: ArrematoError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={exc.envelope_key: exc.message})


def _internal_message(exc: Exception) -> str:
    # le détail de l'exception ne sort pas en production
    if is_production():
        return "Erro interno do servidor."
    return str(exc) or exc.__class__.__name__


def register_exception_handlers(app: FastAPI):
    """Branche la taxonomie d'erreurs sur l'application"""

    @app.exception_handler(ArrematoError)
    async def handle_arremato_error(request: Request, exc: ArrematoError):
        return _envelope(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _readable_validation_message(exc)})

    @app.exception_handler(IntegrityError)
    async def handle_integrity_error(request: Request, exc: IntegrityError):
        logger.warning(f"⚠️ Écriture refusée par la base ({request.method} {request.url.path}): {exc.orig}")
        return JSONResponse(status_code=400, content={"error": str(exc.orig)})

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError):
        logger.exception(f"❌ Erreur de base de données ({request.method} {request.url.path})")
        return _envelope(StoreError(_internal_message(exc)))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"❌ Erreur inattendue ({request.method} {request.url.path})")
        return _envelope(StoreError(_internal_message(exc)))
