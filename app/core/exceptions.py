from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from .logging import get_logger


logger = get_logger(__name__)


class APIException(Exception):
    
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class KnowledgeBaseNotLoadedException(APIException):
    
    def __init__(self, message: str = "Base de conocimiento no cargada"):
        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )


class KnowledgeBaseException(APIException):
    """Base de conocimiento inválida; el snapshot vigente no cambia."""
    
    def __init__(self, message: str, problems: Optional[list] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details={"problems": problems or []}
        )


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    logger.error(
        f"APIException: {exc.message}",
        extra={"extra_data": {
            "status_code": exc.status_code,
            "details": exc.details,
            "path": request.url.path
        }}
    )
    
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "details": exc.details,
            "path": str(request.url.path)
        }
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    logger.warning(
        f"HTTPException: {exc.detail}",
        extra={"extra_data": {"status_code": exc.status_code, "path": request.url.path}}
    )
    
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "path": str(request.url.path)
        },
        headers=getattr(exc, "headers", None)
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        f"Unhandled exception: {str(exc)}",
        extra={"extra_data": {"path": request.url.path}}
    )
    
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Error interno del servidor",
            "message": str(exc) if logger.getEffectiveLevel() <= 10 else "Contacte al administrador",
            "path": str(request.url.path)
        }
    )
