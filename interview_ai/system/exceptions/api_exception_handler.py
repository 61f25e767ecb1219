import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from interview_ai.system.exceptions.base_exception import BaseHTTPException

logger = logging.getLogger(__name__)


async def common_exception_handler(request: Request, exc: BaseHTTPException) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "path": request.url.path}
    )
