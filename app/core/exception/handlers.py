from core.exception.error_codes import ErrorCode
from core.exception.exceptions import ServiceException
from core.log.logging import get_logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = get_logging()


async def service_exception_handler(
    request: Request, exc: ServiceException
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} -> {exc.error_code.name}: "
            f"{exc.message} ({exc.details})"
        )
    else:
        logger.info(
            f"{request.method} {request.url.path} -> {exc.error_code.name}"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "code": exc.error_code.code,
            "details": exc.details,
        },
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # 요청 형식 오류는 422 대신 400 으로 통일
    error_code = ErrorCode.BAD_REQUEST
    logger.info(f"{request.method} {request.url.path} -> invalid request body")
    return JSONResponse(
        status_code=error_code.status_code,
        content={
            "error": error_code.message,
            "code": error_code.code,
            "details": jsonable_encoder(exc.errors()),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    error_code = ErrorCode.INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=error_code.status_code,
        content={
            "error": error_code.message,
            "code": error_code.code,
            "details": str(exc),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
