import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError

from bingo.api.v1.endpoints import api_router
from bingo.core.config import settings
from bingo.core.error import BingoDomainError, DomainErrorCode, ErrorKind
from bingo.core.logging_config import configure_logging
from bingo.schemas.common import BaseResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="A FastAPI backend for multiplayer bingo rooms",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info("%s started", settings.PROJECT_NAME)


@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> BaseResponse:
    return BaseResponse(message="healthy")


ERROR_KIND_STATUS_CODES = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.EXHAUSTED: status.HTTP_409_CONFLICT,
    ErrorKind.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _domain_error_response(exc: BingoDomainError) -> JSONResponse:
    status_code = ERROR_KIND_STATUS_CODES.get(
        exc.kind,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {
                "detail": exc.message,
                "code": exc.code,
                "kind": exc.kind,
                "error_details": exc.details,
            }
        ),
    )


@app.exception_handler(BingoDomainError)
async def bingo_domain_error_handler(
    _request: Request,
    exc: BingoDomainError,
) -> JSONResponse:
    return _domain_error_response(exc)


@app.exception_handler(OperationalError)
@app.exception_handler(InterfaceError)
async def storage_error_handler(
    request: Request,
    exc: OperationalError | InterfaceError,
) -> JSONResponse:
    logger.error("Storage backend error on %s: %s", request.url.path, exc.orig)
    return _domain_error_response(
        BingoDomainError(
            code=DomainErrorCode.STORAGE_UNAVAILABLE,
            message="Storage backend is unavailable",
        )
    )
