# forum/errors.py
# 서비스 계층 예외 -> HTTP 응답 변환
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ForumError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class InvalidInput(ForumError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(ForumError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(ForumError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(ForumError):
    status_code = status.HTTP_409_CONFLICT


class StorageUnavailable(ForumError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def forum_error_handler(request: Request, exc: ForumError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.msg})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 기본 422 대신 400 으로 응답
    errors = exc.errors()
    logger.debug("request validation failed: %s %s -> %s", request.method, request.url.path, errors)
    # body 누락/형식 오류만 필수값 안내, 쿼리 파라미터 등은 일반 메시지
    if any(err.get("loc", ("",))[0] != "body" for err in errors):
        msg = "Invalid request"
    else:
        msg = "Please provide all required information"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"msg": msg})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ForumError, forum_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
