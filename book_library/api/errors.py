import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from book_library.core.exceptions import (
    BookLibraryError,
    BookNotFoundError,
    ConcurrentUpdateError,
    NoAvailableCopiesError,
    NoBorrowedCopiesError,
)
from book_library.schemas.schemas import ResponseError

logger = logging.getLogger(__name__)

# further domain errors get mapped by adding them here
STATUS_BY_ERROR = {
    BookNotFoundError: 404,
    NoAvailableCopiesError: 409,
    NoBorrowedCopiesError: 409,
    ConcurrentUpdateError: 409,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    body = ResponseError(status_code=status_code, response_message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def handle_book_library_error(request: Request, exc: BookLibraryError) -> JSONResponse:
    # handlers are matched along the class hierarchy, so subclasses land here too
    status_code = next(STATUS_BY_ERROR[cls] for cls in type(exc).__mro__ if cls in STATUS_BY_ERROR)
    logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return error_response(status_code, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    for error_cls in STATUS_BY_ERROR:
        app.add_exception_handler(error_cls, handle_book_library_error)
