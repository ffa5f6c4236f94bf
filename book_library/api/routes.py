import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from book_library.core import messages
from book_library.core.database import get_db
from book_library.core.messages import format_message
from book_library.models import models
from book_library.repositories.book_repository import BookRepository
from book_library.schemas import schemas
from book_library.services.book_service import BookService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/books", tags=["books"])

# ids are stored as signed 64-bit integers
BookId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


def get_book_service(db: Session = Depends(get_db)) -> BookService:
    return BookService(BookRepository(db))


def ok(message: str, query_result=None) -> schemas.ResponseResult:
    return schemas.ResponseResult(status_code=200, response_message=message, query_result=query_result)


@router.get("/get", response_model=schemas.ResponseResult, response_model_exclude_none=True)
def get_all_books(service: BookService = Depends(get_book_service)):
    books = [schemas.BookOut.model_validate(b) for b in service.find_all()]
    return ok(format_message(messages.BOOK_QUERY_ALL, len(books)), books)


@router.get("/{book_id}", response_model=schemas.ResponseResult, response_model_exclude_none=True)
def get_book(book_id: BookId, service: BookService = Depends(get_book_service)):
    book = schemas.BookOut.model_validate(service.find_by_id(book_id))
    return ok(format_message(messages.BOOK_QUERY_ONE, book_id), [book])


@router.post("/save", response_model=schemas.ResponseResult, response_model_exclude_none=True)
def add_book(book_in: schemas.BookCreate, service: BookService = Depends(get_book_service)):
    book = service.save(models.Book(
        title=book_in.title,
        author=book_in.author,
        total_copies=book_in.total_copies,
        borrowed_copies=book_in.borrowed_copies,
    ))
    logger.info(f"Created book id={book.id} title={book.title}")
    return ok(messages.BOOK_CREATE_SUCCESS)


@router.put("/{book_id}", response_model=schemas.ResponseResult, response_model_exclude_none=True)
def update_book(book_id: BookId, book_upd: schemas.BookUpdate, service: BookService = Depends(get_book_service)):
    service.update(book_id, book_upd)
    return ok(format_message(messages.BOOK_UPDATE_SUCCESS, book_id))


@router.delete("/{book_id}", response_model=schemas.ResponseResult, response_model_exclude_none=True)
def delete_book(book_id: BookId, service: BookService = Depends(get_book_service)):
    service.delete(book_id)
    return ok(format_message(messages.BOOK_DELETED_SUCCESS, book_id))


@router.post("/{book_id}/borrow", response_model=schemas.ResponseResult, response_model_exclude_none=True)
def borrow_book(book_id: BookId, service: BookService = Depends(get_book_service)):
    service.borrow(book_id)
    return ok(format_message(messages.BOOK_BORROW_SUCCESS, book_id))


@router.post("/{book_id}/return", response_model=schemas.ResponseResult, response_model_exclude_none=True)
def return_book(book_id: BookId, service: BookService = Depends(get_book_service)):
    service.return_copy(book_id)
    return ok(format_message(messages.BOOK_RETURN_SUCCESS, book_id))
