import logging
from typing import List

from book_library.core.exceptions import (
    BookNotFoundError,
    NoAvailableCopiesError,
    NoBorrowedCopiesError,
)
from book_library.core.messages import (
    BOOK_NOT_FOUND,
    NO_AVAILABLE_COPIES,
    NO_BORROWED_COPIES,
    format_message,
)
from book_library.models import models
from book_library.repositories.book_repository import BookRepository

logger = logging.getLogger(__name__)


class BookService:
    """Book inventory rules on top of a ``BookRepository``.

    Borrow and return are the only guarded transitions: ``borrowed_copies``
    moves by one and must stay within ``0..total_copies``. A failed check
    leaves the book untouched and never reaches the repository's ``save``.
    """

    def __init__(self, repository: BookRepository):
        self.repository = repository

    def find_all(self) -> List[models.Book]:
        return self.repository.find_all()

    def find_by_id(self, book_id: int) -> models.Book:
        book = self.repository.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError(format_message(BOOK_NOT_FOUND, book_id))
        return book

    def save(self, book: models.Book) -> models.Book:
        return self.repository.save(book)

    def delete(self, book_id: int) -> None:
        if not self.repository.exists_by_id(book_id):
            raise BookNotFoundError(format_message(BOOK_NOT_FOUND, book_id))
        self.repository.delete_by_id(book_id)
        logger.info(f"Deleted book id={book_id}")

    def borrow(self, book_id: int) -> models.Book:
        book = self.find_by_id(book_id)
        if book.borrowed_copies >= book.total_copies:
            raise NoAvailableCopiesError(format_message(NO_AVAILABLE_COPIES, book_id))
        book.borrowed_copies += 1
        saved = self.repository.save(book)
        logger.info(f"Book {book_id} borrowed ({saved.borrowed_copies}/{saved.total_copies})")
        return saved

    def return_copy(self, book_id: int) -> models.Book:
        book = self.find_by_id(book_id)
        if book.borrowed_copies <= 0:
            raise NoBorrowedCopiesError(format_message(NO_BORROWED_COPIES, book_id))
        book.borrowed_copies -= 1
        saved = self.repository.save(book)
        logger.info(f"Book {book_id} returned ({saved.borrowed_copies}/{saved.total_copies})")
        return saved

    def update(self, book_id: int, new_data) -> models.Book:
        """Overwrite title, author and total_copies of an existing book.

        ``new_data`` is anything exposing those three attributes (a transient
        ``Book`` or a ``BookUpdate``). ``id`` and ``borrowed_copies`` are kept.
        """
        book = self.find_by_id(book_id)
        book.title = new_data.title
        book.author = new_data.author
        book.total_copies = new_data.total_copies
        if book.total_copies < book.borrowed_copies:
            # accepted as-is; outstanding loans are not recalled
            logger.warning(
                f"Book {book_id} now has total_copies={book.total_copies} "
                f"below borrowed_copies={book.borrowed_copies}"
            )
        saved = self.save(book)
        logger.info(f"Updated book id={book_id}")
        return saved
