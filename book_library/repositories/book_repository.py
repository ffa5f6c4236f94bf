import logging
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from book_library.core.exceptions import ConcurrentUpdateError
from book_library.core.messages import BOOK_MODIFIED_CONCURRENTLY, format_message
from book_library.models import models

logger = logging.getLogger(__name__)


class BookRepository:
    """Keyed store of ``Book`` rows backed by a SQLAlchemy session.

    Each write commits immediately; there is no transaction spanning
    several calls.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[models.Book]:
        return self.db.query(models.Book).order_by(models.Book.id).all()

    def find_by_id(self, book_id: int) -> Optional[models.Book]:
        return self.db.query(models.Book).filter(models.Book.id == book_id).first()

    def exists_by_id(self, book_id: int) -> bool:
        return self.db.query(models.Book.id).filter(models.Book.id == book_id).first() is not None

    def save(self, book: models.Book) -> models.Book:
        book_id = book.id
        self.db.add(book)
        try:
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            logger.warning(f"Stale write rejected for book id={book_id}")
            raise ConcurrentUpdateError(format_message(BOOK_MODIFIED_CONCURRENTLY, book_id))
        self.db.refresh(book)
        return book

    def delete_by_id(self, book_id: int) -> None:
        self.db.query(models.Book).filter(models.Book.id == book_id).delete()
        self.db.commit()
