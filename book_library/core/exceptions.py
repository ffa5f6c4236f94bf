"""Domain errors raised by the book service.

Every error carries a ready-to-display message with the book id already
interpolated; the exception handlers in ``book_library.api.errors`` send it
back unchanged as the ``response_message`` of the error envelope.
"""


class BookLibraryError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BookNotFoundError(BookLibraryError):
    """No book is stored under the requested id."""


class NoAvailableCopiesError(BookLibraryError):
    """Every copy of the book is already lent out."""


class NoBorrowedCopiesError(BookLibraryError):
    """A return was attempted while no copy is lent out."""


class ConcurrentUpdateError(BookLibraryError):
    """The row changed between load and save (optimistic version check failed)."""


class ArgumentMismatchError(BookLibraryError):
    """A message template got a different number of arguments than it has placeholders."""
