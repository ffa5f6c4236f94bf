import re

from book_library.core.exceptions import ArgumentMismatchError

# API responses
BOOK_QUERY_ALL = "Total of %d book(s) found"
BOOK_QUERY_ONE = "Book with ID %s is found"
BOOK_CREATE_SUCCESS = "Book is created successfully"
BOOK_UPDATE_SUCCESS = "Book ID %s is updated successfully"
BOOK_DELETED_SUCCESS = "Book with ID %s is deleted successfully."
BOOK_BORROW_SUCCESS = "Book with ID %s is borrowed successfully."
BOOK_RETURN_SUCCESS = "Book with ID %s is returned successfully."

# errors
BOOK_NOT_FOUND = "Book with ID %s not found"
NO_AVAILABLE_COPIES = "No available copies of book with ID %s to borrow"
NO_BORROWED_COPIES = "No borrowed copies of book with ID %s to return"
BOOK_MODIFIED_CONCURRENTLY = "Book with ID %s was modified by another request, please retry"

# full printf-style conversion: %[(key)][flags][width][.precision][length]type
_PLACEHOLDER = re.compile(
    r"%(?:\([^)]*\))?[#0 +\-]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[hlL]?([diouxXeEfFgGcrsa%])"
)


def format_message(template: str, *args) -> str:
    """Substitute the ``%s``/``%d`` placeholders of ``template`` with ``args`` in order.

    ``%%`` is a literal percent sign and does not consume an argument. Other
    printf-style conversions (``%5s``, ``%i``, ``%r`` ...) count as placeholders.

    Raises
    ------
    ArgumentMismatchError
        If the number of placeholders differs from the number of arguments, or
        an argument does not fit its conversion.
    """
    placeholders = sum(1 for m in _PLACEHOLDER.finditer(template) if m.group(1) != "%")
    if placeholders != len(args):
        raise ArgumentMismatchError(
            f"Template {template!r} expects {placeholders} argument(s), got {len(args)}"
        )
    try:
        return template % args
    except (TypeError, ValueError) as exc:
        raise ArgumentMismatchError(f"Template {template!r} cannot be formatted with {args!r}: {exc}") from exc
