from sqlalchemy.exc import SQLAlchemyError


class HobbiesException(Exception):
    """base exception for hobbies-specific errors"""
    pass


class ValidationError(HobbiesException):
    """raised when a submission is missing a required field"""
    pass


class StorageConstraintError(HobbiesException):
    """raised when an insert violates a table constraint (e.g. duplicate name)"""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class StorageUnavailableError(HobbiesException):
    """raised when the database cannot be reached or a query fails"""
    pass


def storage_error_detail(error: SQLAlchemyError) -> str:
    """
    human-readable detail for a database error

    postgres drivers expose the constraint detail on `diag`
    (e.g. "Key (name)=(Ada) already exists."), other drivers only have
    the message itself
    """
    orig = getattr(error, "orig", None)
    if orig is None:
        return str(error)

    diag = getattr(orig, "diag", None)
    detail = getattr(diag, "message_detail", None)
    if detail:
        return detail

    message = str(orig).strip()
    return message.splitlines()[0] if message else type(orig).__name__
