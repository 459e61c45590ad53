# shop/domain/errors.py


class ShopError(Exception):
    """Bazowy blad domenowy; `code` trafia do odpowiedzi API."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ShopError):
    code = "BAD_USER_INPUT"


class NotFoundError(ShopError):
    code = "NOT_FOUND"


class ConflictError(ShopError):
    code = "CONFLICT"


class ForeignKeyError(NotFoundError, ValidationError):
    """Rodzic (user / order) wskazany przy zapisie nie istnieje."""

    code = "FOREIGN_KEY_VIOLATION"
