"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ProductException(DomainException):
    """Base exception for product-related errors."""

    pass


class ProductNotFoundError(ProductException):
    """Raised when a product does not exist or is not active."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND")


class ProductAlreadyExistsError(ProductException):
    """Raised when creating a product with an id that is already taken."""

    def __init__(self, message: str = "Product already exists"):
        super().__init__(message, code="PRODUCT_ALREADY_EXISTS")


class InvalidProductUpdateError(ProductException):
    """Raised when a product update carries no changes."""

    def __init__(self, message: str = "Nothing to update"):
        super().__init__(message, code="INVALID_PRODUCT_UPDATE")


class InventoryException(DomainException):
    """Base exception for code inventory errors."""

    pass


class NoStockError(InventoryException):
    """Raised when a product has no available codes left."""

    def __init__(self, message: str = "No codes available"):
        super().__init__(message, code="NO_STOCK")


class ContentionError(InventoryException):
    """Raised when delivery keeps losing races and the retry ceiling is hit."""

    def __init__(self, message: str = "Too much contention, try again later"):
        super().__init__(message, code="CONTENTION")


class CodeNotFoundError(InventoryException):
    """Raised when a code is not found."""

    def __init__(self, message: str = "Code not found"):
        super().__init__(message, code="CODE_NOT_FOUND")


class CodeAlreadyAssignedError(InventoryException):
    """Raised when a code has already been handed out."""

    def __init__(self, message: str = "Code is already assigned"):
        super().__init__(message, code="CODE_ALREADY_ASSIGNED")


class InvalidCodeValueError(InventoryException):
    """Raised when a code string is empty or too long."""

    def __init__(self, message: str = "Invalid code value"):
        super().__init__(message, code="INVALID_CODE_VALUE")


class StoreUnavailableError(DomainException):
    """Raised when the underlying database cannot be reached."""

    def __init__(self, message: str = "Store unavailable"):
        super().__init__(message, code="STORE_UNAVAILABLE")
