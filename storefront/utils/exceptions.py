class StorefrontError(Exception):
    """Base exception for the project."""

class DataLoadError(StorefrontError):
    """Raised when the product catalog cannot be loaded or a record is malformed."""

class InvalidInputError(StorefrontError, TypeError):
    """Raised when the ranking engine is called with arguments of the wrong shape."""

class ProductNotFoundError(StorefrontError, KeyError):
    """Raised when a product id or slug does not exist in the catalog."""
