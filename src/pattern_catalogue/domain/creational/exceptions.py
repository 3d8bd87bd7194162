"""Creational pattern exceptions."""

from pattern_catalogue.domain.base.exceptions import PatternError, ValidationError


class UnknownProductTypeError(ValidationError):
    """Raised when a factory is asked for a product type it does not map."""

    def __init__(self, product_type: object):
        super().__init__(
            f"Unknown product type: {product_type}",
            "UNKNOWN_PRODUCT_TYPE",
            {"product_type": str(product_type)},
        )
        self.product_type = product_type


class SingletonViolationError(PatternError):
    """Raised when code tries to construct or copy a singleton directly."""

    def __init__(self, class_name: str, operation: str):
        super().__init__(
            f"{class_name} is a singleton and cannot be {operation}; use get_instance()",
            "SINGLETON_VIOLATION",
            {"class": class_name, "operation": operation},
        )
