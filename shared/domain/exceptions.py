"""
Domain exceptions.
"""
from typing import Dict, List, Optional


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code="ENTITY_NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """
    Raised when validation fails.

    ``errors`` maps every failing field to its messages so that callers can
    report all problems at once instead of stopping at the first one.
    """

    def __init__(
        self,
        message: str,
        field: str = None,
        errors: Optional[Dict[str, List[str]]] = None,
    ):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field
        self.errors = errors or ({field: [message]} if field else {})

    @property
    def fields(self) -> List[str]:
        """Names of the fields that failed validation."""
        return list(self.errors.keys())


class BusinessRuleViolationError(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str, rule: str = None):
        super().__init__(message=message, code="BUSINESS_RULE_VIOLATION")
        self.rule = rule


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None):
        super().__init__(message=message, code="INVALID_OPERATION")
        self.operation = operation
        self.state = state


class StorageError(DomainException):
    """Raised when the persistent store cannot read or write a key."""

    def __init__(self, key: str, reason: str = ""):
        super().__init__(
            message=f"Storage failure for '{key}': {reason}" if reason else f"Storage failure for '{key}'",
            code="STORAGE_ERROR"
        )
        self.key = key
        self.reason = reason
