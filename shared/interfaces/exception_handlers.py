"""
Exception handlers that turn domain exceptions into notifications.
"""
from shared.application import UseCaseResult
from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    BusinessRuleViolationError,
    InvalidOperationError,
    StorageError,
)
from .notifications import Notifier


def handle_domain_exception(exc: DomainException, notifier: Notifier) -> UseCaseResult:
    """Notify the user about ``exc`` and return the matching failed result."""
    if isinstance(exc, ValidationError):
        notifier.error(exc.message, code=exc.code)
        return UseCaseResult.fail(
            exc.message,
            exc.code,
            details={'field': exc.field, 'errors': exc.errors},
        )

    if isinstance(exc, EntityNotFoundError):
        notifier.error(exc.message, code=exc.code)
        return UseCaseResult.fail(
            exc.message,
            exc.code,
            details={'entity': exc.entity_name, 'entity_id': exc.entity_id},
        )

    if isinstance(exc, BusinessRuleViolationError):
        notifier.warning(exc.message, code=exc.code)
        return UseCaseResult.fail(exc.message, exc.code, details={'rule': exc.rule})

    if isinstance(exc, InvalidOperationError):
        notifier.warning(exc.message, code=exc.code)
        return UseCaseResult.fail(
            exc.message,
            exc.code,
            details={'operation': exc.operation, 'state': exc.state},
        )

    if isinstance(exc, StorageError):
        notifier.warning(exc.message, code=exc.code)
        return UseCaseResult.fail(exc.message, exc.code, details={'key': exc.key})

    notifier.error(exc.message, code=exc.code)
    return UseCaseResult.fail(exc.message, exc.code)
