# Shared interfaces module
from .exception_handlers import handle_domain_exception
from .notifications import Notification, NotificationLevel, Notifier
from .pagination import PageResult, StandardPagination

__all__ = [
    'handle_domain_exception',
    'Notification',
    'NotificationLevel',
    'Notifier',
    'PageResult',
    'StandardPagination',
]
