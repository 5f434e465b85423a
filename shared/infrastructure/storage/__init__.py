# Storage module
from .local_store import LocalStore

__all__ = ['LocalStore']
