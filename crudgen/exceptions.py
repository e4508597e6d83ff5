"""
Exception types raised around the update mutation surface.

The update pipeline itself never catches or wraps these: collaborators raise
them and they reach the GraphQL execution layer unchanged.
"""

from typing import Any, Optional


class CrudGenError(Exception):
    """Base exception for crudgen errors."""

    def __init__(self, message: str, model_name: Optional[str] = None):
        self.model_name = model_name
        super().__init__(message)


class WhereValidationError(CrudGenError):
    """Raised by where-input collaborators when a unique selector is malformed."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        where: Optional[Any] = None,
    ):
        self.where = where
        super().__init__(message, model_name)


class HookError(CrudGenError):
    """Convenience base for errors raised by user supplied hooks."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        hook_name: Optional[str] = None,
    ):
        self.hook_name = hook_name
        super().__init__(message, model_name)


class StorageError(CrudGenError):
    """Raised by storage collaborators when a write cannot be applied."""


class RecordNotFound(StorageError):
    """Raised when the unique selector matches no record."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        lookup: Optional[dict[str, Any]] = None,
    ):
        self.lookup = lookup
        super().__init__(message, model_name)


class UpdateGeneratorError(CrudGenError):
    """Raised when update definitions cannot be generated for a model."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        self.field_name = field_name
        super().__init__(message, model_name)
